# textreg/text/stopwords.py
from __future__ import annotations

from typing import FrozenSet, Iterable, Union

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from textreg.utils.errors import InvalidInputError


def resolve_stopwords(source: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """
    "english" → scikit-learn English list
    "none" / None → empty
    iterable → lowercased set
    """
    if source is None:
        return frozenset()
    if isinstance(source, str):
        if source == "english":
            return frozenset(ENGLISH_STOP_WORDS)
        if source == "none":
            return frozenset()
        raise InvalidInputError(f"[Stopwords] unknown source: {source!r}")
    return frozenset(str(w).lower() for w in source)
