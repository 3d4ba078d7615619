# textreg/text/vocabulary.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from textreg.data.document import Document
from textreg.text.stopwords import resolve_stopwords
from textreg.text.tokenizer import DEFAULT_TOKENIZER, Tokenizer
from textreg.utils.errors import EmptyVocabularyError, InvalidInputError
from textreg.utils.logger import logs


@dataclass(frozen=True)
class Vocabulary:
    """
    Vocabulary（FROZEN）

    Semantics:
    - tokens[i] ⇔ feature column i ⇔ coefficient i
    - document_frequency / n_documents are frozen from the training corpus
      and are the only source of IDF (test data never touches them)
    - tokenizer is part of the vocabulary: encoding must tokenize
      exactly as the vocabulary was built
    """

    tokens: Tuple[str, ...]
    document_frequency: Tuple[int, ...]
    n_documents: int
    tokenizer: Tokenizer = DEFAULT_TOKENIZER

    _index: Dict[str, int] = field(init=False, repr=False, compare=False)
    _idf: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        tokens = tuple(self.tokens)
        dfs = tuple(int(x) for x in self.document_frequency)
        if len(tokens) != len(dfs):
            raise InvalidInputError(
                f"[Vocabulary] {len(tokens)} tokens vs {len(dfs)} frequencies"
            )
        if len(set(tokens)) != len(tokens):
            raise InvalidInputError("[Vocabulary] duplicate tokens")
        if any(d < 1 or d > self.n_documents for d in dfs):
            raise InvalidInputError("[Vocabulary] document frequency out of range")

        object.__setattr__(self, "tokens", tokens)
        object.__setattr__(self, "document_frequency", dfs)
        object.__setattr__(self, "_index", {t: i for i, t in enumerate(tokens)})

        if tokens:
            idf = np.log(self.n_documents / np.asarray(dfs, dtype=float))
        else:
            idf = np.zeros(0, dtype=float)
        idf.setflags(write=False)
        object.__setattr__(self, "_idf", idf)

    # -------------------------
    # lookups
    # -------------------------
    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __iter__(self):
        return iter(self.tokens)

    def get(self, token: str) -> Optional[int]:
        return self._index.get(token)

    def index_of(self, token: str) -> int:
        try:
            return self._index[token]
        except KeyError:
            raise KeyError(f"token not in vocabulary: {token!r}") from None

    def token_at(self, index: int) -> str:
        return self.tokens[index]

    @property
    def idf(self) -> np.ndarray:
        return self._idf

    @classmethod
    def empty(cls, tokenizer: Tokenizer = DEFAULT_TOKENIZER) -> "Vocabulary":
        return cls(tokens=(), document_frequency=(), n_documents=0, tokenizer=tokenizer)


def text_of(document) -> str:
    if isinstance(document, Document):
        return document.text
    if isinstance(document, str):
        return document
    raise InvalidInputError(
        f"expected Document or str, got {type(document).__name__}"
    )


def document_frequencies(
    documents: Iterable, tokenizer: Tokenizer = DEFAULT_TOKENIZER
) -> Tuple[Counter, int]:
    df: Counter = Counter()
    n = 0
    for doc in documents:
        df.update(set(tokenizer.tokenize(text_of(doc))))
        n += 1
    return df, n


def build_vocabulary(
    documents: Sequence,
    stopwords: Union[str, Iterable[str], None] = frozenset(),
    max_tokens: int = 500,
    *,
    tokenizer: Tokenizer = DEFAULT_TOKENIZER,
) -> Vocabulary:
    """
    Top-K tokens by document frequency.

    - stop words discarded ("english" / "none" / iterable, case-insensitive)
    - ordering: df desc, then token asc (deterministic)
    """
    if max_tokens < 0:
        raise InvalidInputError(f"[Vocabulary] max_tokens must be >= 0, got {max_tokens}")

    stop = resolve_stopwords(stopwords)
    df, n = document_frequencies(documents, tokenizer)

    ranked = sorted(
        ((tok, cnt) for tok, cnt in df.items() if tok not in stop),
        key=lambda kv: (-kv[1], kv[0]),
    )[:max_tokens]

    if not ranked:
        raise EmptyVocabularyError(
            f"[Vocabulary] no token survived filtering "
            f"(documents={n}, max_tokens={max_tokens}, stopwords={len(stop)})"
        )

    logs.info(
        f"[Vocabulary] built size={len(ranked)} from documents={n} "
        f"(candidates={len(df)})"
    )

    return Vocabulary(
        tokens=tuple(t for t, _ in ranked),
        document_frequency=tuple(c for _, c in ranked),
        n_documents=n,
        tokenizer=tokenizer,
    )
