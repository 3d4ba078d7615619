# textreg/text/tokenizer.py
from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Iterator, Tuple

from textreg.utils.errors import InvalidInputError

# word characters without "_", with inner apostrophes kept ("don't", "court’s")
_TOKEN_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


@dataclass(frozen=True)
class Tokenizer:
    """
    Tokenizer（FROZEN）

    - lowercases, drops punctuation / whitespace
    - optional stop-word removal BEFORE n-grams are formed
    - n-grams are space-joined ("due process")
    """

    ngram_range: Tuple[int, int] = (1, 1)
    stopwords: FrozenSet[str] = frozenset()

    def __post_init__(self):
        lo, hi = self.ngram_range
        if lo < 1 or hi < lo:
            raise InvalidInputError(f"[Tokenizer] invalid ngram_range={self.ngram_range}")
        object.__setattr__(self, "stopwords", frozenset(self.stopwords))

    def words(self, text: str) -> Iterator[str]:
        if not isinstance(text, str):
            raise InvalidInputError(
                f"[Tokenizer] expected str, got {type(text).__name__}"
            )
        for m in _TOKEN_RE.finditer(text.lower()):
            word = m.group(0)
            if word not in self.stopwords:
                yield word

    def tokenize(self, text: str) -> Iterator[str]:
        """
        Lazy token stream. Deterministic for identical input.
        """
        lo, hi = self.ngram_range
        if (lo, hi) == (1, 1):
            yield from self.words(text)
            return

        window: deque = deque(maxlen=hi)
        for word in self.words(text):
            window.append(word)
            size = len(window)
            # every n-gram ending at the current word
            for n in range(lo, min(hi, size) + 1):
                yield " ".join(list(window)[size - n:])

    __call__ = tokenize


DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> Iterator[str]:
    return DEFAULT_TOKENIZER.tokenize(text)
