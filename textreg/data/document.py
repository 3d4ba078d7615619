# textreg/data/document.py
from __future__ import annotations

import math
from dataclasses import dataclass

from textreg.utils.errors import InvalidInputError


@dataclass(frozen=True)
class Document:
    """
    Document（FROZEN）

    - doc_id: unique within a corpus
    - text:   raw text, never mutated
    - label:  continuous target (e.g. year)
    """

    doc_id: str
    text: str
    label: float

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise InvalidInputError(
                f"[Document] text must be str, got {type(self.text).__name__} "
                f"(doc_id={self.doc_id})"
            )
        try:
            label = float(self.label)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(
                f"[Document] label is not numeric (doc_id={self.doc_id}): {self.label!r}"
            ) from e
        if not math.isfinite(label):
            raise InvalidInputError(
                f"[Document] label must be finite (doc_id={self.doc_id})"
            )
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "doc_id", str(self.doc_id))
