# textreg/config/text_config.py
from __future__ import annotations

from enum import Enum
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Weighting(str, Enum):
    TF = "tf"
    TFIDF = "tfidf"


class TextConfig(BaseModel):
    """
    TextConfig（FROZEN）

    Tokenizer → Vocabulary → Encoder 的全部参数。
    Passed by value; never mutated after construction.
    """

    model_config = ConfigDict(frozen=True)

    max_tokens: int = Field(default=500, ge=0)
    weighting: Weighting = Weighting.TFIDF

    # "english" | "none" | explicit token list
    stopwords: Union[str, List[str]] = "english"

    ngram_range: Tuple[int, int] = (1, 1)

    @field_validator("ngram_range")
    @classmethod
    def _check_ngram_range(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        lo, hi = v
        if lo < 1 or hi < lo:
            raise ValueError(f"invalid ngram_range={v}")
        return v

    @field_validator("stopwords")
    @classmethod
    def _check_stopwords(cls, v):
        if isinstance(v, str) and v not in ("english", "none"):
            raise ValueError(f"unknown stopword source: {v!r}")
        return v
