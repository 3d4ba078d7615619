# textreg/text/featurizer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from textreg.config.pipeline_config import PoolBackend
from textreg.config.text_config import TextConfig, Weighting
from textreg.text.encoder import encode, encode_many
from textreg.text.stopwords import resolve_stopwords
from textreg.text.tokenizer import Tokenizer
from textreg.text.vocabulary import Vocabulary, build_vocabulary


@dataclass(frozen=True)
class FittedFeaturizer:
    """
    FittedFeaturizer（FROZEN）

    Produced ONLY by TextFeaturizer.fit on training documents.
    apply / transform never look at anything but the frozen vocabulary.
    """

    vocabulary: Vocabulary
    weighting: Weighting

    @property
    def feature_names(self) -> list[str]:
        return list(self.vocabulary.tokens)

    def apply(self, document) -> np.ndarray:
        return encode(document, self.vocabulary, self.weighting)

    def transform(
        self,
        documents: Sequence,
        *,
        max_workers: int | None = 1,
        pool: PoolBackend | str = PoolBackend.PROCESS,
    ) -> np.ndarray:
        return encode_many(
            documents,
            self.vocabulary,
            self.weighting,
            max_workers=max_workers,
            pool=pool,
        )


class TextFeaturizer:
    """
    Two-phase text featurization: fit(train) → FittedFeaturizer → apply(doc)
    """

    def __init__(self, cfg: TextConfig | None = None):
        self.cfg = cfg or TextConfig()

    def tokenizer(self) -> Tokenizer:
        # unigrams: stop words are filtered by the vocabulary builder
        # n-grams : removed before n-grams are formed
        stop = resolve_stopwords(self.cfg.stopwords)
        if tuple(self.cfg.ngram_range) == (1, 1):
            return Tokenizer()
        return Tokenizer(ngram_range=tuple(self.cfg.ngram_range), stopwords=stop)

    def fit(self, documents: Sequence) -> FittedFeaturizer:
        vocabulary = build_vocabulary(
            documents,
            resolve_stopwords(self.cfg.stopwords),
            self.cfg.max_tokens,
            tokenizer=self.tokenizer(),
        )
        return FittedFeaturizer(vocabulary=vocabulary, weighting=Weighting(self.cfg.weighting))
