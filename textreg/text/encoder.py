# textreg/text/encoder.py
from __future__ import annotations

from functools import partial
from typing import Sequence

import numpy as np

from textreg.config.pipeline_config import PoolBackend
from textreg.config.text_config import Weighting
from textreg.pipeline.parallel.executor import ParallelExecutor
from textreg.pipeline.parallel.types import ParallelKind
from textreg.text.vocabulary import Vocabulary, text_of


def term_counts(document, vocabulary: Vocabulary) -> np.ndarray:
    """
    Raw counts of vocabulary tokens; OOV tokens contribute nothing.
    """
    vec = np.zeros(len(vocabulary), dtype=float)
    for token in vocabulary.tokenizer.tokenize(text_of(document)):
        idx = vocabulary.get(token)
        if idx is not None:
            vec[idx] += 1.0
    return vec


def encode(
    document,
    vocabulary: Vocabulary,
    weighting: Weighting | str = Weighting.TFIDF,
) -> np.ndarray:
    """
    Feature vector of length |vocabulary|.

    tf    : raw count
    tfidf : count × log(N / df), df and N frozen in the vocabulary
    """
    counts = term_counts(document, vocabulary)
    if Weighting(weighting) == Weighting.TFIDF:
        return counts * vocabulary.idf
    return counts


def encode_many(
    documents: Sequence,
    vocabulary: Vocabulary,
    weighting: Weighting | str = Weighting.TFIDF,
    *,
    max_workers: int | None = 1,
    pool: PoolBackend | str = PoolBackend.PROCESS,
) -> np.ndarray:
    """
    (n_documents, |vocabulary|) matrix; row order follows `documents`.
    """
    rows = ParallelExecutor.run(
        kind=ParallelKind.DOCUMENT,
        items=documents,
        handler=partial(encode, vocabulary=vocabulary, weighting=Weighting(weighting)),
        max_workers=max_workers,
        pool=pool,
    )
    if not rows:
        return np.zeros((0, len(vocabulary)), dtype=float)
    return np.vstack(rows)
