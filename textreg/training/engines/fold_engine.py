# textreg/training/engines/fold_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from textreg.utils.errors import InsufficientDataError, InvalidInputError


@dataclass(frozen=True)
class Fold:
    """
    One resample: validation = exactly one fold, train = the rest.
    Index arrays are sorted (original corpus order).
    """

    index: int
    train_index: np.ndarray
    validation_index: np.ndarray
    train: Tuple
    validation: Tuple

    def __iter__(self):
        # (train, validation) unpacking
        return iter((self.train, self.validation))


def assign_folds(n: int, k: int, seed: int) -> np.ndarray:
    """
    fold id per position; sizes differ by at most one.
    Same (n, k, seed) → same assignment.
    """
    if k < 2:
        raise InvalidInputError(f"[Folds] k must be >= 2, got {k}")
    if n < k:
        raise InsufficientDataError(f"[Folds] {n} documents < {k} folds")

    rng = np.random.default_rng(seed)
    order = rng.permutation(n)

    fold_of = np.empty(n, dtype=int)
    fold_of[order] = np.arange(n) % k
    return fold_of


def make_folds(documents: Sequence, k: int = 10, seed: int = 1234) -> List[Fold]:
    items = list(documents)
    fold_of = assign_folds(len(items), k, seed)

    folds = []
    for f in range(k):
        val_idx = np.flatnonzero(fold_of == f)
        train_idx = np.flatnonzero(fold_of != f)
        folds.append(
            Fold(
                index=f,
                train_index=train_idx,
                validation_index=val_idx,
                train=tuple(items[i] for i in train_idx),
                validation=tuple(items[i] for i in val_idx),
            )
        )
    return folds
