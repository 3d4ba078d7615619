# textreg/api.py
"""
Core entry points.

    build_vocabulary(documents, stopwords, max_tokens) → Vocabulary
    encode(document, vocabulary, weighting)            → feature vector
    make_folds(documents, k, seed)                     → [(train, validation)]
    fit(features, labels, penalty, mixture)            → Model
    tune(documents, penalty_grid, k, seed)             → (best_penalty, metrics)
    evaluate(predictions, truths)                      → {rmse, r_squared}
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from textreg.config.model_config import SolverConfig
from textreg.config.pipeline_config import PoolBackend
from textreg.config.text_config import TextConfig
from textreg.text.encoder import encode
from textreg.text.vocabulary import build_vocabulary
from textreg.training.engines.evaluate_engine import evaluate
from textreg.training.engines.fitted_model import Model
from textreg.training.engines.fold_engine import make_folds
from textreg.training.engines.registry import predictor_for
from textreg.training.engines.tune_engine import TuneEngine
from textreg.utils.errors import InvalidInputError


def fit(
    features,
    labels,
    penalty: float,
    mixture: float = 1.0,
    *,
    solver: SolverConfig | None = None,
) -> Model:
    if not 0.0 <= mixture <= 1.0:
        raise InvalidInputError(f"mixture must be in [0, 1], got {mixture}")
    solver = (solver or SolverConfig()).model_copy(update={"mixture": mixture})
    return predictor_for(solver).fit(features, labels, penalty=penalty)


def predict(model: Model, features) -> np.ndarray:
    return model.predict(features)


def tune(
    documents: Sequence,
    penalty_grid: Sequence[float] | None = None,
    k: int = 10,
    seed: int = 1234,
    *,
    text: TextConfig | None = None,
    solver: SolverConfig | None = None,
    policy: str = "best",
    max_workers: int | None = 1,
    pool: PoolBackend | str = PoolBackend.PROCESS,
) -> Tuple[float, pd.DataFrame]:
    if penalty_grid is None:
        penalty_grid = np.logspace(-4, 0, 50)

    engine = TuneEngine(solver, policy=policy, max_workers=max_workers, pool=pool)
    result = engine.tune(documents, penalty_grid, k=k, seed=seed, text=text)
    return result.best_penalty, result.metrics


__all__ = [
    "build_vocabulary",
    "encode",
    "make_folds",
    "fit",
    "predict",
    "tune",
    "evaluate",
]
