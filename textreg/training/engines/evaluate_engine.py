# textreg/training/engines/evaluate_engine.py
from __future__ import annotations

from typing import Dict

import numpy as np

from textreg.utils.errors import DegenerateInputError, InvalidInputError
from textreg.utils.logger import logs


def rmse(predictions, truths) -> float:
    p, t = _check(predictions, truths)
    if p.size == 0:
        return float("nan")
    return float(np.sqrt(np.mean((p - t) ** 2)))


def r_squared(predictions, truths, *, strict: bool = False) -> float:
    """
    1 − SSR / SST.

    Undefined for < 2 observations or constant truths:
    NaN + warning, or DegenerateInputError when strict.
    """
    p, t = _check(predictions, truths)

    reason = None
    if p.size < 2:
        reason = f"{p.size} observation(s)"
    else:
        sst = float(np.sum((t - t.mean()) ** 2))
        if sst == 0.0:
            reason = "constant truths"

    if reason is not None:
        if strict:
            raise DegenerateInputError(f"[Evaluate] R² undefined: {reason}")
        logs.warning(f"[Evaluate] R² undefined ({reason}) -> NaN")
        return float("nan")

    ssr = float(np.sum((t - p) ** 2))
    return 1.0 - ssr / sst


def evaluate(predictions, truths, *, strict: bool = False) -> Dict[str, float]:
    return {
        "rmse": rmse(predictions, truths),
        "r_squared": r_squared(predictions, truths, strict=strict),
    }


class RegressionEvaluateEngine:
    """
    RegressionEvaluateEngine（FINAL）

    Contract:
    - model is any fitted Model (predict(X))
    - metrics = {rmse, r_squared}
    """

    def evaluate(self, *, model, X, y) -> tuple[np.ndarray, Dict[str, float]]:
        preds = model.predict(X)
        return preds, evaluate(preds, y)


def _check(predictions, truths):
    p = np.asarray(predictions, dtype=float).reshape(-1)
    t = np.asarray(truths, dtype=float).reshape(-1)
    if p.shape != t.shape:
        raise InvalidInputError(
            f"[Evaluate] length mismatch: {p.size} predictions vs {t.size} truths"
        )
    return p, t
