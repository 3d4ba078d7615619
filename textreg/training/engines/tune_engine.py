# textreg/training/engines/tune_engine.py
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from textreg.config.model_config import SolverConfig
from textreg.config.pipeline_config import PoolBackend
from textreg.config.text_config import TextConfig
from textreg.pipeline.parallel.executor import ParallelExecutor
from textreg.pipeline.parallel.types import ParallelKind
from textreg.text.featurizer import TextFeaturizer
from textreg.training.engines.evaluate_engine import evaluate
from textreg.training.engines.fold_engine import Fold, make_folds
from textreg.training.engines.registry import predictor_for
from textreg.utils.errors import ConvergenceError, InvalidInputError
from textreg.utils.logger import logs
from textreg.utils.retry import Retry

METRIC_COLUMNS = [
    "penalty",
    "rmse_mean",
    "rmse_std_err",
    "r_squared_mean",
    "r_squared_std_err",
    "n_folds",
    "n_failed",
]


@dataclass(frozen=True)
class FoldData:
    """Encoded matrices of one resample (featurizer fit on its train side)."""

    fold: int
    X_train: np.ndarray
    y_train: np.ndarray
    X_val: np.ndarray
    y_val: np.ndarray


@dataclass(frozen=True)
class CellTask:
    data: FoldData
    penalty: float
    solver: SolverConfig


@dataclass(frozen=True)
class CellResult:
    fold: int
    penalty: float
    rmse: float
    r_squared: float
    n_nonzero: int
    error: str | None = None


@dataclass(frozen=True)
class TuneResult:
    best_penalty: float
    policy: str
    metrics: pd.DataFrame   # one row per penalty
    cells: pd.DataFrame     # one row per (fold, penalty)


def run_cell(task: CellTask) -> CellResult:
    """
    Fit on one fold's train side, score its validation side.

    Module-level and stateless: safe for process pools.
    ConvergenceError is retried with a relaxed tolerance, then recorded.
    """
    d = task.data
    predictor = predictor_for(task.solver)

    try:
        model = Retry.run(
            predictor.fit,
            d.X_train,
            d.y_train,
            max_attempts=task.solver.retries + 1,
            relax_factor=task.solver.relax_factor,
            penalty=task.penalty,
            tol=task.solver.tol,
        )
    except ConvergenceError as e:
        return CellResult(
            fold=d.fold,
            penalty=task.penalty,
            rmse=float("nan"),
            r_squared=float("nan"),
            n_nonzero=-1,
            error=str(e),
        )

    preds = predictor.predict(model, d.X_val)
    scores = evaluate(preds, d.y_val)
    return CellResult(
        fold=d.fold,
        penalty=task.penalty,
        rmse=scores["rmse"],
        r_squared=scores["r_squared"],
        n_nonzero=model.n_nonzero,
    )


def _mean_and_sem(values: np.ndarray) -> tuple[float, float]:
    vals = values[np.isfinite(values)]
    if vals.size == 0:
        return float("nan"), float("nan")
    if vals.size == 1:
        return float(vals[0]), float("nan")
    return float(vals.mean()), float(stats.sem(vals))


def aggregate(cells: pd.DataFrame) -> pd.DataFrame:
    """
    (fold, penalty) cells → one row per penalty (mean, standard error).
    """
    rows = []
    for penalty, group in cells.groupby("penalty", sort=True):
        rmse_mean, rmse_se = _mean_and_sem(group["rmse"].to_numpy(dtype=float))
        rsq_mean, rsq_se = _mean_and_sem(group["r_squared"].to_numpy(dtype=float))
        failed = int(group["error"].notna().sum())
        rows.append(
            {
                "penalty": float(penalty),
                "rmse_mean": rmse_mean,
                "rmse_std_err": rmse_se,
                "r_squared_mean": rsq_mean,
                "r_squared_std_err": rsq_se,
                "n_folds": int(len(group) - failed),
                "n_failed": failed,
            }
        )
    return pd.DataFrame(rows, columns=METRIC_COLUMNS)


def select_penalty(metrics: pd.DataFrame, policy: str = "best") -> float:
    """
    best        : min mean RMSE; ties → smaller penalty
    one_std_err : largest penalty with mean RMSE ≤ best + its std err
    """
    valid = metrics[np.isfinite(metrics["rmse_mean"])]
    if valid.empty:
        raise ConvergenceError("[Tuner] every (fold, penalty) cell failed; nothing to select")

    best_rmse = float(valid["rmse_mean"].min())
    ties = valid[valid["rmse_mean"] <= best_rmse + 1e-12 * max(1.0, abs(best_rmse))]
    best = ties.sort_values("penalty").iloc[0]

    if policy == "best":
        return float(best["penalty"])

    if policy == "one_std_err":
        se = best["rmse_std_err"]
        limit = best_rmse + (0.0 if not math.isfinite(se) else float(se))
        within = valid[valid["rmse_mean"] <= limit]
        return float(within["penalty"].max())

    raise InvalidInputError(f"[Tuner] unknown selection policy: {policy!r}")


class TuneEngine:
    """
    TuneEngine（FINAL）

    Semantics:
    - every (fold, penalty) cell is an independent task
    - per-cell failures → NaN row, never abort the sweep
    - one aggregation step merges all cells
    """

    def __init__(
        self,
        solver: SolverConfig | None = None,
        *,
        policy: str = "best",
        max_workers: int | None = 1,
        pool: PoolBackend | str = PoolBackend.PROCESS,
    ):
        self.solver = solver or SolverConfig()
        self.policy = policy
        self.max_workers = max_workers
        self.pool = pool

    # --------------------------------------------------
    # documents → folds → encoded matrices
    # --------------------------------------------------
    def encode_folds(
        self,
        folds: Sequence[Fold],
        text: TextConfig,
    ) -> List[FoldData]:
        """
        The featurizer is re-fit on every fold's train side:
        validation documents never reach vocabulary / IDF.
        """
        featurizer = TextFeaturizer(text)
        out = []
        for fold in folds:
            fitted = featurizer.fit(fold.train)
            logs.debug(
                f"[Tuner] fold={fold.index} train={len(fold.train)} "
                f"validation={len(fold.validation)} vocabulary={len(fitted.vocabulary)}"
            )
            out.append(
                FoldData(
                    fold=fold.index,
                    X_train=fitted.transform(fold.train),
                    y_train=np.array([d.label for d in fold.train], dtype=float),
                    X_val=fitted.transform(fold.validation),
                    y_val=np.array([d.label for d in fold.validation], dtype=float),
                )
            )
        return out

    def tune(
        self,
        documents: Sequence,
        penalty_grid: Sequence[float],
        *,
        k: int = 10,
        seed: int = 1234,
        text: TextConfig | None = None,
    ) -> TuneResult:
        folds = make_folds(documents, k=k, seed=seed)
        data = self.encode_folds(folds, text or TextConfig())
        return self.tune_matrices(data, penalty_grid)

    # --------------------------------------------------
    # encoded matrices → cells → metrics
    # --------------------------------------------------
    def tune_matrices(
        self,
        data: Sequence[FoldData],
        penalty_grid: Sequence[float],
    ) -> TuneResult:
        grid = sorted({float(g) for g in penalty_grid})
        if not grid:
            raise InvalidInputError("[Tuner] empty penalty grid")
        if any(not math.isfinite(g) or g < 0 for g in grid):
            raise InvalidInputError(f"[Tuner] penalties must be finite and >= 0: {grid}")

        tasks = [
            CellTask(data=d, penalty=g, solver=self.solver)
            for d in data
            for g in grid
        ]

        logs.info(
            f"[Tuner] start folds={len(data)} grid={len(grid)} "
            f"cells={len(tasks)} family={self.solver.family}"
        )

        results = ParallelExecutor.run(
            kind=ParallelKind.CELL,
            items=tasks,
            handler=run_cell,
            max_workers=self.max_workers,
            pool=self.pool,
        )

        for r in results:
            if r.error is not None:
                logs.warning(
                    f"[Tuner] cell fold={r.fold} penalty={r.penalty:.4g} failed: {r.error}"
                )

        cells = pd.DataFrame(
            [asdict(r) for r in results],
            columns=["fold", "penalty", "rmse", "r_squared", "n_nonzero", "error"],
        ).sort_values(["penalty", "fold"], ignore_index=True)

        metrics = aggregate(cells)
        best = select_penalty(metrics, self.policy)

        logs.info(f"[Tuner] DONE policy={self.policy} best_penalty={best:.6g}")
        return TuneResult(best_penalty=best, policy=self.policy, metrics=metrics, cells=cells)
