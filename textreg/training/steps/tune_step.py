# textreg/training/steps/tune_step.py
from __future__ import annotations

from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext
from textreg.training.engines.tune_engine import TuneEngine


class TuneStep(PipelineStep):
    """
    Contract:
    - consumes ctx.train_docs (test docs are never seen here)
    - produces ctx.tune_result
    """

    stage = "tune"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        cfg = ctx.cfg
        engine = TuneEngine(
            cfg.solver,
            policy=cfg.tuning.policy,
            max_workers=cfg.pipeline.max_workers,
            pool=cfg.pipeline.pool,
        )

        with self.inst.timer("tune"):
            ctx.tune_result = engine.tune(
                ctx.train_docs,
                cfg.tuning.penalty_grid(),
                k=cfg.tuning.folds,
                seed=cfg.tuning.seed,
                text=cfg.text,
            )

        ctx.metrics["best_penalty"] = ctx.tune_result.best_penalty
        return ctx
