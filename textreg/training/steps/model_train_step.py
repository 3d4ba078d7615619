# textreg/training/steps/model_train_step.py
from __future__ import annotations

from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext
from textreg.training.engines.registry import predictor_for
from textreg.utils.logger import logs
from textreg.utils.retry import Retry


class ModelTrainStep(PipelineStep):
    """
    Contract:
    - consumes ctx.train_X / ctx.train_y / ctx.tune_result
    - produces ctx.model (whole training split, selected penalty)
    """

    stage = "train"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        solver = ctx.cfg.solver
        penalty = ctx.tune_result.best_penalty
        predictor = predictor_for(solver)

        with self.inst.timer("final_fit"):
            ctx.model = Retry.run(
                predictor.fit,
                ctx.train_X,
                ctx.train_y,
                max_attempts=solver.retries + 1,
                relax_factor=solver.relax_factor,
                penalty=penalty,
                tol=solver.tol,
            )

        logs.info(
            f"[ModelTrainStep] fitted {solver.family} penalty={penalty:.6g} "
            f"nonzero={ctx.model.n_nonzero}/{ctx.model.n_features} "
            f"sweeps={ctx.model.n_iter}"
        )
        ctx.metrics["n_nonzero"] = ctx.model.n_nonzero
        return ctx
