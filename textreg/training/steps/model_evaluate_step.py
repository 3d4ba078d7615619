# textreg/training/steps/model_evaluate_step.py
from __future__ import annotations

from textreg.config.model_config import SolverConfig
from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext
from textreg.training.engines.evaluate_engine import RegressionEvaluateEngine
from textreg.training.engines.model.null_train_engine import NullPredictor
from textreg.utils.logger import logs


class ModelEvaluateStep(PipelineStep):
    """
    Held-out evaluation on the test split, plus the null-model baseline.
    """

    stage = "evaluate"

    def __init__(self, inst=None):
        super().__init__(inst)
        self.engine = RegressionEvaluateEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.inst.timer("evaluate"):
            preds, scores = self.engine.evaluate(model=ctx.model, X=ctx.test_X, y=ctx.test_y)

            baseline = NullPredictor(SolverConfig(family="null")).fit(ctx.train_X, ctx.train_y)
            _, null_scores = self.engine.evaluate(model=baseline, X=ctx.test_X, y=ctx.test_y)

        ctx.predictions = preds
        ctx.metrics["test_rmse"] = scores["rmse"]
        ctx.metrics["test_r_squared"] = scores["r_squared"]
        ctx.metrics["null_rmse"] = null_scores["rmse"]

        logs.info(
            f"[ModelEvaluateStep] test rmse={scores['rmse']:.4f} "
            f"r_squared={scores['r_squared']:.4f} null_rmse={null_scores['rmse']:.4f}"
        )
        return ctx
