# textreg/training/steps/artifact_persist_step.py
from __future__ import annotations

from textreg.pipeline.model_artifact import save_model_artifact
from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext
from textreg.training.engines.registry import spec_from_config


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep

    Semantics:
    - persist model + fitted featurizer + metrics under the run directory
    - tuning metrics table saved next to it (metrics.csv)
    """

    stage = "persist"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.model is None or ctx.featurizer is None:
            raise RuntimeError("No fitted model / featurizer to persist")

        with self.inst.timer("persist"):
            ctx.model_artifact = save_model_artifact(
                artifact_dir=ctx.artifact_dir,
                spec=spec_from_config(ctx.cfg.solver),
                model=ctx.model,
                featurizer=ctx.featurizer,
                run_id=ctx.run_id,
                metrics=ctx.metrics,
            )
            if ctx.tune_result is not None:
                ctx.tune_result.metrics.to_csv(ctx.artifact_dir / "metrics.csv", index=False)

        return ctx
