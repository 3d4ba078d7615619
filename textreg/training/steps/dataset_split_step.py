# textreg/training/steps/dataset_split_step.py
from __future__ import annotations

from textreg.data.corpus import initial_split
from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext


class DatasetSplitStep(PipelineStep):
    """
    Contract:
    - consumes ctx.documents
    - produces ctx.train_docs / ctx.test_docs
    """

    stage = "split"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        p = ctx.cfg.pipeline
        with self.inst.timer("initial_split"):
            ctx.train_docs, ctx.test_docs = initial_split(
                ctx.documents, prop=p.train_prop, seed=p.seed
            )
        ctx.metrics["n_train"] = len(ctx.train_docs)
        ctx.metrics["n_test"] = len(ctx.test_docs)
        return ctx
