# textreg/training/steps/featurize_step.py
from __future__ import annotations

import numpy as np

from textreg.pipeline.step import PipelineStep
from textreg.text.featurizer import TextFeaturizer
from textreg.training.context import TrainingContext


class FeaturizeStep(PipelineStep):
    """
    Contract:
    - fits the featurizer on ctx.train_docs ONLY
    - encodes train and test with that same fitted featurizer
    """

    stage = "featurize"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        p = ctx.cfg.pipeline

        with self.inst.timer("featurizer_fit"):
            fitted = TextFeaturizer(ctx.cfg.text).fit(ctx.train_docs)

        with self.inst.timer("featurizer_transform"):
            ctx.train_X = fitted.transform(ctx.train_docs, max_workers=p.max_workers, pool=p.pool)
            ctx.test_X = fitted.transform(ctx.test_docs, max_workers=p.max_workers, pool=p.pool)

        ctx.train_y = np.array([d.label for d in ctx.train_docs], dtype=float)
        ctx.test_y = np.array([d.label for d in ctx.test_docs], dtype=float)
        ctx.featurizer = fitted
        ctx.metrics["n_features"] = len(fitted.vocabulary)
        return ctx
