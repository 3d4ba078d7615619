# textreg/training/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from textreg.config.app_config import AppConfig
from textreg.data.document import Document
from textreg.observability.instrumentation import Instrumentation
from textreg.pipeline.step import PipelineStep
from textreg.training.context import TrainingContext
from textreg.utils.logger import logs


class TrainingPipeline:
    """
    TrainingPipeline

    Semantics:
    - Pipeline owns the context
    - Steps execute semantics, in order
    - One run → one artifact directory: <artifact_dir>/<run_id>
    """

    def __init__(
            self,
            *,
            steps: List[PipelineStep],
            inst: Instrumentation,
            cfg: AppConfig,
    ):
        self.steps = steps
        self.inst = inst
        self.cfg = cfg

    def run(self, run_id: str, documents: Sequence[Document]) -> TrainingContext:
        logs.info(f"[TrainingPipeline] START run_id={run_id} documents={len(documents)}")

        ctx = TrainingContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            artifact_dir=Path(self.cfg.pipeline.artifact_dir) / run_id,
            documents=list(documents),
        )

        for step in self.steps:
            with step.timed():
                ctx = step.run(ctx)

        for name, value in ctx.metrics.items():
            self.inst.metrics.record(name, value)

        self.inst.generate_timeline_report(run_id)
        logs.info("[TrainingPipeline] DONE")
        return ctx
