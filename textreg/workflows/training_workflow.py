# textreg/workflows/training_workflow.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from textreg.config.app_config import AppConfig
from textreg.data.corpus import load_corpus
from textreg.observability.instrumentation import Instrumentation
from textreg.training.context import TrainingContext
from textreg.training.pipeline import TrainingPipeline
from textreg.training.steps.artifact_persist_step import ArtifactPersistStep
from textreg.training.steps.dataset_split_step import DatasetSplitStep
from textreg.training.steps.featurize_step import FeaturizeStep
from textreg.training.steps.model_evaluate_step import ModelEvaluateStep
from textreg.training.steps.model_train_step import ModelTrainStep
from textreg.training.steps.tune_step import TuneStep
from textreg.utils.logger import logs


def build_training_pipeline(cfg: AppConfig, *, persist: bool = True) -> TrainingPipeline:
    inst = Instrumentation()

    steps = [
        DatasetSplitStep(inst),
        TuneStep(inst),
        FeaturizeStep(inst),
        ModelTrainStep(inst),
        ModelEvaluateStep(inst),
    ]
    if persist:
        steps.append(ArtifactPersistStep(inst))

    return TrainingPipeline(steps=steps, inst=inst, cfg=cfg)


def new_run_id() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


@logs.catch("training run failed", log_inputs=True)
def run_training(
    corpus: str | Path,
    cfg: AppConfig,
    *,
    id_col: str = "id",
    text_col: str = "text",
    label_col: str = "year",
    run_id: str | None = None,
) -> TrainingContext:
    documents = load_corpus(corpus, id_col=id_col, text_col=text_col, label_col=label_col)
    pipeline = build_training_pipeline(cfg)
    return pipeline.run(run_id or new_run_id(), documents)
