# textreg/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from textreg.config.app_config import AppConfig
from textreg.data.document import Document
from textreg.pipeline.model_artifact import ModelArtifact
from textreg.text.featurizer import FittedFeaturizer
from textreg.training.engines.fitted_model import Model
from textreg.training.engines.tune_engine import TuneResult


@dataclass
class TrainingContext:
    """
    TrainingContext

    Semantics:
    - One context == one training run
    - run_id is immutable and mandatory
    - Steps fill the slots left to right; nothing is rewritten
    """

    # -------------------------
    # Identity
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: AppConfig
    inst: Any
    artifact_dir: Path
    documents: List[Document]

    # -------------------------
    # Split
    # -------------------------
    train_docs: Optional[List[Document]] = None
    test_docs: Optional[List[Document]] = None

    # -------------------------
    # Tuning
    # -------------------------
    tune_result: Optional[TuneResult] = None

    # -------------------------
    # Final fit
    # -------------------------
    featurizer: Optional[FittedFeaturizer] = None
    train_X: Optional[np.ndarray] = None
    train_y: Optional[np.ndarray] = None
    test_X: Optional[np.ndarray] = None
    test_y: Optional[np.ndarray] = None
    model: Optional[Model] = None

    # -------------------------
    # Results
    # -------------------------
    predictions: Optional[np.ndarray] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
    model_artifact: Optional[ModelArtifact] = None
