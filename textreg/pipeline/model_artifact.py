# textreg/pipeline/model_artifact.py
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal

import joblib

from textreg.utils.logger import logs

MODEL_FILE = "model.joblib"
META_FILE = "artifact.json"


# ============================================================
# Model Spec (FROZEN)
# ============================================================
@dataclass(frozen=True)
class ModelSpec:
    family: Literal["lasso", "sgd", "null"]
    task: Literal["regression"]
    version: str


# ============================================================
# Model Artifact
# ============================================================
@dataclass(frozen=True)
class ModelArtifact:
    """
    ModelArtifact（FINAL / FROZEN）

    Semantics:
    - path always points to an artifact ROOT directory
    - model.joblib holds {"model", "featurizer"}: the coefficients are
      meaningless without the vocabulary they index
    """
    path: Path
    spec: ModelSpec
    penalty: float
    run_id: str | None = None
    metrics: dict[str, Any] | None = None
    created_at: datetime | None = None
    feature_names: list[str] | None = None


def save_model_artifact(
    *,
    artifact_dir: Path,
    spec: ModelSpec,
    model,
    featurizer,
    run_id: str | None = None,
    metrics: dict[str, Any] | None = None,
) -> ModelArtifact:
    artifact_dir = Path(artifact_dir)
    artifact_dir.mkdir(parents=True, exist_ok=True)

    joblib.dump({"model": model, "featurizer": featurizer}, artifact_dir / MODEL_FILE)

    created_at = datetime.now(timezone.utc)
    feature_names = list(featurizer.feature_names)

    meta = {
        "run_id": run_id,
        "created_at": created_at.isoformat(),
        "spec": {
            "family": spec.family,
            "task": spec.task,
            "version": spec.version,
        },
        "penalty": model.penalty,
        "mixture": model.mixture,
        "weighting": featurizer.weighting.value,
        "metrics": dict(metrics or {}),
        "feature_names": feature_names,
    }
    (artifact_dir / META_FILE).write_text(json.dumps(meta, indent=2, default=float))

    logs.info(f"[ModelArtifact] saved {spec.family}/{spec.version} → {artifact_dir}")

    return ModelArtifact(
        path=artifact_dir,
        spec=spec,
        penalty=model.penalty,
        run_id=run_id,
        metrics=meta["metrics"],
        created_at=created_at,
        feature_names=feature_names,
    )


def resolve_model_artifact_from_dir(artifact_dir: Path) -> ModelArtifact:
    """
    artifact.json → ModelArtifact（不加载模型本体）
    """
    artifact_dir = Path(artifact_dir)
    meta_path = artifact_dir / META_FILE
    if not meta_path.exists():
        raise FileNotFoundError(
            f"[ModelArtifact] {META_FILE} not found in {artifact_dir}"
        )

    meta = json.loads(meta_path.read_text())

    return ModelArtifact(
        path=artifact_dir,
        spec=ModelSpec(**meta["spec"]),
        penalty=float(meta["penalty"]),
        run_id=meta.get("run_id"),
        metrics=meta.get("metrics"),
        created_at=datetime.fromisoformat(meta["created_at"]),
        feature_names=meta.get("feature_names"),
    )


def load_model_artifact(artifact_dir: Path):
    """
    Returns (ModelArtifact, Model, FittedFeaturizer).
    """
    artifact = resolve_model_artifact_from_dir(artifact_dir)
    payload = joblib.load(Path(artifact_dir) / MODEL_FILE)
    return artifact, payload["model"], payload["featurizer"]
