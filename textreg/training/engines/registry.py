# textreg/training/engines/registry.py
from typing import Callable, Dict, Tuple

from textreg.config.model_config import SolverConfig
from textreg.pipeline.model_artifact import ModelSpec
from textreg.training.engines.model_train_engine import Predictor
from textreg.utils.errors import UserInputError
from textreg.training.engines.model import (
    CoordinateDescentLasso,
    NullPredictor,
    SklearnSGDRegressorPredictor,
)

_PREDICTOR_REGISTRY: Dict[
    Tuple[str, str, str],
    Callable[[SolverConfig], Predictor],
] = {
    ("lasso", "regression", "v1"): lambda cfg: CoordinateDescentLasso(cfg),
    ("sgd", "regression", "v1"): lambda cfg: SklearnSGDRegressorPredictor(cfg),
    ("null", "regression", "v1"): lambda cfg: NullPredictor(cfg),
}


def spec_from_config(cfg: SolverConfig) -> ModelSpec:
    return ModelSpec(family=cfg.family, task="regression", version=cfg.version)


def resolve_predictor(*, spec: ModelSpec, cfg: SolverConfig) -> Predictor:
    key = (spec.family, spec.task, spec.version)

    if key not in _PREDICTOR_REGISTRY:
        available = ", ".join(str(k) for k in _PREDICTOR_REGISTRY)
        raise UserInputError(
            f"No Predictor for {key}. Available: {available}"
        )

    return _PREDICTOR_REGISTRY[key](cfg)


def predictor_for(cfg: SolverConfig) -> Predictor:
    return resolve_predictor(spec=spec_from_config(cfg), cfg=cfg)
