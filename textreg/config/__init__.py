from .app_config import AppConfig
from .log_config import LogConfig
from .text_config import TextConfig, Weighting
from .model_config import SolverConfig
from .tuning_config import TuningConfig
from .pipeline_config import PipelineConfig, PoolBackend

__all__ = [
    "AppConfig",
    "LogConfig",
    "TextConfig",
    "Weighting",
    "SolverConfig",
    "TuningConfig",
    "PipelineConfig",
    "PoolBackend",
]
