#!filepath: textreg/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.retry import Retry
from .config.app_config import AppConfig

# alias 简化调用
retry = Retry

from .api import build_vocabulary, encode, make_folds, fit, predict, tune, evaluate

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "retry",
    "AppConfig",
    "build_vocabulary", "encode", "make_folds", "fit", "predict", "tune", "evaluate",
    "__version__",
]
