#!filepath: textreg/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .text_config import TextConfig
from .model_config import SolverConfig
from .tuning_config import TuningConfig
from .pipeline_config import PipelineConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    textreg/config/app_config.py → textreg/config → textreg → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


# env var → (section, key, caster)
_ENV_OVERRIDES = {
    "TEXTREG_LOG_LEVEL": ("log", "level", str),
    "TEXTREG_ARTIFACT_DIR": ("pipeline", "artifact_dir", str),
    "TEXTREG_MAX_WORKERS": ("pipeline", "max_workers", int),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    tuning: TuningConfig = Field(default_factory=TuningConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 textreg/config/base.yml
        - 不依赖当前工作目录
        """
        root = project_root()

        # 1) .env（项目根目录）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Config root must be a mapping: {path}")

        # 4) env 覆盖
        for var, (section, key, cast) in _ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value:
                raw.setdefault(section, {})[key] = cast(value)

        return cls(**raw)
