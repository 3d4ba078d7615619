# textreg/config/pipeline_config.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PoolBackend(str, Enum):
    PROCESS = "process"
    THREAD = "thread"


class PipelineConfig(BaseModel):
    # share of the corpus kept for training
    train_prop: float = Field(default=0.75, gt=0.0, lt=1.0)
    seed: int = 1234

    max_workers: Optional[int] = None
    pool: PoolBackend = PoolBackend.PROCESS

    artifact_dir: str = "artifacts"
