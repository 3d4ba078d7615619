#!filepath: textreg/config/model_config.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SolverConfig(BaseModel):
    """
    SolverConfig（FROZEN）

    mixture = 1.0 → pure lasso, 0.0 → ridge.
    """

    model_config = ConfigDict(frozen=True)

    family: Literal["lasso", "sgd", "null"] = "lasso"
    version: str = "v1"

    mixture: float = Field(default=1.0, ge=0.0, le=1.0)
    max_iter: int = Field(default=1000, ge=1)
    tol: float = Field(default=1e-4, gt=0.0)
    max_seconds: Optional[float] = Field(default=None, gt=0.0)

    # relaxed-tolerance retries on ConvergenceError
    retries: int = Field(default=1, ge=0)
    relax_factor: float = Field(default=10.0, gt=1.0)
