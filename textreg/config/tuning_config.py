# textreg/config/tuning_config.py
from __future__ import annotations

from typing import List, Literal, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator


class TuningConfig(BaseModel):
    """
    TuningConfig（FROZEN）

    grid:
    - explicit `grid` wins
    - otherwise `grid_size` log-spaced values in [grid_min, grid_max]
    """

    model_config = ConfigDict(frozen=True)

    folds: int = Field(default=10, ge=2)
    seed: int = 1234

    grid: Optional[List[float]] = None
    grid_min: float = Field(default=1e-4, gt=0.0)
    grid_max: float = Field(default=1.0, gt=0.0)
    grid_size: int = Field(default=50, ge=1)

    policy: Literal["best", "one_std_err"] = "best"

    @model_validator(mode="after")
    def _check_grid(self):
        if self.grid is not None:
            if not self.grid:
                raise ValueError("grid must not be empty")
            if any(g < 0 for g in self.grid):
                raise ValueError("penalties must be >= 0")
        elif self.grid_max < self.grid_min:
            raise ValueError("grid_max must be >= grid_min")
        return self

    def penalty_grid(self) -> List[float]:
        if self.grid is not None:
            return sorted(float(g) for g in self.grid)
        return [
            float(x)
            for x in np.logspace(
                np.log10(self.grid_min), np.log10(self.grid_max), self.grid_size
            )
        ]
