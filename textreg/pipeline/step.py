# textreg/pipeline/step.py
from __future__ import annotations

from textreg.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. 一个 Step = 一段语义（split / tune / fit / evaluate / persist）
      2. 提供 Step 级时间边界（parent scope，不进 timeline）

    规则：
      - 计时只记录 Step 内部的叶子节点
      - Instrumentation 可选；Step 行为不依赖 inst 是否存在
    """

    stage: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx):
        raise NotImplementedError
