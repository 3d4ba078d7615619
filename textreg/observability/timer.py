#!filepath: textreg/observability/timer.py
import time
from typing import Dict


class Timer:
    """
    高精度计时器
    - start(name)
    - end(name) → 耗时秒数（未 start 的 name 返回 0.0）
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}

    def start(self, name: str) -> None:
        if self.enabled:
            self._start[name] = time.perf_counter()

    def running(self, name: str) -> bool:
        return name in self._start

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        return time.perf_counter() - self._start.pop(name)
