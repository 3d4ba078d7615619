#!filepath: textreg/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict

from textreg.observability.timer import Timer
from textreg.observability.timeline_reporter import TimelineReporter
from textreg.utils.logger import logs


@dataclass
class MetricRecorder:
    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any) -> None:
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting + Parent scope）

    规则：
    1. Timeline 只记录叶子节点（record=True）
    2. 父级 timer（record=False）只界定 wall-time，不产生副作用
    3. 不在热路径打日志
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        record=True  : leaf, written to the timeline
        record=False : parent scope only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def generate_timeline_report(self, run_id: str) -> None:
        TimelineReporter(self.timeline, run_id).print()


class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, run_id: str) -> None:
        return None


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
