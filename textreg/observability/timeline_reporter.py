#!filepath: textreg/observability/timeline_reporter.py
from typing import Dict

from textreg.utils.logger import logs


class TimelineReporter:
    """
    Run timeline 报告：leaf timer → 耗时秒数
    """

    def __init__(self, timeline: Dict[str, float], run_id: str):
        self.timeline = timeline
        self.run_id = run_id

    def total(self) -> float:
        return float(sum(self.timeline.values()))

    def print(self) -> None:
        logs.info(f"[Timeline] ===== Run timeline for {self.run_id} =====")

        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")

        logs.info(f"[Timeline] Total{'':<27} {self.total():>8.3f}s")
        logs.info("[Timeline] ===========================================")
