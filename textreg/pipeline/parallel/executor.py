# textreg/pipeline/parallel/executor.py
from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable

from textreg.config.pipeline_config import PoolBackend
from textreg.pipeline.parallel.types import ParallelKind
from textreg.utils.logger import logs


class ParallelExecutor:
    """
    ParallelExecutor

    - 统一的 worker-pool 封装（process / thread）
    - handler 之间无共享可变状态
    - 结果按 items 的输入顺序返回（单点归并）
    - handler 异常直接抛出；需要隔离失败的 handler 自己捕获
    """

    @staticmethod
    def run(
            *,
            kind: ParallelKind,
            items: Iterable[Any],
            handler: Callable[[Any], Any],
            max_workers: int | None = None,
            pool: PoolBackend | str = PoolBackend.PROCESS,
    ) -> list[Any]:
        items = list(items)
        if not items:
            logs.info(f"[ParallelExecutor] kind={kind.value} no items to process")
            return []

        workers = ParallelExecutor._resolve_workers(items, max_workers)

        logs.info(
            f"[ParallelExecutor] start "
            f"kind={kind.value} total={len(items)} workers={workers}"
        )

        if workers == 1:
            return ParallelExecutor._run_sequential(items, handler)
        return ParallelExecutor._run_parallel(items, handler, workers, PoolBackend(pool))

    # ---------------- internal ----------------

    @staticmethod
    def _resolve_workers(items: list, max_workers: int | None) -> int:
        cpu = os.cpu_count() or 1
        if max_workers is None:
            return max(1, min(cpu, len(items)))
        return max(1, min(max_workers, len(items)))

    @staticmethod
    def _run_sequential(
            items: list,
            handler: Callable[[Any], Any],
    ) -> list[Any]:
        return [handler(item) for item in items]

    @staticmethod
    def _run_parallel(
            items: list,
            handler: Callable[[Any], Any],
            workers: int,
            pool: PoolBackend,
    ) -> list[Any]:
        executor_cls = ProcessPoolExecutor if pool == PoolBackend.PROCESS else ThreadPoolExecutor

        results: list[Any] = [None] * len(items)
        with executor_cls(max_workers=workers) as ex:
            futures = {
                ex.submit(handler, item): i
                for i, item in enumerate(items)
            }
            for fut in as_completed(futures):
                results[futures[fut]] = fut.result()

        return results
