from __future__ import annotations

import os

import pytest

from textreg.config.pipeline_config import PoolBackend
from textreg.pipeline.parallel.executor import ParallelExecutor
from textreg.pipeline.parallel.types import ParallelKind


def square(x: int) -> int:
    return x * x


def test_run_with_empty_items_returns_empty():
    assert ParallelExecutor.run(kind=ParallelKind.DOCUMENT, items=[], handler=square) == []


def test_run_sequential_order_preserved():
    called = []

    def handler(x):
        called.append(x)
        return x.upper()

    out = ParallelExecutor.run(
        kind=ParallelKind.DOCUMENT,
        items=["a", "b", "c"],
        handler=handler,
        max_workers=1,
    )

    assert called == ["a", "b", "c"]
    assert out == ["A", "B", "C"]


def test_thread_pool_results_follow_input_order():
    items = list(range(50))
    out = ParallelExecutor.run(
        kind=ParallelKind.CELL,
        items=items,
        handler=square,
        max_workers=8,
        pool=PoolBackend.THREAD,
    )
    assert out == [x * x for x in items]


def test_handler_exception_propagates():
    def handler(x):
        if x == "bad":
            raise RuntimeError("boom")
        return x

    with pytest.raises(RuntimeError):
        ParallelExecutor.run(
            kind=ParallelKind.CELL,
            items=["ok1", "bad", "ok2"],
            handler=handler,
            max_workers=2,
            pool="thread",
        )


def test_resolve_workers_caps_by_items():
    assert ParallelExecutor._resolve_workers(["a", "b"], max_workers=10) == 2


def test_resolve_workers_caps_by_cpu():
    cpu = os.cpu_count() or 1
    assert ParallelExecutor._resolve_workers(list(range(100)), max_workers=None) <= cpu


def test_resolve_workers_at_least_one():
    assert ParallelExecutor._resolve_workers(["a"], max_workers=0) == 1
