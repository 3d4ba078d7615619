import time

from loguru import logger

from textreg.observability.instrumentation import Instrumentation, NoOpInstrumentation


def test_leaf_timer_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("step_A"):
        time.sleep(0.01)

    assert inst.timeline["step_A"] > 0


def test_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("parent", record=False):
        with inst.timer("leaf"):
            pass

    assert list(inst.timeline) == ["leaf"]


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)
    with inst.timer("x"):
        pass
    assert inst.timeline == {}


def test_metrics_recorder():
    inst = Instrumentation(enabled=True)
    inst.metrics.record("best_penalty", 0.01)
    assert inst.metrics.metrics["best_penalty"] == 0.01


def test_noop_instrumentation():
    inst = NoOpInstrumentation()
    with inst.timer("anything"):
        pass
    inst.generate_timeline_report("r")


def test_noop_timeline_is_per_instance():
    a, b = NoOpInstrumentation(), NoOpInstrumentation()
    a.timeline["x"] = 1.0
    assert b.timeline == {}


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("tune"):
        time.sleep(0.005)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))
    inst.generate_timeline_report("run-42")
    logger.remove(sink_id)

    output = "\n".join(captured)
    assert "tune" in output
    assert "run-42" in output
    assert "Run timeline" in output
