import numpy as np
import pandas as pd
from typer.testing import CliRunner
import yaml

from textreg.cli import app
from textreg.config import AppConfig
from textreg.pipeline.model_artifact import load_model_artifact
from textreg.workflows.training_workflow import build_training_pipeline


def _config(tmp_path) -> AppConfig:
    return AppConfig(
        log={"dir": str(tmp_path / "logs")},
        text={"weighting": "tf", "max_tokens": 50},
        tuning={"folds": 3, "grid": [0.001, 1.0, 10.0]},
        pipeline={"pool": "thread", "max_workers": 2, "artifact_dir": str(tmp_path / "artifacts")},
    )


def test_training_pipeline_end_to_end(tmp_path, corpus_factory):
    cfg = _config(tmp_path)
    docs = corpus_factory(120, seed=4)

    ctx = build_training_pipeline(cfg).run("run-1", docs)

    assert len(ctx.train_docs) == 90 and len(ctx.test_docs) == 30
    assert ctx.metrics["best_penalty"] == 0.001
    assert ctx.metrics["test_rmse"] < 0.1
    assert ctx.metrics["test_rmse"] < ctx.metrics["null_rmse"]
    assert ctx.predictions.shape == (30,)

    # coefficient i belongs to token i
    coef = dict(zip(ctx.featurizer.feature_names, ctx.model.coefficients))
    assert np.isclose(coef["court"], 6.0, atol=0.05)
    assert np.isclose(coef["statute"], -4.0, atol=0.05)

    artifact_dir = tmp_path / "artifacts" / "run-1"
    assert (artifact_dir / "metrics.csv").exists()

    artifact, model, featurizer = load_model_artifact(artifact_dir)
    assert artifact.run_id == "run-1"
    np.testing.assert_allclose(
        model.predict(featurizer.transform(ctx.test_docs)), ctx.predictions
    )

    assert "tune" in ctx.inst.timeline
    assert ctx.inst.metrics.metrics["best_penalty"] == 0.001


def test_cli_train_and_tune(tmp_path, corpus_factory):
    docs = corpus_factory(60, seed=2)
    corpus = tmp_path / "opinions.csv"
    pd.DataFrame(
        {"id": [d.doc_id for d in docs], "text": [d.text for d in docs], "year": [d.label for d in docs]}
    ).to_csv(corpus, index=False)

    config = tmp_path / "config.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "log": {"dir": str(tmp_path / "logs")},
                "text": {"weighting": "tf"},
                "tuning": {"folds": 3, "grid": [0.001, 1.0]},
                "pipeline": {"pool": "thread", "artifact_dir": str(tmp_path / "artifacts")},
            }
        )
    )

    runner = CliRunner()

    result = runner.invoke(app, ["tune", str(corpus), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert "best penalty" in result.output

    result = runner.invoke(app, ["train", str(corpus), "--config", str(config), "--run-id", "cli-run"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "artifacts" / "cli-run" / "artifact.json").exists()


def test_cli_missing_corpus(tmp_path):
    result = CliRunner().invoke(app, ["tune", str(tmp_path / "missing.csv")])
    assert result.exit_code == 1


def test_cli_version():
    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_cli_unknown_solver_version_exits_cleanly(tmp_path, corpus_factory):
    docs = corpus_factory(30, seed=1)
    corpus = tmp_path / "opinions.csv"
    pd.DataFrame(
        {"id": [d.doc_id for d in docs], "text": [d.text for d in docs], "year": [d.label for d in docs]}
    ).to_csv(corpus, index=False)

    config = tmp_path / "config.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "log": {"dir": str(tmp_path / "logs")},
                "solver": {"version": "v9"},
                "tuning": {"folds": 3, "grid": [0.1]},
                "pipeline": {"max_workers": 1},
            }
        )
    )

    result = CliRunner().invoke(app, ["tune", str(corpus), "--config", str(config)])
    assert result.exit_code == 1
    assert "No Predictor" in result.output
