#!filepath: textreg/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from textreg import __version__, init_logging
from textreg.config.app_config import AppConfig
from textreg.data.corpus import load_corpus
from textreg.training.engines.tune_engine import TuneEngine
from textreg.utils.errors import TextRegError
from textreg.utils.logger import logs
from textreg.workflows.training_workflow import run_training

app = typer.Typer(help="textreg: regularized regression on text")


def _load_config(config: Optional[Path]) -> AppConfig:
    cfg = AppConfig.load(str(config) if config else None)
    init_logging(cfg.log)
    return cfg


def _metrics_table(df, title: str) -> Table:
    table = Table(title=title)
    for col in df.columns:
        table.add_column(str(col), justify="right")
    for row in df.itertuples(index=False):
        table.add_row(*[f"{v:.4g}" if isinstance(v, float) else str(v) for v in row])
    return table


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def tune(
    corpus: Path,
    config: Optional[Path] = typer.Option(None, help="YAML config (default: built-in base.yml)"),
    id_col: str = "id",
    text_col: str = "text",
    label_col: str = "year",
):
    """
    K-fold tune the penalty on the whole corpus and print the metrics table.
    """
    try:
        cfg = _load_config(config)
        docs = load_corpus(corpus, id_col=id_col, text_col=text_col, label_col=label_col)
        engine = TuneEngine(
            cfg.solver,
            policy=cfg.tuning.policy,
            max_workers=cfg.pipeline.max_workers,
            pool=cfg.pipeline.pool,
        )
        result = engine.tune(
            docs,
            cfg.tuning.penalty_grid(),
            k=cfg.tuning.folds,
            seed=cfg.tuning.seed,
            text=cfg.text,
        )
    except TextRegError as e:
        logs.error(f"[CLI] {type(e).__name__}: {e}")
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    Console().print(_metrics_table(result.metrics, "Tuning metrics"))
    print(f"[green]best penalty ({result.policy}) = {result.best_penalty:.6g}[/green]")


@app.command()
def train(
    corpus: Path,
    config: Optional[Path] = typer.Option(None, help="YAML config (default: built-in base.yml)"),
    id_col: str = "id",
    text_col: str = "text",
    label_col: str = "year",
    run_id: Optional[str] = None,
):
    """
    split → tune → final fit → held-out evaluation → artifact
    """
    try:
        cfg = _load_config(config)
        ctx = run_training(
            corpus,
            cfg,
            id_col=id_col,
            text_col=text_col,
            label_col=label_col,
            run_id=run_id,
        )
    except TextRegError as e:
        logs.error(f"[CLI] {type(e).__name__}: {e}")
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    m = ctx.metrics
    print(
        f"[green]penalty={m['best_penalty']:.6g} "
        f"test_rmse={m['test_rmse']:.4f} test_r_squared={m['test_r_squared']:.4f} "
        f"(null_rmse={m['null_rmse']:.4f})[/green]"
    )
    Console().print(_metrics_table(ctx.model.top_terms(ctx.featurizer.feature_names, 10), "Top terms"))
    print(f"artifact: {ctx.model_artifact.path}")


if __name__ == "__main__":
    app()

# python -m textreg.cli train data/scotus.csv
