"""
Training Engines (FINAL)

Each engine owns ONE piece of statistical semantics:

fold_engine       seeded K-fold partition of a training set
model/            Predictor variants (lasso / sgd / null)
registry          (family, task, version) → Predictor
tune_engine       (fold × penalty) sweep, aggregation, selection
evaluate_engine   RMSE / R²

Engines do no I/O and keep no state between calls.
Steps (training/steps) wire them into a TrainingContext.
"""
from textreg.training.engines.fitted_model import Model
from textreg.training.engines.model_train_engine import Predictor
from textreg.training.engines.registry import predictor_for, resolve_predictor

__all__ = ["Model", "Predictor", "predictor_for", "resolve_predictor"]
