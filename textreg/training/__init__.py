"""
Training (FINAL)

One training run:

    documents
      → DatasetSplitStep   train / test (seeded)
      → TuneStep           K-fold × penalty grid on train only
      → FeaturizeStep      featurizer fit on train, applied to train + test
      → ModelTrainStep     final fit with the selected penalty
      → ModelEvaluateStep  held-out RMSE / R² (+ null baseline)
      → ArtifactPersistStep

The test split is touched exactly once, by ModelEvaluateStep.
"""
