from __future__ import annotations

"""
End-to-end run: load, label, drop nulls, convert, split, fit and evaluate.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from .config import PipelineConfig
from .data_prep import (
    Dataset,
    binarize_quality,
    drop_incomplete_rows,
    load_wine_csv,
    select_feature_columns,
    split_with_ratio,
    to_dataset,
)
from .logreg import Classifier, LogisticRegressionGD
from .metrics import ConfusionMatrix, confusion_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    cleaned: pd.DataFrame
    train: Dataset
    valid: Dataset
    model: Classifier
    confusion: ConfusionMatrix


def build_model(config: PipelineConfig) -> LogisticRegressionGD:
    return LogisticRegressionGD(
        lr=config.lr, max_iter=config.max_iter, tol=config.tol, l2=config.l2
    )


def prepare_dataset(config: PipelineConfig) -> tuple[pd.DataFrame, Dataset]:
    """Load and clean the CSV, then convert it to arrays."""
    df = load_wine_csv(
        config.csv_path,
        separator=config.separator,
        has_header=config.has_header,
        infer_schema_rows=config.infer_schema_rows,
    )
    labeled = binarize_quality(df, config.target_column, config.quality_threshold)
    cleaned = drop_incomplete_rows(labeled)

    feature_columns = (
        list(config.feature_columns)
        if config.feature_columns is not None
        else select_feature_columns(
            cleaned, exclude=(config.target_column, *config.non_feature_columns)
        )
    )
    return cleaned, to_dataset(cleaned, feature_columns, config.target_column)


def run_pipeline(
    config: PipelineConfig | None = None, model: Classifier | None = None
) -> PipelineResult:
    config = config or PipelineConfig()
    cleaned, dataset = prepare_dataset(config)

    train, valid = split_with_ratio(
        dataset, config.train_ratio, mode=config.split_mode, random_state=config.random_state
    )
    logger.info(
        "Fitting on %d samples, validating on %d (%d features)",
        train.n_samples,
        valid.n_samples,
        dataset.n_features,
    )

    if model is None:
        model = build_model(config)
    model.fit(train.records, train.targets)
    predictions = model.predict(valid.records)
    cm = confusion_matrix(predictions, valid.targets)

    return PipelineResult(cleaned=cleaned, train=train, valid=valid, model=model, confusion=cm)
