"""
Binary wine quality classification: is a wine rated above 5?

This package contains data preparation helpers, a lightweight logistic regression
implementation, and evaluation utilities used by main.py.
"""

from .config import PipelineConfig
from .constants import NON_FEATURE_COLUMNS, QUALITY_THRESHOLD, TARGET_COLUMN
from .data_prep import (
    Dataset,
    binarize_quality,
    drop_incomplete_rows,
    load_wine_csv,
    select_feature_columns,
    split_with_ratio,
    to_dataset,
)
from .errors import (
    ConversionError,
    ConvergenceError,
    FileError,
    ParseError,
    SchemaError,
    WineQualityError,
)
from .logreg import Classifier, LogisticRegressionGD
from .metrics import ConfusionMatrix, confusion_matrix, summarize_coefficients
from .pipeline import PipelineResult, run_pipeline

__all__ = [
    "NON_FEATURE_COLUMNS",
    "QUALITY_THRESHOLD",
    "TARGET_COLUMN",
    "PipelineConfig",
    "Dataset",
    "binarize_quality",
    "drop_incomplete_rows",
    "load_wine_csv",
    "select_feature_columns",
    "split_with_ratio",
    "to_dataset",
    "WineQualityError",
    "FileError",
    "ParseError",
    "SchemaError",
    "ConversionError",
    "ConvergenceError",
    "Classifier",
    "LogisticRegressionGD",
    "ConfusionMatrix",
    "confusion_matrix",
    "summarize_coefficients",
    "PipelineResult",
    "run_pipeline",
]
