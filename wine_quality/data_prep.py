from __future__ import annotations

"""
Data preparation for the wine quality experiment: CSV loading, binary labels,
null filtering and conversion to the array dataset used for training.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_integer_dtype, is_numeric_dtype

from .constants import (
    INFER_SCHEMA_ROWS,
    NON_FEATURE_COLUMNS,
    QUALITY_THRESHOLD,
    SEPARATOR,
    TARGET_COLUMN,
    TRAIN_RATIO,
)
from .errors import ConversionError, FileError, ParseError, SchemaError

logger = logging.getLogger(__name__)


def _readonly(arr: np.ndarray) -> np.ndarray:
    view = np.asarray(arr).view()
    view.flags.writeable = False
    return view


@dataclass(frozen=True, eq=False)
class Dataset:
    """Feature matrix and boolean targets with matching row counts."""

    records: np.ndarray
    targets: np.ndarray
    feature_names: tuple[str, ...] = ()

    def __post_init__(self):
        if self.records.ndim != 2:
            raise ValueError(f"records must be 2D, got shape {self.records.shape}")
        if len(self.records) != len(self.targets):
            raise ValueError(
                f"records and targets differ in length: {len(self.records)} != {len(self.targets)}"
            )
        object.__setattr__(self, "records", _readonly(self.records))
        object.__setattr__(self, "targets", _readonly(self.targets))
        object.__setattr__(self, "feature_names", tuple(self.feature_names))

    @property
    def n_samples(self) -> int:
        return self.records.shape[0]

    @property
    def n_features(self) -> int:
        return self.records.shape[1]

    def take(self, indices: np.ndarray) -> "Dataset":
        return Dataset(
            np.ascontiguousarray(self.records[indices]),
            self.targets[indices].copy(),
            self.feature_names,
        )


def _inferred_dtypes(sample: pd.DataFrame) -> dict:
    """Integer columns become nullable so later empty cells stay null."""
    dtypes = {}
    for col, dtype in sample.dtypes.items():
        if is_integer_dtype(dtype) and not is_bool_dtype(dtype):
            dtypes[col] = "Int64"
        else:
            dtypes[col] = dtype
    return dtypes


def load_wine_csv(
    csv_path: Path | str,
    separator: str = SEPARATOR,
    has_header: bool = True,
    infer_schema_rows: int = INFER_SCHEMA_ROWS,
) -> pd.DataFrame:
    """
    Read a delimited file, inferring column types from the first
    `infer_schema_rows` rows and parsing the rest with those types.
    """
    header = 0 if has_header else None
    try:
        with open(csv_path, newline="") as handle:
            sample = pd.read_csv(handle, sep=separator, header=header, nrows=infer_schema_rows)
            handle.seek(0)
            df = pd.read_csv(
                handle, sep=separator, header=header, dtype=_inferred_dtypes(sample)
            )
    except OSError as exc:
        raise FileError(f"Cannot read {csv_path}: {exc}") from exc
    except (ValueError, TypeError) as exc:
        # pandas parser errors, empty files and failed casts all land here
        raise ParseError(f"Cannot parse {csv_path}: {exc}") from exc

    logger.info("Loaded %s: %d rows, %d columns", csv_path, len(df), df.shape[1])
    return df


def binarize_quality(
    df: pd.DataFrame,
    column: str = TARGET_COLUMN,
    threshold: int = QUALITY_THRESHOLD,
) -> pd.DataFrame:
    """
    Return a copy of df where `column` is 1 for values above threshold, 0 for
    the rest and null where the value is missing.
    """
    if column not in df.columns:
        raise SchemaError(f"Column {column!r} not found, available: {list(df.columns)}")
    values = df[column]
    if is_bool_dtype(values) or not is_numeric_dtype(values):
        raise SchemaError(f"Column {column!r} must be numeric, got {values.dtype}")

    labels = (values.astype("Float64") > threshold).astype("UInt8")
    labeled = df.copy()
    labeled[column] = labels
    return labeled


def drop_incomplete_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Drop every row holding a null in any column; order is kept."""
    cleaned = df.dropna()
    n_removed = len(df) - len(cleaned)
    if n_removed > 0:
        logger.info("Dropped %d row(s) with nulls: %d -> %d rows.", n_removed, len(df), len(cleaned))
    return cleaned


def select_feature_columns(
    df: pd.DataFrame, exclude: Iterable[str] = NON_FEATURE_COLUMNS
) -> list[str]:
    """All column names not in `exclude`, in table order."""
    excluded = set(exclude)
    return [col for col in df.columns if col not in excluded]


def to_dataset(
    df: pd.DataFrame,
    feature_columns: Sequence[str],
    target_column: str = TARGET_COLUMN,
) -> Dataset:
    """
    Convert the cleaned table to a Dataset: float32 features and boolean
    targets (label cast to uint8, then tested for nonzero).
    """
    wanted = [*feature_columns, target_column]
    missing = [col for col in wanted if col not in df.columns]
    if missing:
        raise ConversionError(f"Missing columns: {missing}")

    for col in wanted:
        if not is_numeric_dtype(df[col]):
            raise ConversionError(f"Column {col!r} is not numeric ({df[col].dtype})")
        if df[col].isna().any():
            raise ConversionError(f"Column {col!r} has null values; drop them first")

    try:
        records = df[list(feature_columns)].to_numpy(dtype=np.float32)
        targets = df[target_column].to_numpy(dtype=np.uint8) != 0
    except (ValueError, TypeError) as exc:
        raise ConversionError(f"Cannot convert table to arrays: {exc}") from exc

    return Dataset(
        np.ascontiguousarray(records).reshape(len(df), len(feature_columns)),
        targets,
        tuple(feature_columns),
    )


def split_with_ratio(
    dataset: Dataset,
    ratio: float = TRAIN_RATIO,
    mode: str = "sequential",
    random_state: int | None = None,
) -> tuple[Dataset, Dataset]:
    """
    Split into train (floor(n * ratio) rows) and validation (the rest).

    "sequential" keeps the leading rows for training, "random" permutes rows
    first; without a random_state the permutation differs between runs.
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"ratio must be within [0, 1], got {ratio}")

    n = dataset.n_samples
    # round first so 0.29 * 100 does not floor to 28
    n_train = math.floor(round(n * ratio, 9))

    if mode == "sequential":
        order = np.arange(n)
    elif mode == "random":
        order = np.random.default_rng(random_state).permutation(n)
    else:
        raise ValueError(f"Unknown split mode: {mode}")

    train, valid = dataset.take(order[:n_train]), dataset.take(order[n_train:])
    logger.debug("Split %d samples into %d train / %d valid", n, train.n_samples, valid.n_samples)
    return train, valid
