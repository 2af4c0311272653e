from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    DATA_PATH,
    HAS_HEADER,
    INFER_SCHEMA_ROWS,
    L2,
    LEARNING_RATE,
    MAX_ITER,
    NON_FEATURE_COLUMNS,
    QUALITY_THRESHOLD,
    SEPARATOR,
    TARGET_COLUMN,
    TOLERANCE,
    TRAIN_RATIO,
)


@dataclass(frozen=True)
class PipelineConfig:
    csv_path: Path = DATA_PATH
    separator: str = SEPARATOR
    has_header: bool = HAS_HEADER
    infer_schema_rows: int = INFER_SCHEMA_ROWS
    target_column: str = TARGET_COLUMN
    quality_threshold: int = QUALITY_THRESHOLD
    non_feature_columns: tuple[str, ...] = NON_FEATURE_COLUMNS
    # explicit feature list; None means every column not in non_feature_columns
    feature_columns: tuple[str, ...] | None = None
    train_ratio: float = TRAIN_RATIO
    split_mode: str = "sequential"
    random_state: int | None = None
    max_iter: int = MAX_ITER
    lr: float = LEARNING_RATE
    tol: float = TOLERANCE
    l2: float = L2

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PipelineConfig":
        return cls(
            csv_path=Path(args.csv_path),
            separator=args.separator,
            has_header=not args.no_header,
            infer_schema_rows=args.infer_schema_rows,
            train_ratio=args.train_ratio,
            split_mode=args.split_mode,
            random_state=args.random_state,
            max_iter=args.max_iter,
            lr=args.lr,
            tol=args.tol,
            l2=args.l2,
        )
