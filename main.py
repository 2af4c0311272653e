from __future__ import annotations

"""
CLI entrypoint for the wine quality experiment: label wines with quality > 5 as
good, fit logistic regression on 90% of the rows and score the remaining 10%.
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from wine_quality import (
    PipelineConfig,
    PipelineResult,
    WineQualityError,
    run_pipeline,
    summarize_coefficients,
)
from wine_quality.constants import (
    DATA_PATH,
    INFER_SCHEMA_ROWS,
    L2,
    LEARNING_RATE,
    MAX_ITER,
    PREVIEW_ROWS,
    SEPARATOR,
    TOLERANCE,
    TOP_K_COEFFICIENTS,
    TRAIN_RATIO,
)

logger = logging.getLogger("wine_quality")


def print_metrics(label: str, result: PipelineResult):
    """Confusion matrix followed by the scores derived from it."""
    cm = result.confusion
    print(cm)
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.as_array().tolist()}")
    print(f"[{label}] accuracy {cm.accuracy}, MCC {cm.mcc}")
    print(f"    Prec {cm.precision:.3f} | Rec {cm.recall:.3f} | F1 {cm.f1:.3f}")


def print_coefficients(result: PipelineResult, top_k: int):
    model = result.model
    if not hasattr(model, "coef_"):
        return
    top = summarize_coefficients(model.coef_, list(result.train.feature_names), top_k=top_k)
    print("\nTop positive features:")
    print(top["positive"])
    print("\nTop negative features:")
    print(top["negative"])
    print(f"\nIntercept (standardized space): {model.intercept_:.4f}")


def build_arg_parser():
    """CLI parser; every default comes from wine_quality.constants."""
    parser = argparse.ArgumentParser(
        description="Predict whether a wine is rated above 5 with logistic regression."
    )
    parser.add_argument("--csv-path", type=Path, default=DATA_PATH)
    parser.add_argument("--separator", default=SEPARATOR, help="CSV field separator.")
    parser.add_argument("--no-header", action="store_true", help="CSV has no header row.")
    parser.add_argument(
        "--infer-schema-rows",
        type=int,
        default=INFER_SCHEMA_ROWS,
        help="Rows sampled to infer column types.",
    )
    parser.add_argument("--train-ratio", type=float, default=TRAIN_RATIO)
    parser.add_argument(
        "--split-mode",
        choices=["sequential", "random"],
        default="sequential",
        help="sequential keeps the trailing rows for validation.",
    )
    parser.add_argument(
        "--random-state",
        type=int,
        default=None,
        help="Seed for --split-mode random (default: unseeded).",
    )
    parser.add_argument("--lr", type=float, default=LEARNING_RATE, help="Learning rate for GD.")
    parser.add_argument("--l2", type=float, default=L2, help="L2 regularization for GD.")
    parser.add_argument("--max-iter", type=int, default=MAX_ITER, help="Max steps for GD.")
    parser.add_argument("--tol", type=float, default=TOLERANCE, help="Tolerance for early stop in GD.")
    parser.add_argument(
        "--top-k", type=int, default=TOP_K_COEFFICIENTS, help="Coefficients to list per sign."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(args: argparse.Namespace | None = None):
    """Run the pipeline and print the report; exit 1 on any pipeline error."""
    args = args or build_arg_parser().parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
    )

    config = PipelineConfig.from_args(args)
    try:
        result = run_pipeline(config)
    except WineQualityError as exc:
        logger.error("Pipeline failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(result.cleaned.head(PREVIEW_ROWS))
    print(f"Fit Logistic Regression classifier with #{result.train.n_samples} training points")
    print_metrics("Logistic regression", result)
    print_coefficients(result, args.top_k)
    return 0


if __name__ == "__main__":
    sys.exit(main())
