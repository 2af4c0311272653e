from __future__ import annotations

"""
Confusion matrix and derived scores for the binary "good wine" label, plus the
coefficient summary printed after training.
"""

import math
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn import metrics


@dataclass(frozen=True)
class ConfusionMatrix:
    tp: int
    tn: int
    fp: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def accuracy(self) -> float:
        """NaN when there is nothing to score."""
        if self.total == 0:
            return float("nan")
        return (self.tp + self.tn) / self.total

    @property
    def mcc(self) -> float:
        """Matthews correlation coefficient; 0 when any marginal is empty."""
        denom = (
            (self.tp + self.fp) * (self.tp + self.fn) * (self.tn + self.fp) * (self.tn + self.fn)
        )
        if denom == 0:
            return 0.0
        return (self.tp * self.tn - self.fp * self.fn) / math.sqrt(denom)

    @property
    def precision(self) -> float:
        predicted = self.tp + self.fp
        return self.tp / predicted if predicted else 0.0

    @property
    def recall(self) -> float:
        actual = self.tp + self.fn
        return self.tp / actual if actual else 0.0

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return 2 * p * r / (p + r) if p + r else 0.0

    def as_array(self) -> np.ndarray:
        """Layout [[TN, FP], [FN, TP]], same as sklearn."""
        return np.array([[self.tn, self.fp], [self.fn, self.tp]])

    def __str__(self) -> str:
        return (
            "            actual +  actual -\n"
            f"predicted + {self.tp:>8}  {self.fp:>8}\n"
            f"predicted - {self.fn:>8}  {self.tn:>8}"
        )


def confusion_matrix(predicted: np.ndarray, actual: np.ndarray) -> ConfusionMatrix:
    """Count outcomes of boolean predictions against boolean targets."""
    pred = np.asarray(predicted, dtype=bool).ravel()
    true = np.asarray(actual, dtype=bool).ravel()
    if len(pred) != len(true):
        raise ValueError(f"Length mismatch: {len(pred)} predictions vs {len(true)} targets")
    if len(true) == 0:
        return ConfusionMatrix(tp=0, tn=0, fp=0, fn=0)

    tn, fp, fn, tp = metrics.confusion_matrix(true, pred, labels=[False, True]).ravel()
    return ConfusionMatrix(tp=int(tp), tn=int(tn), fp=int(fp), fn=int(fn))


def summarize_coefficients(
    coef: np.ndarray, feature_names: list[str], top_k: int = 5
) -> dict[str, pd.Series]:
    coef_series = pd.Series(coef, index=feature_names)
    coef_sorted = coef_series.sort_values()
    return {
        "positive": coef_sorted.tail(top_k)[::-1],
        "negative": coef_sorted.head(top_k),
    }
