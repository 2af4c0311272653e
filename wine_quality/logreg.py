from __future__ import annotations

"""
Logistic regression trained with batch gradient descent on standardized
features, plus the Classifier protocol the pipeline trains against.
"""

import logging
from typing import Protocol

import numpy as np

from .constants import L2, LEARNING_RATE, MAX_ITER, TOLERANCE
from .errors import ConvergenceError

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    def fit(self, X: np.ndarray, y: np.ndarray) -> "Classifier": ...

    def predict(self, X: np.ndarray) -> np.ndarray: ...


class LogisticRegressionGD:
    """
    Minimal logistic regression trained with batch gradient descent.
    Features are standardized internally for stability.

    Untrained until fit() returns; fit() either leaves the model fitted or
    raises ConvergenceError and leaves it untrained.
    """

    def __init__(
        self,
        lr: float = LEARNING_RATE,
        max_iter: int = MAX_ITER,
        tol: float = TOLERANCE,
        l2: float = L2,
    ):
        self.lr = lr
        self.max_iter = max_iter
        self.tol = tol
        self.l2 = l2
        self.weights_: np.ndarray | None = None
        self.mean_: np.ndarray | None = None
        self.std_: np.ndarray | None = None
        self.n_iter_: int = 0
        self.converged_: bool = False

    @property
    def is_fitted(self) -> bool:
        return self.weights_ is not None

    @property
    def intercept_(self) -> float:
        self._check_fitted()
        return float(self.weights_[0])

    @property
    def coef_(self) -> np.ndarray:
        self._check_fitted()
        return self.weights_[1:]

    @staticmethod
    def _sigmoid(z: np.ndarray) -> np.ndarray:
        z = np.clip(z, -500, 500)
        return 1.0 / (1.0 + np.exp(-z))

    @staticmethod
    def _add_bias(X: np.ndarray) -> np.ndarray:
        return np.hstack([np.ones((X.shape[0], 1)), X])

    def _check_fitted(self):
        if self.weights_ is None:
            raise RuntimeError("Model is not fitted.")

    def _standardize(self, X: np.ndarray) -> np.ndarray:
        return (X - self.mean_) / self.std_

    def fit(self, X, y):
        """Train the model with batch gradient descent."""
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        if X_arr.ndim != 2 or len(X_arr) != len(y_arr):
            raise ValueError(
                f"X must be 2D with one row per label, got {X_arr.shape} and {y_arr.shape}"
            )
        if len(y_arr) == 0:
            raise ConvergenceError("Cannot fit logistic regression on an empty training set.")

        self.weights_ = None
        self.converged_ = False
        self.mean_ = X_arr.mean(axis=0)
        std = X_arr.std(axis=0)
        std[std == 0] = 1.0
        self.std_ = std

        X_bias = self._add_bias(self._standardize(X_arr))
        weights = np.zeros(X_bias.shape[1])

        for step in range(1, self.max_iter + 1):
            preds = self._sigmoid(X_bias @ weights)
            grad = (X_bias.T @ (preds - y_arr)) / len(y_arr)
            if self.l2:
                grad[1:] += self.l2 * weights[1:]

            new_weights = weights - self.lr * grad
            if not np.all(np.isfinite(new_weights)):
                raise ConvergenceError(f"Coefficients became non-finite at step {step}.")

            self.n_iter_ = step
            done = np.linalg.norm(new_weights - weights) < self.tol
            weights = new_weights
            if done:
                self.converged_ = True
                break

            if step % 50 == 0:
                loss = -np.mean(
                    y_arr * np.log(preds + 1e-12) + (1 - y_arr) * np.log(1 - preds + 1e-12)
                )
                logger.debug("[GD] step=%d, loss=%.4f", step, loss)

        if not self.converged_:
            logger.info("Gradient descent stopped at max_iter=%d before reaching tol", self.max_iter)
        self.weights_ = weights
        return self

    def predict_proba(self, X) -> np.ndarray:
        """Return P(y=1) for each row in X."""
        self._check_fitted()
        X_arr = np.asarray(X, dtype=float)
        return self._sigmoid(self._add_bias(self._standardize(X_arr)) @ self.weights_)

    def predict(self, X, threshold: float = 0.5) -> np.ndarray:
        """Boolean predictions using the provided threshold."""
        return self.predict_proba(X) >= threshold
