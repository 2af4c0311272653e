"""Tests for the gradient descent logistic regression."""

import numpy as np
import pytest

from wine_quality import ConvergenceError, LogisticRegressionGD


@pytest.fixture
def separable():
    X = np.array([[0.0], [1.0], [2.0], [3.0], [10.0], [11.0], [12.0], [13.0]], dtype=np.float32)
    y = np.array([False] * 4 + [True] * 4)
    return X, y


class TestLogisticRegressionGD:
    def test_starts_untrained(self):
        model = LogisticRegressionGD()

        assert not model.is_fitted

    def test_fits_separable_data(self, separable):
        X, y = separable

        model = LogisticRegressionGD(max_iter=150).fit(X, y)

        assert model.is_fitted
        np.testing.assert_array_equal(model.predict(X), y)
        assert model.coef_[0] > 0

    def test_predict_returns_booleans_per_row(self, separable):
        X, y = separable
        model = LogisticRegressionGD().fit(X, y)

        pred = model.predict(X[:3])

        assert pred.dtype == np.bool_
        assert pred.shape == (3,)

    def test_predict_on_empty_matrix(self, separable):
        X, y = separable
        model = LogisticRegressionGD().fit(X, y)

        assert model.predict(np.empty((0, 1), dtype=np.float32)).shape == (0,)

    def test_predictions_are_deterministic(self, separable):
        X, y = separable
        model = LogisticRegressionGD().fit(X, y)

        np.testing.assert_array_equal(model.predict_proba(X), model.predict_proba(X))

    def test_probabilities_in_unit_interval(self, separable):
        X, y = separable

        probs = LogisticRegressionGD().fit(X, y).predict_proba(X)

        assert np.all((probs >= 0) & (probs <= 1))

    def test_stops_at_iteration_cap(self, separable):
        X, y = separable

        model = LogisticRegressionGD(max_iter=5).fit(X, y)

        assert model.n_iter_ == 5
        assert not model.converged_

    def test_stops_early_when_update_below_tol(self, separable):
        X, y = separable

        model = LogisticRegressionGD(max_iter=150, tol=1e3).fit(X, y)

        assert model.n_iter_ == 1
        assert model.converged_

    def test_constant_feature_does_not_break_scaling(self, separable):
        X, y = separable
        X_const = np.hstack([X, np.ones_like(X)])

        model = LogisticRegressionGD().fit(X_const, y)

        assert np.all(np.isfinite(model.coef_))

    def test_refit_uses_new_scaling(self, separable):
        X, y = separable
        model = LogisticRegressionGD().fit(X, y)

        model.fit(X * 100, y)

        np.testing.assert_allclose(model.mean_, [650.0])

    def test_diverging_update_raises(self, separable):
        X, y = separable
        model = LogisticRegressionGD(lr=float("inf"))

        with pytest.raises(ConvergenceError):
            model.fit(X, y)
        assert not model.is_fitted

    def test_empty_training_set_raises(self):
        with pytest.raises(ConvergenceError):
            LogisticRegressionGD().fit(np.empty((0, 2)), np.empty(0, dtype=bool))

    def test_mismatched_lengths_raise(self, separable):
        X, y = separable

        with pytest.raises(ValueError):
            LogisticRegressionGD().fit(X, y[:-1])

    def test_predict_before_fit_raises(self, separable):
        X, _ = separable

        with pytest.raises(RuntimeError, match="not fitted"):
            LogisticRegressionGD().predict(X)

    def test_coefficients_before_fit_raise(self):
        with pytest.raises(RuntimeError):
            LogisticRegressionGD().coef_
