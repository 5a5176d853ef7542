"""
Pytest configuration and fixtures for mediation tests.
"""

import numpy as np
import pandas as pd
import pytest

from bayes_mediation import PosteriorModel


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_posterior(rng):
    """Posterior draws for m ~ x + c and y ~ x + m + c."""
    n = 2000
    return {
        "b_m_Intercept": rng.normal(0.0, 0.1, n),
        "b_m_x": rng.normal(0.5, 0.1, n),
        "b_m_c": rng.normal(0.2, 0.1, n),
        "b_y_Intercept": rng.normal(1.0, 0.1, n),
        "b_y_x": rng.normal(0.3, 0.1, n),
        "b_y_m": rng.normal(0.8, 0.1, n),
        "b_y_c": rng.normal(-0.1, 0.1, n),
    }


@pytest.fixture
def simple_model(simple_posterior):
    """Two-equation mediation model with mediator m, treatment x."""
    return PosteriorModel.from_formulas(
        simple_posterior,
        ["m ~ x + c", "y ~ x + m + c"],
    )


@pytest.fixture
def degenerate_model():
    """Model whose draws are constant: a = 0.5, b = 2.0, c' = 1.0."""
    posterior = {
        "b_m_x": np.array([0.5, 0.5, 0.5]),
        "b_y_m": np.array([2.0, 2.0, 2.0]),
        "b_y_x": np.array([1.0, 1.0, 1.0]),
    }
    return PosteriorModel.from_formulas(posterior, ["m ~ x", "y ~ x + m"])


@pytest.fixture
def jobs_data(rng):
    """Training data with underscored response names."""
    n = 50
    return pd.DataFrame(
        {
            "treat": rng.integers(0, 2, n),
            "econ_hard": rng.normal(size=n),
            "job_seek": rng.normal(size=n),
            "depress2": rng.normal(size=n),
        }
    )
