"""Shared pytest fixtures."""

import numpy as np
import pandas as pd
import pytest

from distributions import make_distribution


@pytest.fixture
def standard_normal():
    return make_distribution("normal", 0.0, 1.0)


@pytest.fixture
def small_table():
    return pd.DataFrame({
        "a": [1.0, 2.0, 3.0, 4.0, 5.0],
        "b": [0.5, -1.25, 3.75, 2.0, 0.0],
    })


@pytest.fixture
def standardized_values():
    """400 values with sample mean exactly 0 and sample std exactly 1."""
    rng = np.random.default_rng(0)
    x = rng.normal(size=400)
    x = x - x.mean()
    return x / x.std(ddof=1)
