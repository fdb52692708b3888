"""Unit tests for ensemble quantiles."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from sealevelrise.data.datasets import ProbabilisticProjections
from sealevelrise.errors import InsufficientDataError
from sealevelrise.projections import extract, quantile_table, quantiles


def test_median_of_known_row(brick: ProbabilisticProjections):
    """rcp45 in 2001 is [0.1, 0.2, 0.3], so its median is 0.2."""
    result = quantiles(extract(brick, "rcp45"), [0.5])
    assert result[1, 0] == pytest.approx(0.2)


def test_default_probs_shape(brick: ProbabilisticProjections):
    """Default quantiles are the 5-50-95% range."""
    result = quantiles(extract(brick, "rcp85"))
    assert result.shape == (3, 3)


@pytest.mark.parametrize("probs", [[0.5], [0.05, 0.95], [0.0, 0.25, 0.5, 0.75, 1.0]])
def test_output_shape_follows_probs(probs):
    """One row per time step, one column per probability."""
    data = np.random.default_rng(0).normal(size=(7, 50))
    assert quantiles(data, probs).shape == (7, len(probs))


def test_linear_interpolation_between_order_statistics():
    """Quantiles interpolate linearly between sorted members (type 7)."""
    data = np.array([[4.0, 1.0, 3.0, 2.0]])
    result = quantiles(data, [0.0, 0.25, 0.5, 0.9, 1.0])
    np.testing.assert_allclose(result[0], [1.0, 1.75, 2.5, 3.7, 4.0])


def test_columns_follow_probs_order():
    """Probabilities are not sorted on the way through."""
    data = np.arange(11, dtype=float).reshape(1, -1)
    np.testing.assert_allclose(quantiles(data, [0.9, 0.1, 0.5])[0], [9.0, 1.0, 5.0])


def test_constant_ensemble():
    """A constant ensemble has that constant as its median at every step."""
    data = np.full((4, 6), 0.37)
    np.testing.assert_allclose(quantiles(data, [0.5])[:, 0], 0.37)


def test_single_member():
    """With one member, every quantile equals that member."""
    data = np.array([[0.1], [0.2], [0.4]])
    result = quantiles(data, [0.05, 0.5, 0.95])
    np.testing.assert_allclose(result, np.repeat(data, 3, axis=1))


def test_rows_are_independent():
    """Changing one time step leaves the other rows alone."""
    data = np.random.default_rng(1).normal(size=(5, 20))
    before = quantiles(data)
    data[2] += 100.0
    after = quantiles(data)
    np.testing.assert_allclose(np.delete(after, 2, axis=0), np.delete(before, 2, axis=0))


def test_empty_ensemble():
    """No members, no quantiles."""
    with pytest.raises(InsufficientDataError):
        quantiles(np.empty((3, 0)))


def test_rejects_wrong_rank():
    """Input must be (time, ensemble)."""
    with pytest.raises(ValueError, match="2D"):
        quantiles(np.zeros(5))


@pytest.mark.parametrize("probs", [[-0.1], [1.5], [0.5, float("nan")]])
def test_rejects_bad_probs(probs):
    """Probabilities must lie in [0, 1]."""
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        quantiles(np.ones((2, 3)), probs)


def test_quantile_table(brick: ProbabilisticProjections):
    """The table is indexed by year with one column per probability."""
    table = quantile_table(brick, "rcp45", [0.05, 0.5, 0.975])

    assert isinstance(table, pd.DataFrame)
    assert list(table.columns) == ["q05", "q50", "q97.5"]
    assert table.index.name == "year"
    assert table.index.tolist() == [2000, 2001, 2002]
    assert table.loc[2001, "q50"] == pytest.approx(0.2)


def test_rejects_bad_scalar_prob():
    """A single out-of-range probability is a ValueError too."""
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        quantiles(np.ones((2, 3)), 1.5)  # type: ignore[arg-type]


def test_quantile_table_in_feet(brick: ProbabilisticProjections):
    """Feet tables are converted and labelled as feet."""
    meters = quantile_table(brick, "rcp45", [0.5])
    feet = quantile_table(brick, "rcp45", [0.5], feet=True)

    assert meters.attrs["units"] == "m"
    assert feet.attrs["units"] == "ft"
    assert feet.loc[2001, "q50"] == pytest.approx(0.2 * 3.28084)


def test_quantile_table_rejects_duplicate_columns(brick: ProbabilisticProjections):
    """Probabilities that name the same column are refused."""
    with pytest.raises(ValueError, match="q05"):
        quantile_table(brick, "rcp45", [0.05, 0.0500000001])
