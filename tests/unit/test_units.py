"""Unit tests for unit conversion."""

import numpy as np
import pytest

from sealevelrise.projections import FEET_PER_METER, meters_to_feet


def test_zero():
    assert meters_to_feet(0.0) == 0.0


def test_one_meter():
    assert meters_to_feet(1.0) == pytest.approx(3.28084)


def test_elementwise():
    """Arrays are converted element by element."""
    values = np.array([[0.0, 0.5], [1.0, 2.0]])
    np.testing.assert_allclose(meters_to_feet(values), values * FEET_PER_METER)
