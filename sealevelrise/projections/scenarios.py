"""Scenario and year accessors over loaded projections."""

from __future__ import annotations

import numpy as np

from ..data.datasets import DeterministicProjections, ProbabilisticProjections
from ..errors import UnknownScenarioError, YearOutOfRangeError

Projections = ProbabilisticProjections | DeterministicProjections


def scenario_index(dataset: Projections, scenario_name: str) -> int:
    """Return the position of ``scenario_name`` on the scenario axis.

    Args:
        dataset: Loaded probabilistic or deterministic projections
        scenario_name: Scenario label, e.g. "rcp45" or "intermediate"

    Returns:
        Index of the first label equal to ``scenario_name``

    Raises:
        UnknownScenarioError: If the label is not in ``dataset.scenario_labels``
    """
    for idx, label in enumerate(dataset.scenario_labels):
        if label == scenario_name:
            return idx
    raise UnknownScenarioError(
        f"Unknown scenario: {scenario_name!r}. "
        f"Available: {list(dataset.scenario_labels)}"
    )


def extract(dataset: Projections, scenario_name: str) -> np.ndarray:
    """Slice one scenario out of a projections record.

    Args:
        dataset: Loaded probabilistic or deterministic projections
        scenario_name: Scenario label

    Returns:
        (time, ensemble) array for probabilistic projections,
        (time,) array for deterministic projections. Values in meters.

    Example:
        >>> rcp45 = extract(brick, "rcp45")
        >>> rcp45.shape
        (101, 10000)
    """
    idx = scenario_index(dataset, scenario_name)
    return dataset.values[..., idx]


def get_brick_scenario(
    dataset: ProbabilisticProjections, rcp: str
) -> np.ndarray:
    """Extract a single RCP scenario as a (time, ensemble) array."""
    if not isinstance(dataset, ProbabilisticProjections):
        raise TypeError(
            f"Expected ProbabilisticProjections, got {type(dataset).__name__}"
        )
    return extract(dataset, rcp)


def get_noaa_scenario(dataset: DeterministicProjections, scenario: str) -> np.ndarray:
    """Extract a single NOAA scenario as a (time,) array."""
    if not isinstance(dataset, DeterministicProjections):
        raise TypeError(
            f"Expected DeterministicProjections, got {type(dataset).__name__}"
        )
    return extract(dataset, scenario)


def year_index(dataset: Projections, year: int) -> int:
    """Return the position of ``year`` on the time axis."""
    matches = np.flatnonzero(dataset.years == year)
    if matches.size == 0:
        first, last = dataset.year_range
        raise YearOutOfRangeError(
            f"Year {year} not in data. Available: {first} to {last}"
        )
    return int(matches[0])


def at_year(
    dataset: ProbabilisticProjections, scenario_name: str, year: int
) -> np.ndarray:
    """Return the ensemble distribution of one scenario at ``year``.

    Args:
        dataset: Loaded probabilistic projections
        scenario_name: RCP scenario label
        year: Target year, must be on the time axis

    Returns:
        1D array of sea-level rise [m] across ensemble members

    Raises:
        UnknownScenarioError: If the scenario is unknown
        YearOutOfRangeError: If ``year`` is not in ``dataset.years``
    """
    scenario = get_brick_scenario(dataset, scenario_name)
    return scenario[year_index(dataset, year), :]
