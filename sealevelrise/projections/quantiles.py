"""Ensemble quantiles per time step."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from ..data.datasets import ProbabilisticProjections
from ..errors import InsufficientDataError
from .scenarios import get_brick_scenario
from .units import meters_to_feet

DEFAULT_PROBS: tuple[float, ...] = (0.05, 0.5, 0.95)


def quantiles(
    scenario_slice: np.ndarray, probs: Sequence[float] = DEFAULT_PROBS
) -> np.ndarray:
    """Compute quantiles across the ensemble axis for every time step.

    Uses linear interpolation between order statistics (Hyndman & Fan
    type 7, the default in R and numpy).

    Args:
        scenario_slice: (time, ensemble) array, e.g. from ``extract``
        probs: Quantile probabilities in [0, 1]

    Returns:
        (time, len(probs)) array, columns in ``probs`` order

    Raises:
        InsufficientDataError: If the ensemble axis is empty
        ValueError: If the input is not 2D or a probability is outside [0, 1]
    """
    data = np.asarray(scenario_slice, dtype=np.float64)
    if data.ndim != 2:
        raise ValueError(
            f"Expected a 2D (time, ensemble) array, got shape {data.shape}"
        )
    if data.shape[1] == 0:
        raise InsufficientDataError(
            "Cannot compute quantiles over an empty ensemble"
        )

    p = np.asarray(probs, dtype=np.float64).reshape(-1)
    if np.any((p < 0.0) | (p > 1.0)) or np.any(np.isnan(p)):
        raise ValueError(f"Quantile probabilities must be in [0, 1], got {p.tolist()}")

    # np.quantile puts the probability axis first
    return np.quantile(data, p, axis=1, method="linear").T


def _column_name(prob: float) -> str:
    pct = round(prob * 100, 6)
    if float(pct).is_integer():
        return f"q{int(pct):02d}"
    return f"q{pct:g}"


def quantile_table(
    dataset: ProbabilisticProjections,
    scenario_name: str,
    probs: Sequence[float] = DEFAULT_PROBS,
    feet: bool = False,
) -> pd.DataFrame:
    """Tabulate per-year quantiles of one RCP scenario, in meters or feet.

    Example:
        >>> quantile_table(brick, "rcp85").loc[2100, "q50"]
    """
    values = quantiles(get_brick_scenario(dataset, scenario_name), probs)
    columns = [_column_name(p) for p in np.asarray(probs, dtype=np.float64).reshape(-1)]
    duplicated = sorted({c for c in columns if columns.count(c) > 1})
    if duplicated:
        raise ValueError(f"Quantile probabilities give duplicate columns: {duplicated}")

    if feet:
        values = meters_to_feet(values)
    table = pd.DataFrame(
        values,
        index=pd.Index(dataset.years, name="year"),
        columns=columns,
    )
    table.attrs["scenario"] = scenario_name
    table.attrs["units"] = "ft" if feet else "m"
    return table
