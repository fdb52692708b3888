"""Immutable records for loaded sea-level projections.

Two kinds of projection are supported:

- :class:`ProbabilisticProjections`: BRICK ensemble projections with
  ``values`` shaped ``(time, ensemble, scenario)``.
- :class:`DeterministicProjections`: NOAA scenario curves with ``values``
  shaped ``(time, scenario)``.

Shapes are validated against the axis vectors when a record is built, so a
record that exists is always internally consistent.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
import xarray as xr

from ..errors import DataLoadError

if TYPE_CHECKING:
    from typing import Self


# Scenario axis order as stored in the projection file
RCP_SCENARIOS: tuple[str, ...] = ("rcp26", "rcp45", "rcp60", "rcp85")
NOAA_SCENARIOS: tuple[str, ...] = (
    "low",
    "int_low",
    "intermediate",
    "int_high",
    "high",
)


def _frozen_array(values: Sequence | np.ndarray, dtype: type) -> np.ndarray:
    """Copy ``values`` into a read-only array of ``dtype``."""
    arr = np.array(values, dtype=dtype, copy=True)
    arr.setflags(write=False)
    return arr


def _check_years(years: np.ndarray) -> None:
    if years.ndim != 1 or years.size == 0:
        raise DataLoadError(
            f"Year axis must be a non-empty 1D vector, got shape {years.shape}"
        )


def _check_ensemble(ensemble_ids: np.ndarray) -> None:
    # An empty ensemble is allowed; quantiles reject it later
    if ensemble_ids.ndim != 1:
        raise DataLoadError(
            f"Ensemble axis must be a 1D vector, got shape {ensemble_ids.shape}"
        )


def _check_axis(name: str, axis_len: int, values: np.ndarray, dim: int) -> None:
    if values.shape[dim] != axis_len:
        raise DataLoadError(
            f"Axis '{name}' has length {axis_len} but values have "
            f"{values.shape[dim]} entries along dimension {dim} "
            f"(values shape {values.shape})"
        )


@dataclass(frozen=True, eq=False)
class ProbabilisticProjections:
    """Ensemble sea-level rise projections [m], indexed (time, ensemble, scenario)."""

    years: np.ndarray
    ensemble_ids: np.ndarray
    values: np.ndarray
    scenario_labels: tuple[str, ...] = field(default=RCP_SCENARIOS)

    def __post_init__(self: Self) -> None:
        years = _frozen_array(self.years, int)
        ensemble_ids = _frozen_array(self.ensemble_ids, int)
        values = _frozen_array(self.values, np.float64)
        _check_years(years)
        _check_ensemble(ensemble_ids)

        if values.ndim != 3:
            raise DataLoadError(
                f"Probabilistic projections must be 3D (time, ensemble, scenario), "
                f"got shape {values.shape}"
            )
        _check_axis("time", len(years), values, 0)
        _check_axis("ensemble", len(ensemble_ids), values, 1)
        _check_axis("scenario", len(self.scenario_labels), values, 2)

        object.__setattr__(self, "years", years)
        object.__setattr__(self, "ensemble_ids", ensemble_ids)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "scenario_labels", tuple(self.scenario_labels))

    @property
    def n_members(self: Self) -> int:
        """Number of ensemble members."""
        return len(self.ensemble_ids)

    @property
    def year_range(self: Self) -> tuple[int, int]:
        """(first, last) year on the time axis."""
        return int(self.years.min()), int(self.years.max())

    def to_dataarray(self: Self) -> xr.DataArray:
        """Return the projections as a labelled ``xarray.DataArray``."""
        return xr.DataArray(
            self.values,
            coords=[
                ("time", self.years),
                ("ensemble", self.ensemble_ids),
                ("scenario", list(self.scenario_labels)),
            ],
            name="brick_slr",
            attrs={"units": "m"},
        )


@dataclass(frozen=True, eq=False)
class DeterministicProjections:
    """Scenario sea-level rise curves [m], indexed (time, scenario)."""

    years: np.ndarray
    values: np.ndarray
    scenario_labels: tuple[str, ...] = field(default=NOAA_SCENARIOS)

    def __post_init__(self: Self) -> None:
        years = _frozen_array(self.years, int)
        values = _frozen_array(self.values, np.float64)
        _check_years(years)

        if values.ndim != 2:
            raise DataLoadError(
                f"Deterministic projections must be 2D (time, scenario), "
                f"got shape {values.shape}"
            )
        _check_axis("time", len(years), values, 0)
        _check_axis("scenario", len(self.scenario_labels), values, 1)

        object.__setattr__(self, "years", years)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "scenario_labels", tuple(self.scenario_labels))

    @property
    def year_range(self: Self) -> tuple[int, int]:
        """(first, last) year on the time axis."""
        return int(self.years.min()), int(self.years.max())

    def to_dataarray(self: Self) -> xr.DataArray:
        """Return the scenarios as a labelled ``xarray.DataArray``."""
        return xr.DataArray(
            self.values,
            coords=[
                ("time", self.years),
                ("scenario", list(self.scenario_labels)),
            ],
            name="noaa_slr",
            attrs={"units": "m"},
        )
