# loaders/deterministic.py
"""Deterministic NOAA scenario loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ..base import BaseLoader
from ..datasets import NOAA_SCENARIOS, DeterministicProjections
from ..registry import register_loader

logger = logging.getLogger(__name__)


@register_loader("noaa_scenarios")
@dataclass
class DeterministicLoader(BaseLoader):
    """Loader for NOAA deterministic sea-level rise scenarios.

    Assumptions:
    - The projection file is a NetCDF file like:

        <xarray.Dataset>
        Dimensions:    (time: 101, scenario: 5)
        Coordinates:
          * time       (time) int64
        Data variables:
            noaa_slr   (time, scenario) float64   [m]

    - The scenario axis follows NOAA_SCENARIOS order.
    """

    variable: str = "noaa_slr"

    scenario_labels: tuple[str, ...] = NOAA_SCENARIOS

    def load(self) -> DeterministicProjections:
        """Read years and the scenario matrix into a validated record."""
        with self._open() as raw:
            ds = self._postprocess(raw, ("time", self.variable))
            years = self._read_axis(ds, "time")
            values = self._read_array(ds, self.variable, ("time",))

        projections = DeterministicProjections(
            years=years,
            values=values,
            scenario_labels=self.scenario_labels,
        )
        logger.info(
            "Loaded %s: %d years x %d scenarios",
            self.variable,
            *projections.values.shape,
        )
        return projections


def load_noaa_scenarios(
    path: str | os.PathLike, **kwargs
) -> DeterministicProjections:
    """Load NOAA scenarios from ``path``."""
    return DeterministicLoader(path=path, **kwargs).load()
