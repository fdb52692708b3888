# sealevelrise/data/loaders/probabilistic.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ..base import BaseLoader
from ..datasets import RCP_SCENARIOS, ProbabilisticProjections
from ..registry import register_loader

logger = logging.getLogger(__name__)


@register_loader("brick_projections")
@dataclass
class ProbabilisticLoader(BaseLoader):
    """Loader for BRICK probabilistic sea-level rise projections.

    Assumptions:
    - The projection file is a NetCDF file like:

        <xarray.Dataset>
        Dimensions:    (time: 101, ensemble: 10000, rcp: 4)
        Coordinates:
          * time       (time) int64        (Years, e.g. 2000..2100)
          * ensemble   (ensemble) int64    (Ensemble member ids)
        Data variables:
            brick_slr  (time, ensemble, rcp) float64   [m]

    - The rcp axis follows RCP_SCENARIOS order; labels are not read from the file.
    """

    variable: str = "brick_slr"

    scenario_labels: tuple[str, ...] = RCP_SCENARIOS

    def load(self) -> ProbabilisticProjections:
        """Read years, ensemble ids and the slr cube into a validated record."""
        with self._open() as raw:
            ds = self._postprocess(raw, ("time", "ensemble", self.variable))
            years = self._read_axis(ds, "time")
            ensemble_ids = self._read_axis(ds, "ensemble")
            values = self._read_array(ds, self.variable, ("time", "ensemble"))

        projections = ProbabilisticProjections(
            years=years,
            ensemble_ids=ensemble_ids,
            values=values,
            scenario_labels=self.scenario_labels,
        )
        logger.info(
            "Loaded %s: %d years x %d members x %d scenarios",
            self.variable,
            *projections.values.shape,
        )
        return projections


def load_brick_projections(
    path: str | os.PathLike, **kwargs
) -> ProbabilisticProjections:
    """Load BRICK projections from ``path``."""
    return ProbabilisticLoader(path=path, **kwargs).load()
