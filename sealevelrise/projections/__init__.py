"""Scenario accessors and ensemble statistics."""

from sealevelrise.projections.quantiles import DEFAULT_PROBS, quantile_table, quantiles
from sealevelrise.projections.scenarios import (
    at_year,
    extract,
    get_brick_scenario,
    get_noaa_scenario,
    scenario_index,
    year_index,
)
from sealevelrise.projections.units import FEET_PER_METER, meters_to_feet

__all__ = [
    "DEFAULT_PROBS",
    "FEET_PER_METER",
    "at_year",
    "extract",
    "get_brick_scenario",
    "get_noaa_scenario",
    "meters_to_feet",
    "quantile_table",
    "quantiles",
    "scenario_index",
    "year_index",
]
