"""sealevelrise: access layer for sea-level rise projection datasets.

Loads BRICK probabilistic projections (Ruckert et al., 2019) and NOAA
deterministic scenarios (Sweet et al., 2017) for a tide-gauge site from a
NetCDF file, and provides scenario accessors and ensemble quantiles.

Basic Usage:
    >>> from sealevelrise import load_brick_projections, extract, quantiles
    >>>
    >>> # Load data
    >>> brick = load_brick_projections("data/sea_level_projections.nc")
    >>>
    >>> # 5-50-95% range for RCP 4.5, one row per year
    >>> q = quantiles(extract(brick, "rcp45"), [0.05, 0.5, 0.95])

Modules:
    - data: Projection loaders and immutable records
    - projections: Scenario extraction, year lookup, quantiles, units
    - reporting: Text summary
    - config: Configuration management
"""

from sealevelrise._version import __version__

# Public API
from sealevelrise.config import ProjectionConfig, load_config
from sealevelrise.data import (
    DeterministicLoader,
    DeterministicProjections,
    ProbabilisticLoader,
    ProbabilisticProjections,
    get_registered,
    load,
    load_all,
    load_brick_projections,
    load_noaa_scenarios,
    register_loader,
)
from sealevelrise.errors import (
    DataLoadError,
    InsufficientDataError,
    SeaLevelDataError,
    UnknownScenarioError,
    YearOutOfRangeError,
)
from sealevelrise.projections import (
    at_year,
    extract,
    get_brick_scenario,
    get_noaa_scenario,
    meters_to_feet,
    quantile_table,
    quantiles,
)
from sealevelrise.reporting import data_summary

__all__ = [
    "__version__",
    "load",
    "load_all",
    "get_registered",
    "register_loader",
    "load_brick_projections",
    "load_noaa_scenarios",
    "ProbabilisticLoader",
    "DeterministicLoader",
    "ProbabilisticProjections",
    "DeterministicProjections",
    "extract",
    "get_brick_scenario",
    "get_noaa_scenario",
    "at_year",
    "quantiles",
    "quantile_table",
    "meters_to_feet",
    "data_summary",
    "load_config",
    "ProjectionConfig",
    "SeaLevelDataError",
    "DataLoadError",
    "UnknownScenarioError",
    "YearOutOfRangeError",
    "InsufficientDataError",
]
