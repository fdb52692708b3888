"""Pytest configuration file.

Puts the project root on the Python path so that the sealevelrise package
can be imported during testing even if it's not installed, and provides
small projection files shared by the unit and integration tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest
import xarray as xr

# Get the project root directory (conftest.py is in tests/)
tests_dir = Path(__file__).parent
project_root = tests_dir.parent

if (project_root / "sealevelrise").exists():
    sys.path.insert(0, str(project_root))

from sealevelrise.data.datasets import (  # noqa: E402
    DeterministicProjections,
    ProbabilisticProjections,
)

YEARS = np.array([2000, 2001, 2002])
ENSEMBLE = np.array([1, 2, 3])


def make_brick_values() -> np.ndarray:
    """(time, ensemble, rcp) cube where rcp45 in 2001 is [0.1, 0.2, 0.3]."""
    t = np.arange(len(YEARS)).reshape(-1, 1, 1)
    e = np.arange(len(ENSEMBLE)).reshape(1, -1, 1)
    s = np.arange(4).reshape(1, 1, -1)
    return (e + 1) * 0.1 + (t - 1) * (s + 1) * 0.05


def make_noaa_values() -> np.ndarray:
    """(time, scenario) matrix rising faster for the higher scenarios."""
    t = np.arange(len(YEARS)).reshape(-1, 1)
    s = np.arange(5).reshape(1, -1)
    return t * (s + 1) * 0.01


def write_projection_file(path: Path, *, reversed_dims: bool = False) -> Path:
    """Write a projection file the way the loaders expect to find it."""
    brick = make_brick_values()
    noaa = make_noaa_values()
    if reversed_dims:
        brick_var = (("rcp", "ensemble", "time"), brick.transpose(2, 1, 0))
        noaa_var = (("scenario", "time"), noaa.T)
    else:
        brick_var = (("time", "ensemble", "rcp"), brick)
        noaa_var = (("time", "scenario"), noaa)
    ds = xr.Dataset(
        {"brick_slr": brick_var, "noaa_slr": noaa_var},
        coords={"time": YEARS, "ensemble": ENSEMBLE},
    )
    ds.to_netcdf(path)
    return path


@pytest.fixture
def projection_file(tmp_path: Path) -> Path:
    """Projection file with dims stored as (time, ensemble, rcp)."""
    return write_projection_file(tmp_path / "sea_level_projections.nc")


@pytest.fixture
def brick() -> ProbabilisticProjections:
    """In-memory BRICK projections matching the projection file."""
    return ProbabilisticProjections(
        years=YEARS, ensemble_ids=ENSEMBLE, values=make_brick_values()
    )


@pytest.fixture
def noaa() -> DeterministicProjections:
    """In-memory NOAA scenarios matching the projection file."""
    return DeterministicProjections(years=YEARS, values=make_noaa_values())
