"""Base loader class for projection files.

This module provides the BaseLoader class that the projection loaders inherit from.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import xarray as xr

from ..errors import DataLoadError

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


"""
The names of the axis variables in a projection file should be:
    1. "time" for the projection years
    2. "ensemble" for the ensemble member ids

The following aliases are accepted so that files written by other tools load
without an explicit rename map.
"""

DEFAULT_VAR_ALIASES = {
    "year": "time",
    "years": "time",
    "Year": "time",
    "YEAR": "time",
    "Time": "time",
    "TIME": "time",
    "member": "ensemble",
    "members": "ensemble",
    "ens": "ensemble",
    "realization": "ensemble",
    "number": "ensemble",
}


@dataclass
class BaseLoader:
    """Base class for projection loaders.

    Subclasses implement .load() to read their arrays from the opened
    dataset and return an immutable projections record.

    Common knobs:
      - path:         projection NetCDF file
      - engine:       xarray engine ('netcdf4', 'h5netcdf', 'scipy', ...)
      - decode_times: let xarray decode CF times (off: years stay integers)
      - rename:       explicit rename map (overrides DEFAULT_VAR_ALIASES if key collides)
      - subset:       coordinate selection, e.g. {"time": slice(2020, 2100)}
      - ensure_vars:  extra variables that must be present, on top of those load() reads
    """

    path: str | os.PathLike | None = None
    engine: str | None = None
    decode_times: bool = False

    rename: dict[str, str] = field(default_factory=dict)
    subset: dict[str, Any] = field(default_factory=dict)

    ensure_vars: list[str] | None = None

    @classmethod
    def from_kwargs(cls: type[Self], **kwargs) -> Self:  # type: ignore[no-untyped-def]
        """Create a loader instance from keyword arguments."""
        return cls(**kwargs)

    # ------ Helpers ------
    def _open(self: Self) -> xr.Dataset:
        if not self.path:
            raise DataLoadError(
                f"{type(self).__name__} expects 'path' to point to a projection file."
            )
        if not os.path.exists(self.path):
            raise DataLoadError(f"Projection file not found: {self.path}")

        logger.info("Loading projections from: %s", self.path)
        try:
            return xr.open_dataset(
                self.path, engine=self.engine, decode_times=self.decode_times
            )
        except (OSError, ValueError) as err:
            raise DataLoadError(f"Could not read projection file {self.path}: {err}") from err

    def _apply_alias_renames(self: Self, ds: xr.Dataset) -> xr.Dataset:
        # Apply default aliases if present
        for src, tgt in DEFAULT_VAR_ALIASES.items():
            if src in ds.variables or src in ds.dims:
                if tgt in ds.variables or tgt in ds.dims:
                    continue
                ds = ds.rename({src: tgt})
        # Apply explicit user-provided rename (takes precedence)
        if self.rename:
            ds = ds.rename(self.rename)
        return ds

    def _subset(self: Self, ds: xr.Dataset) -> xr.Dataset:
        if not self.subset:
            return ds
        # Only keep keys that exist as coords
        indexers = {k: v for k, v in self.subset.items() if k in ds.coords}
        if indexers:
            ds = ds.sel(**indexers)
        return ds

    def _ensure(self: Self, ds: xr.Dataset, required: tuple[str, ...] = ()) -> None:
        # Names the loader reads are always checked; ensure_vars adds to them
        wanted = list(dict.fromkeys([*required, *(self.ensure_vars or [])]))
        missing_vars = [v for v in wanted if v not in ds.variables]
        if missing_vars:
            raise DataLoadError(
                f"Missing required variables in {self.path}: {missing_vars}. "
                f"Available: {sorted(map(str, ds.variables))}"
            )

    def _postprocess(
        self: Self, ds: xr.Dataset, required: tuple[str, ...] = ()
    ) -> xr.Dataset:
        """Run after the file is opened. ``required`` lists the variables load() reads.

        Order matters: rename -> subset -> ensure
        """
        ds = self._apply_alias_renames(ds)
        ds = self._subset(ds)
        self._ensure(ds, required)
        return ds

    @staticmethod
    def _read_axis(ds: xr.Dataset, name: str) -> np.ndarray:
        """Read a 1D axis vector and convert it to integers."""
        values = np.asarray(ds[name].values)
        if values.ndim != 1:
            raise DataLoadError(f"Axis '{name}' must be 1D, got shape {values.shape}")
        if values.dtype.kind in "iu":
            return values.astype(int)
        try:
            numeric = values.astype(np.float64)
        except (TypeError, ValueError) as err:
            raise DataLoadError(f"Axis '{name}' is not integer-convertible") from err
        if not np.all(np.isfinite(numeric)) or np.any(numeric != np.round(numeric)):
            raise DataLoadError(
                f"Axis '{name}' must hold finite whole numbers, got {values.tolist()}"
            )
        return numeric.astype(int)

    @staticmethod
    def _read_array(
        ds: xr.Dataset, name: str, leading_dims: tuple[str, ...]
    ) -> np.ndarray:
        """Read a data variable with ``leading_dims`` moved to the front.

        Files written by column-major tools store dimensions in reverse order;
        when the variable names its dims, transpose by name. Unnamed layouts
        are returned as stored and left to the shape checks.
        """
        var = ds[name]
        if all(dim in var.dims for dim in leading_dims):
            if var.dims[: len(leading_dims)] != leading_dims:
                logger.debug("Transposing %s from %s", name, var.dims)
            var = var.transpose(*leading_dims, ...)
        try:
            return np.asarray(var.values, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise DataLoadError(f"Variable '{name}' is not numeric") from err

    # ------ What subclasses must implement ------
    def load(self: Self) -> Any:
        """Return a projections record. Must call self._postprocess(...) on the opened file."""
        raise NotImplementedError("Implement in subclasses")
