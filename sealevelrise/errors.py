"""Exception types raised by sealevelrise.

Callers can catch :class:`SeaLevelDataError` for any failure, or one of the
concrete subclasses to tell failure kinds apart.
"""

from __future__ import annotations


class SeaLevelDataError(Exception):
    """Base class for all sealevelrise errors."""


class DataLoadError(SeaLevelDataError):
    """File missing or unreadable, named array absent, or shape mismatch."""


class UnknownScenarioError(SeaLevelDataError, ValueError):
    """Requested scenario is not one of the dataset's scenario labels."""


class YearOutOfRangeError(SeaLevelDataError, ValueError):
    """Requested year is not on the dataset's year axis."""


class InsufficientDataError(SeaLevelDataError, ValueError):
    """Quantiles were requested over an empty ensemble."""
