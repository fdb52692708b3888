# sealevelrise/data/loaders/__init__.py

"""Public interface for sealevelrise projection loaders.

This module re-exports the loader classes so they can be imported as
`sealevelrise.data.loaders.*`, including:

- ProbabilisticLoader (BRICK ensemble projections)
- DeterministicLoader (NOAA scenarios)
"""

from .deterministic import DeterministicLoader, load_noaa_scenarios  # noqa: F401
from .probabilistic import ProbabilisticLoader, load_brick_projections  # noqa: F401
