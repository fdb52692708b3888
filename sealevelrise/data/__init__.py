"""Projection loading and validation module."""
# ruff: noqa: F401

# Import concrete loaders so their decorators execute at import time:
from .datasets import (
    NOAA_SCENARIOS,
    RCP_SCENARIOS,
    DeterministicProjections,
    ProbabilisticProjections,
)
from .loaders import (
    DeterministicLoader,
    ProbabilisticLoader,
    load_brick_projections,
    load_noaa_scenarios,
)
from .registry import get_registered, load, load_all, register_loader
