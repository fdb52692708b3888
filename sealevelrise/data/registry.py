"""Registry of projection loaders.

Loaders register under the key they are looked up by (``"brick_projections"``,
``"noaa_scenarios"``), so that configuration files and the CLI can refer to
them by name.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from .base import BaseLoader

_REGISTRY: dict[str, type[BaseLoader]] = {}


def register_loader(name: str) -> Callable[[type[BaseLoader]], type[BaseLoader]]:
    """Decorator to register a loader class under a string key."""

    def deco(cls: type[BaseLoader]) -> type[BaseLoader]:
        if name in _REGISTRY:
            raise ValueError(
                f"Loader '{name}' already registered to {_REGISTRY[name].__name__}"
            )
        _REGISTRY[name] = cls
        return cls

    return deco


def get_registered() -> dict[str, type[BaseLoader]]:
    """Return a copy of the registry (for help/diagnostics)."""
    return dict(_REGISTRY)


def load(name: str, **kwargs) -> Any:  # type: ignore[no-untyped-def]
    """Build the loader registered as ``name`` from kwargs and load its record."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"Unknown loader '{name}'. Available: [{available}]")
    return _REGISTRY[name].from_kwargs(**kwargs).load()


def load_all(path: str | os.PathLike, **kwargs) -> dict[str, Any]:
    """Load every registered projection kind from one file, keyed by loader name."""
    return {name: load(name, path=path, **kwargs) for name in sorted(_REGISTRY)}
