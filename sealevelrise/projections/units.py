"""Unit conversion."""

from __future__ import annotations

FEET_PER_METER = 3.28084


def meters_to_feet(slr_meters):  # type: ignore[no-untyped-def]
    """Convert sea-level rise from meters to feet (scalar or elementwise)."""
    return slr_meters * FEET_PER_METER
