"""Human-readable summary of loaded projections."""

from __future__ import annotations

from ..data.datasets import DeterministicProjections, ProbabilisticProjections

DEFAULT_LOCATION = "Sewells Point, Norfolk, VA"
DEFAULT_BASELINE_YEAR = 2000
RULE = "=" * 50


def data_summary(
    brick: ProbabilisticProjections,
    noaa: DeterministicProjections,
    location: str = DEFAULT_LOCATION,
    baseline_year: int = DEFAULT_BASELINE_YEAR,
) -> str:
    """Describe both projection records: year ranges, scenarios, member count."""
    brick_first, brick_last = brick.year_range
    noaa_first, noaa_last = noaa.year_range
    lines = [
        "Sea Level Rise Projection Data Summary",
        RULE,
        f"Location: {location}",
        f"Baseline: Year {baseline_year}",
        "",
        "BRICK Projections (probabilistic):",
        f"  Years: {brick_first} to {brick_last}",
        f"  RCP scenarios: {', '.join(brick.scenario_labels)}",
        f"  Ensemble members: {brick.n_members}",
        "",
        "NOAA Scenarios (deterministic):",
        f"  Years: {noaa_first} to {noaa_last}",
        f"  Scenarios: {', '.join(noaa.scenario_labels)}",
        RULE,
    ]
    return "\n".join(lines)
