"""Command-line interface for sealevelrise.

This module provides the main entry point for the sealevelrise CLI command.
"""

from collections.abc import Sequence

from sealevelrise.config import ProjectionConfig, get_config
from sealevelrise.data import load_all
from sealevelrise.projections import at_year, meters_to_feet, quantile_table, quantiles
from sealevelrise.reporting import data_summary


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the sealevelrise CLI.

    Parses configuration from CLI arguments or YAML file, loads both
    projection sets, and prints the summary and requested quantiles.
    """
    args = get_config(argv)
    config = ProjectionConfig.from_mapping(vars(args))

    projections = load_all(config.data_path, engine=config.engine)
    brick = projections["brick_projections"]
    noaa = projections["noaa_scenarios"]

    print(
        data_summary(
            brick, noaa, location=config.location, baseline_year=config.baseline_year
        )
    )

    if not args.scenario:
        return

    units = "ft" if args.feet else "m"

    if args.year is not None:
        distribution = at_year(brick, args.scenario, args.year)
        values = quantiles(distribution.reshape(1, -1), config.probs)[0]
        if args.feet:
            values = meters_to_feet(values)
        print(f"\n=== {args.scenario} in {args.year} ({units}) ===")
        for prob, value in zip(config.probs, values, strict=True):
            print(f"  q{prob:g}: {value:.3f}")
        return

    table = quantile_table(brick, args.scenario, config.probs, feet=args.feet)
    print(f"\n=== {args.scenario} quantiles ({table.attrs['units']}) ===")
    print(table.to_string(float_format=lambda v: f"{v:.3f}"))


if __name__ == "__main__":
    main()
