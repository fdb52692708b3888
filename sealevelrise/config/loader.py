"""Configuration loading and management for sealevelrise.

This module provides utilities for loading configuration from YAML files
and command-line arguments, with CLI arguments taking precedence.
"""

import argparse
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from sealevelrise.projections.quantiles import DEFAULT_PROBS
from sealevelrise.reporting.summary import DEFAULT_BASELINE_YEAR, DEFAULT_LOCATION


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary

    Example:
        >>> config = load_config("examples/configs/norfolk.yaml")
        >>> print(config['data_path'])
        data/sea_level_projections.nc
    """
    config_path = Path(config_path)
    with config_path.open() as f:
        config = yaml.safe_load(f)
    return config or {}


@dataclass
class ProjectionConfig:
    """Where the projection file lives and how to describe it.

    Args:
        data_path: NetCDF file holding time, ensemble, brick_slr and noaa_slr
        location: Site name used in the summary report
        baseline_year: Year the projections are referenced to
        probs: Default quantile probabilities
        engine: Optional xarray engine for reading the file
    """

    data_path: Path
    location: str = DEFAULT_LOCATION
    baseline_year: int = DEFAULT_BASELINE_YEAR
    probs: list[float] = field(default_factory=lambda: list(DEFAULT_PROBS))
    engine: str | None = None

    def __post_init__(self) -> None:
        self.data_path = Path(self.data_path)
        self.baseline_year = int(self.baseline_year)
        self.probs = [float(p) for p in self.probs]

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ProjectionConfig":
        """Build a config from a dictionary, ignoring unrelated keys."""
        if not config.get("data_path"):
            raise ValueError("Configuration is missing required key 'data_path'")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known and v is not None})

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "ProjectionConfig":
        """Create a config from a YAML file.

        Relative ``data_path`` values are resolved against the YAML file's folder.
        """
        config_path = Path(config_path)
        config = load_config(config_path)
        data_path = config.get("data_path")
        if data_path and not Path(data_path).is_absolute():
            config["data_path"] = config_path.parent / data_path
        return cls.from_mapping(config)


def setup_parser_with_config() -> argparse.ArgumentParser:
    """Setup argument parser that accepts both config file and CLI arguments.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Summarize BRICK and NOAA sea-level rise projections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the data summary
  sealevelrise --data_path data/sea_level_projections.nc

  # Per-year quantiles for one RCP scenario, in feet
  sealevelrise --config config.yaml --scenario rcp45 --feet

  # Ensemble quantiles at a single year
  sealevelrise --config config.yaml --scenario rcp85 --year 2100 --probs 0.1 0.5 0.9
        """,
    )

    # Config file argument
    parser.add_argument(
        "--config", type=str, default=None, help="Path to YAML configuration file"
    )

    # Data paths
    parser.add_argument(
        "--data_path", type=str, help="Path to the sea-level projection NetCDF file"
    )
    parser.add_argument("--engine", type=str, help="xarray engine used to read the file")

    # Report parameters
    parser.add_argument("--location", type=str, help="Site name for the summary")
    parser.add_argument(
        "--baseline_year", type=int, help="Baseline year of the projections"
    )

    # Statistics parameters
    parser.add_argument(
        "--scenario", type=str, help="RCP scenario to tabulate (e.g. rcp45)"
    )
    parser.add_argument(
        "--year", type=int, help="Report the ensemble quantiles at this year only"
    )
    parser.add_argument(
        "--probs",
        nargs="+",
        type=float,
        help="Quantile probabilities (default: 0.05 0.5 0.95)",
    )
    parser.add_argument(
        "--feet", action="store_true", help="Report values in feet instead of meters"
    )

    return parser


def get_config(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse arguments and merge with config file if provided.

    Command-line arguments take precedence over config file.

    Returns:
        Configuration object as argparse.Namespace

    Raises:
        SystemExit: If required parameters are missing
    """
    parser = setup_parser_with_config()
    args = parser.parse_args(argv)

    config: dict[str, Any] = {
        "location": DEFAULT_LOCATION,
        "baseline_year": DEFAULT_BASELINE_YEAR,
        "probs": list(DEFAULT_PROBS),
        "engine": None,
        "scenario": None,
        "year": None,
        "feet": False,
    }

    # Load from YAML if provided
    if args.config:
        yaml_config = load_config(args.config)
        data_path = yaml_config.get("data_path")
        if data_path and not Path(data_path).is_absolute():
            yaml_config["data_path"] = str(Path(args.config).parent / data_path)
        config.update(yaml_config)
        print(f"Loaded configuration from: {args.config}")

    # Override with command-line arguments (if explicitly provided)
    cli_args = vars(args)
    for key, value in cli_args.items():
        if key != "config" and value is not None:
            if key == "feet":
                if value is True:
                    config[key] = True
            else:
                config[key] = value

    if not config.get("data_path"):
        parser.error(
            "Missing required parameter: data_path\n"
            "Provide it via config file (--config) or command-line arguments."
        )
    if config.get("year") is not None and not config.get("scenario"):
        parser.error("--year requires --scenario")

    return argparse.Namespace(**config)
