"""Configuration management module."""

from sealevelrise.config.loader import ProjectionConfig, get_config, load_config

__all__ = ["ProjectionConfig", "load_config", "get_config"]
