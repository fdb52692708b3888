"""Text reporting module."""

from sealevelrise.reporting.summary import data_summary

__all__ = ["data_summary"]
