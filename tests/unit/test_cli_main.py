"""Unit tests for sealevelrise CLI main function.

Tests the main CLI entry point including imports and the public API surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Self


class TestCliImports:
    """Test that all required imports work."""

    def test_import_config(self: Self):
        """Test config module import."""
        from sealevelrise.config import get_config

        assert callable(get_config)

    def test_import_main_function(self: Self):
        """Test main function import."""
        from sealevelrise.cli.main import main

        assert callable(main)

    def test_package_exports(self: Self):
        """Test the top-level package exposes every public name it lists."""
        import sealevelrise

        for name in sealevelrise.__all__:
            assert hasattr(sealevelrise, name), f"sealevelrise missing: {name}"


class TestErrorTaxonomy:
    """Test that failure kinds can be told apart programmatically."""

    def test_errors_share_a_base(self: Self):
        """Every error derives from SeaLevelDataError."""
        from sealevelrise import errors

        for cls in (
            errors.DataLoadError,
            errors.UnknownScenarioError,
            errors.YearOutOfRangeError,
            errors.InsufficientDataError,
        ):
            assert issubclass(cls, errors.SeaLevelDataError)

    def test_errors_are_distinct(self: Self):
        """No error kind is a subclass of another."""
        from sealevelrise import errors

        kinds = [
            errors.DataLoadError,
            errors.UnknownScenarioError,
            errors.YearOutOfRangeError,
            errors.InsufficientDataError,
        ]
        for a in kinds:
            for b in kinds:
                if a is not b:
                    assert not issubclass(a, b)
