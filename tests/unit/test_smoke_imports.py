"""Smoke tests for package imports.

This module verifies that all key packages can be imported successfully.
It serves as a basic sanity check for the project structure.
"""

import pytest


@pytest.mark.unit
class TestSmokeImports:
    """Smoke tests to verify all key packages are importable."""

    def test_import_dataloader_package(self) -> None:
        """Test that the top-level package exposes the public entry points."""
        import dataloader

        for name in ("load_data", "load_csv", "load_excel", "load_api", "load_pdf", "load_html_table"):
            assert callable(getattr(dataloader, name))

    def test_import_core(self) -> None:
        """Test that the core package can be imported."""
        from dataloader import core
        assert core is not None

    def test_import_core_dispatcher(self) -> None:
        """Test that the dispatcher module can be imported."""
        from dataloader.core import dispatcher
        assert dispatcher is not None

    def test_import_libs_loader(self) -> None:
        """Test that the libs.loader subpackage can be imported."""
        from dataloader.libs import loader
        assert loader is not None

    def test_import_observability(self) -> None:
        """Test that the observability package can be imported."""
        from dataloader import observability
        assert observability is not None
