"""
Pytest configuration and shared fixtures for atomicgen tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest

from atomicgen.codegen.catalog import DEFAULT_CATALOG, create_catalog
from atomicgen.codegen.templates import PlaceholderRenderer, parse_template
from atomicgen.utils.config import TEMPLATE_DIR, GeneratorConfig, set_config


SOURCE_TEMPLATE = TEMPLATE_DIR / "atomic-template.swift"
SUITE_TEMPLATE = TEMPLATE_DIR / "atomic-test-template.swift"


# Template fixtures
@pytest.fixture(scope="session")
def source_template_text():
    """Bundled wrapper source template."""
    return SOURCE_TEMPLATE.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def suite_template_text():
    """Bundled test-suite template."""
    return SUITE_TEMPLATE.read_text(encoding="utf-8")


@pytest.fixture
def source_fragments(source_template_text):
    """Parsed wrapper source template."""
    return parse_template(source_template_text)


@pytest.fixture
def suite_fragments(suite_template_text):
    """Parsed test-suite template."""
    return parse_template(suite_template_text)


@pytest.fixture
def renderer():
    """Fresh placeholder renderer."""
    return PlaceholderRenderer()


# Catalog fixtures
@pytest.fixture
def catalog():
    """Default type catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def small_catalog():
    """Catalog with one type per category."""
    return create_catalog(
        signed=("Int",),
        unsigned=("UInt",),
        floats=("Double",),
        bools=("Bool",),
        strings=("String",),
    )


# Configuration fixtures
@pytest.fixture
def default_config(tmp_path, monkeypatch):
    """Configuration with built-in defaults and no file on disk."""
    monkeypatch.chdir(tmp_path)
    config = GeneratorConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def project_dir(tmp_path):
    """Output root for generated files."""
    root = tmp_path / "project"
    root.mkdir()
    return root


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "filecheck" in path:
            item.add_marker(pytest.mark.filecheck)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style checks over generated Swift"
    )
