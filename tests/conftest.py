"""
Pytest configuration and shared fixtures for pepver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from pepver.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_metadata_text() -> str:
    """
    Provide a realistic METADATA document.

    Includes repeated fields, a continuation line and a description body.
    """
    return (
        "Metadata-Version: 2.1\n"
        "Name: pandas\n"
        "Version: 1.5.3\n"
        "Summary: Powerful data structures for data analysis\n"
        "Home-page: https://pandas.pydata.org\n"
        "Author: The Pandas Development Team\n"
        "License: BSD-3-Clause\n"
        "Keywords: data, analysis, dataframe\n"
        "Platform: any\n"
        "Classifier: Programming Language :: Python :: 3\n"
        "Classifier: Operating System :: OS Independent\n"
        "Requires-Python: >=3.8\n"
        "Requires-Dist: numpy>=1.21.0\n"
        "Requires-Dist: python-dateutil>=2.8.1\n"
        "Provides-Extra: test\n"
        "Project-URL: Source, https://github.com/pandas-dev/pandas\n"
        "License-File: LICENSE\n"
        "Description-Content-Type: text/markdown\n"
        "\n"
        "pandas is a fast, powerful, flexible and easy to use\n"
        "open source data analysis tool.\n"
    )


@pytest.fixture
def create_metadata_file(tmp_test_dir: Path):
    """
    Factory fixture for writing metadata documents to disk.

    Usage:
        path = create_metadata_file("PKG-INFO", "Name: x\\n...")
    """

    def _create(filename: str, text: str) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("pepver.yaml", {"output": {"format": "json"}})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
