"""Import smoke tests for the double_compare package."""

from __future__ import annotations

import importlib


def test_import_double_compare() -> None:
    module = importlib.import_module("double_compare")
    assert hasattr(module, "__version__")
    assert hasattr(module, "compare_relative")


def test_import_double_compare_logging() -> None:
    module = importlib.import_module("double_compare.logging")
    assert hasattr(module, "configure_logging")


def test_import_double_compare_cli() -> None:
    module = importlib.import_module("double_compare.cli")
    assert hasattr(module, "main")
