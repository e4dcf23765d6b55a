"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from double_compare.logging import JsonFormatter


@pytest.fixture(autouse=True)
def _reset_json_handlers() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` once a test finishes."""

    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
