"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from draughtsai.testing import GameTreePosition, TreeEvaluator

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# Textbook three-by-three tree: minimax value 3 via the first move.
CLASSIC_TREE = [[3, 12, 8], [2, 4, 6], [14, 5, 2]]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def classic_tree() -> GameTreePosition:
    return GameTreePosition.from_nested(CLASSIC_TREE)


@pytest.fixture
def tree_evaluator() -> TreeEvaluator:
    return TreeEvaluator()
