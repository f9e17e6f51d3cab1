"""Placement tables: per-square worth of a white man.

Black uses the same table turned 180 degrees (see :func:`table_for`), which
keeps the placement term symmetric between the sides.
"""

from __future__ import annotations

from functools import cache

from draughtsai.core.enums import Color
from draughtsai.core.types import BOARD_SIZE

PlacementTable = tuple[tuple[int, ...], ...]

# Strong back rank and a pull toward rows 4-5.
FORWARD_PRESSURE: PlacementTable = (
    (0, 15, 0, 20, 0, 30, 0, 15, 0, 10),
    (50, 0, 55, 0, 70, 0, 60, 0, 55, 0),
    (0, 15, 0, 20, 0, 30, 0, 15, 0, 10),
    (10, 0, 15, 0, 30, 0, 20, 0, 15, 0),
    (0, 85, 0, 90, 0, 100, 0, 85, 0, 10),
    (70, 0, 75, 0, 90, 0, 80, 0, 75, 0),
    (0, 65, 0, 70, 0, 80, 0, 65, 0, 60),
    (30, 0, 35, 0, 50, 0, 40, 0, 35, 0),
    (0, 25, 0, 40, 0, 50, 0, 35, 0, 30),
    (50, 0, 65, 0, 70, 0, 60, 0, 55, 0),
)

# Same shape with a heavier back rank.
FORTIFIED_BASE: PlacementTable = (
    (0, 15, 0, 20, 0, 30, 0, 15, 0, 10),
    (50, 0, 55, 0, 70, 0, 60, 0, 55, 0),
    (0, 15, 0, 20, 0, 30, 0, 15, 0, 10),
    (10, 0, 15, 0, 30, 0, 20, 0, 15, 0),
    (0, 85, 0, 90, 0, 100, 0, 85, 0, 10),
    (70, 0, 75, 0, 90, 0, 80, 0, 75, 0),
    (0, 65, 0, 70, 0, 80, 0, 65, 0, 60),
    (30, 0, 35, 0, 50, 0, 40, 0, 35, 0),
    (0, 25, 0, 40, 0, 50, 0, 35, 0, 30),
    (60, 0, 75, 0, 80, 0, 70, 0, 65, 0),
)


def validate_table(table: PlacementTable) -> None:
    if len(table) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in table):
        raise ValueError("Placement table must be 10x10")


@cache
def _rotated(table: PlacementTable) -> PlacementTable:
    return tuple(tuple(reversed(row)) for row in reversed(table))


def table_for(table: PlacementTable, color: Color) -> PlacementTable:
    """The table as seen by *color*."""
    if color == Color.WHITE:
        return table
    return _rotated(table)
