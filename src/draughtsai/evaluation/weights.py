"""Tunable weights for :class:`~draughtsai.evaluation.evaluator.DraughtsEvaluator`."""

from __future__ import annotations

from dataclasses import dataclass

from draughtsai.evaluation.tables import PlacementTable, validate_table

Thirds = tuple[int, int, int]


@dataclass(slots=True, frozen=True)
class EvaluationWeights:
    """Weight set for the evaluation terms. A zero weight disables a term.

    Attributes:
        man_value: Material worth of a man.
        king_value: Material worth of a king.
        placement_table: Optional per-square worth of a white man.
        table_scale: Multiplier applied to placement table entries.
        advancement: Weight of the tent function over a man's advancement.
        centering: Weight of the tent function over a man's column.
        balance: Bonus per board third (left, middle, right) whose man count
            is a fair share of the side's men.
        balance_all: Extra bonus when all three thirds are balanced.
        domination: Per-third weight for out-numbering the opponent.
        domination_exponent: 0 rewards only the sign of the difference,
            2 rewards its square.
        support: Weight of the neighbouring-men count.
        v_formation: Weight of a two-deep diagonal chain behind a man.
        v_exponent: Power of the apex advancement in the V term.
    """

    man_value: int = 10_000
    king_value: int = 30_000
    placement_table: PlacementTable | None = None
    table_scale: int = 1
    advancement: int = 0
    centering: int = 0
    balance: Thirds = (0, 0, 0)
    balance_all: int = 0
    domination: Thirds = (0, 0, 0)
    domination_exponent: int = 0
    support: int = 0
    v_formation: int = 0
    v_exponent: int = 1

    def __post_init__(self) -> None:
        if self.man_value <= 0 or self.king_value <= 0:
            raise ValueError("Piece values must be positive")
        if self.placement_table is not None:
            validate_table(self.placement_table)
        if len(self.balance) != 3 or len(self.domination) != 3:
            raise ValueError("Third-based weights need exactly three entries")
        if self.domination_exponent < 0 or self.v_exponent < 0:
            raise ValueError("Exponents must be >= 0")
