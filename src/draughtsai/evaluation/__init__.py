"""
Evaluation Module

Position evaluators for the search. Evaluators are swappable: the search works
with any :class:`Evaluator`, and all of them score from white's perspective.

Key Components:
    - Evaluator (ABC): the evaluation interface
    - DraughtsEvaluator: material + placement + shape + distribution terms
    - MaterialEvaluator: plain piece count
    - RolloutEvaluator: averages another evaluator over random playouts
    - EvaluationWeights: the tunable weight set

Data Flow:
    DraughtsState → evaluator.evaluate() → int
                                           Positive = white advantage
                                           Negative = black advantage
"""

from draughtsai.evaluation.base import INF_SCORE, WIN_SCORE, Evaluator
from draughtsai.evaluation.evaluator import DraughtsEvaluator
from draughtsai.evaluation.material import MaterialEvaluator
from draughtsai.evaluation.rollout import RolloutEvaluator
from draughtsai.evaluation.tables import FORTIFIED_BASE, FORWARD_PRESSURE
from draughtsai.evaluation.weights import EvaluationWeights

__all__ = [
    "FORTIFIED_BASE",
    "FORWARD_PRESSURE",
    "INF_SCORE",
    "WIN_SCORE",
    "DraughtsEvaluator",
    "EvaluationWeights",
    "Evaluator",
    "MaterialEvaluator",
    "RolloutEvaluator",
]
