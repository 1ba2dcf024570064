"""
calcparse Evaluator Package

Reduces expression trees to integers.

Author: xwest
"""

from .evaluator import Evaluator, evaluate
from .errors import EvalError, DivisionByZeroError

__all__ = [
    "Evaluator",
    "evaluate",
    "EvalError",
    "DivisionByZeroError",
]
