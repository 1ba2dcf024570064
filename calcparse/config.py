"""
Configuration objects for the parser and evaluator.

Author: xwest
"""

import sys
from dataclasses import dataclass
from enum import Enum, auto


# Each level of parenthesis nesting costs four Python frames
# (expr -> term -> factor -> grouping), so this stays well below the
# default interpreter recursion limit.
DEFAULT_MAX_NESTING_DEPTH = 128

FRAMES_PER_NESTING_LEVEL = 4

# Frames left for the caller and for the parse entry points
RECURSION_HEADROOM = 200


def max_supported_nesting_depth() -> int:
    """Deepest nesting the current interpreter recursion limit can parse."""
    return max(1, (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_NESTING_LEVEL)


class DivisionMode(Enum):
    """Integer division rounding modes"""
    TRUNCATE = auto()       # Round toward zero: -7 / 2 == -3
    FLOOR = auto()          # Round toward negative infinity: -7 / 2 == -4


@dataclass
class ParserConfig:
    """Configuration parameters for the parser"""

    # Maximum number of simultaneously open parentheses
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self):
        if isinstance(self.max_nesting_depth, bool) or not isinstance(self.max_nesting_depth, int):
            raise ValueError(f"max_nesting_depth must be an integer, got {self.max_nesting_depth!r}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
        supported = max_supported_nesting_depth()
        if self.max_nesting_depth > supported:
            raise ValueError(
                f"max_nesting_depth {self.max_nesting_depth} exceeds {supported}, the deepest "
                f"nesting the recursion limit ({sys.getrecursionlimit()}) allows"
            )


@dataclass
class EvaluatorConfig:
    """Configuration parameters for the evaluator"""

    division_mode: DivisionMode = DivisionMode.TRUNCATE

    def __post_init__(self):
        if not isinstance(self.division_mode, DivisionMode):
            raise ValueError(f"division_mode must be a DivisionMode, got {self.division_mode!r}")
