"""
calcparse Printer Package

Serializes expression trees back to text.

Author: xwest
"""

from .printer import to_infix, to_sexpr

__all__ = [
    "to_infix",
    "to_sexpr",
]
