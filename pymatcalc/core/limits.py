"""
Parsing limits for matrix text sources.

Limits are plain frozen values passed explicitly to the parser; there is
no global or environment-driven configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseLimits:
    """Upper bounds applied while reading a matrix file."""
    max_dimension: int = 2000
    max_line_length: int = 40000

    def __post_init__(self):
        if self.max_dimension < 1:
            raise ValueError(f"max_dimension must be >= 1, got {self.max_dimension}")
        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be >= 1, got {self.max_line_length}")


DEFAULT_LIMITS = ParseLimits()
