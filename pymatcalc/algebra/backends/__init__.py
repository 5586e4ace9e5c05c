"""Computational backends for the algebra engine."""

from pymatcalc.algebra.backends.cpu import CPUAlgebraBackend

__all__ = ["CPUAlgebraBackend"]
