"""
Elimination backends.

Available backends:
    GaussJordanBackend: CPU Gauss-Jordan elimination on AugmentedMatrix row primitives
"""

from pylinsolve.elimination.backends.cpu import GaussJordanBackend

__all__ = [
    "GaussJordanBackend",
]
