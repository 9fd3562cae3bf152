"""
Gauss-Jordan backends.

    generic: scalar-generic reference kernel (any field scalar type)
    cpu: numpy float64 kernel
"""

from pydense.elimination.backends.cpu import CPUGaussJordanBackend
from pydense.elimination.backends.generic import GenericGaussJordanBackend

__all__ = [
    "CPUGaussJordanBackend",
    "GenericGaussJordanBackend",
]
