"""
Arithmetic backends.

Available backends:
    PythonBackend: generic reference implementation, any Scalar cell type
    NumpyBackend: vectorized implementation for numeric cells
"""

from pymatx.matrix.backends.python import PythonBackend
from pymatx.matrix.backends.vectorized import NumpyBackend

__all__ = [
    "PythonBackend",
    "NumpyBackend",
]
