"""
Dense matrix module.

Public API:
    Matrix          - Dense float64 matrix with algebra, inverse, determinant
    square(m)       - Square a Matrix or a raw grid
    serialize(m)    - Encode a Matrix as JSON text
    deserialize(s)  - Decode JSON text into a Matrix
"""

from pymatrix.matrix.matrix import Matrix, square
from pymatrix.matrix.serialization import serialize, deserialize

__all__ = [
    "Matrix",
    "square",
    "serialize",
    "deserialize",
]
