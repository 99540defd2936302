# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the base classes for the matrix types in glmath.

Description
-----------

All matrices are stored as flat column-major arrays, that is the element in column ``c`` and row ``r`` of an ``n x n``
matrix is stored at index ``c*n + r``.  Use :meth:`SquareMatrix.index` rather than computing these offsets by hand.

:class:`Matrix` implements the elementwise operations shared by every matrix type.  :class:`SquareMatrix` adds the
identity, transposition, and matrix multiplication for the square types.
"""

import logging

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE, DOUBLE_ARRAY
from glmath._helpers import _check_array_and_shape
from glmath.fixed_array import FixedArray


__all__ = ['Matrix', 'SquareMatrix']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting singular matrices encountered by the matrix types.
"""


class Matrix(FixedArray):
    """
    Elementwise operations on a flat matrix.
    """

    def add(self, b: VECTOR_LIKE) -> Self:
        self._data += _check_array_and_shape(b, self.size)
        return self

    def subtract(self, b: VECTOR_LIKE) -> Self:
        self._data -= _check_array_and_shape(b, self.size)
        return self

    def multiply_scalar(self, b: float) -> Self:
        self._data *= b
        return self

    def frobenius_norm(self) -> float:
        """
        The square root of the sum of the squares of every element.
        """
        return float(np.linalg.norm(self._data))

    def _singular(self) -> Self:
        _LOGGER.debug(f'{type(self).__name__} is singular, it has not been inverted')
        return self


class SquareMatrix(Matrix):
    """
    A square column-major matrix.
    """

    dimension: int = 0
    """
    The number of rows (and columns) of the matrix.
    """

    @classmethod
    def index(cls, col: int, row: int) -> int:
        """
        The flat index of the element in column ``col`` and row ``row``.
        """
        return col * cls.dimension + row

    @classmethod
    def identity(cls) -> Self:
        """
        Returns a new identity matrix.
        """
        return cls()

    def set_identity(self) -> Self:
        self._data[:] = np.eye(self.dimension).ravel()
        return self

    def _rows(self) -> DOUBLE_ARRAY:
        # a [row, col] view of the column-major data
        return self._data.reshape(self.dimension, self.dimension).T

    def transpose(self) -> Self:
        self._data[:] = self._rows().ravel()
        return self

    def multiply(self, b: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * b``.

        :param b: the right hand matrix, a matrix of the same type or a column-major array like
        :return: self
        """
        other = _check_array_and_shape(b, self.size).reshape(self.dimension, self.dimension).T
        self._data[:] = (self._rows() @ other).T.ravel()
        return self

    def __mul__(self, other: VECTOR_LIKE) -> Self:
        try:
            return self.clone().multiply(other)
        except ValueError:
            return NotImplemented
