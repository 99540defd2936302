# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Mat2` class, a column-major 2x2 matrix.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector2
from glmath.matrices.matrix import SquareMatrix


__all__ = ['Mat2']


class Mat2(SquareMatrix):
    """
    A 2x2 matrix stored column-major as ``(m00, m01, m10, m11)`` where ``mCR`` is column ``C``, row ``R``.
    """

    size = 4
    dimension = 2
    default = (1.0, 0.0, 0.0, 1.0)
    label = 'mat2'

    @property
    def determinant(self) -> float:
        """
        The determinant of the matrix.

        This property is read only.
        """
        a0, a1, a2, a3 = self._data
        return float(a0 * a3 - a2 * a1)

    def invert(self) -> Self:
        """
        Inverts the matrix in place.

        If the determinant is 0 the matrix is returned unchanged.
        """
        a0, a1, a2, a3 = self._data
        det = a0 * a3 - a2 * a1

        if not det:
            return self._singular()

        self._data[:] = np.array([a3, -a1, -a2, a0]) / det
        return self

    def adjoint(self) -> Self:
        a0, a1, a2, a3 = self._data
        self._data[:] = [a3, -a1, -a2, a0]
        return self

    def rotate(self, rad: float) -> Self:
        """
        Sets self to ``self * R(rad)`` where ``R`` is a counter clockwise rotation.
        """
        a0, a1, a2, a3 = self._data
        s, c = np.sin(rad), np.cos(rad)
        self._data[:] = [a0 * c + a2 * s, a1 * c + a3 * s, a0 * -s + a2 * c, a1 * -s + a3 * c]
        return self

    def scale(self, v: VECTOR_LIKE) -> Self:
        """
        Scales the columns of the matrix by the components of ``v``.
        """
        v0, v1 = _check_vector2(v)
        self._data[0:2] *= v0
        self._data[2:4] *= v1
        return self

    def set_from_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        self._data[:] = [c, s, -s, c]
        return self

    def set_from_scaling(self, v: VECTOR_LIKE) -> Self:
        v0, v1 = _check_vector2(v)
        self._data[:] = [v0, 0, 0, v1]
        return self

    def ldu(self) -> tuple['Mat2', 'Mat2', 'Mat2']:
        r"""
        Factors the matrix into lower unit triangular, diagonal, and upper unit triangular matrices so that
        :math:`\mathbf{M}=\mathbf{L}\mathbf{D}\mathbf{U}`.

        Self is not modified.  If ``m00`` is 0 the factorization does not exist and the results contain ``inf`` or
        ``nan``.

        :return: the tuple ``(L, D, U)``
        """
        a0, a1, a2, a3 = self._data

        lower = a1 / a0
        upper = a2 / a0

        return Mat2(1, lower, 0, 1), Mat2(a0, 0, 0, a3 - lower * a2), Mat2(1, 0, upper, 1)
