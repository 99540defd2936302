# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Mat23` class, a compact 2D affine transform.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector2, _check_array_and_shape
from glmath.matrices.matrix import Matrix


__all__ = ['Mat23']


class Mat23(Matrix):
    r"""
    A 2D affine transform stored as ``(a, b, c, d, tx, ty)``, which is short for the 3x3 matrix

    .. math::
        \left[\begin{array}{ccc} a & c & t_x \\ b & d & t_y \\ 0 & 0 & 1 \end{array}\right]

    The last row is implied so it is never stored.
    """

    size = 6
    default = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
    label = 'mat2d'

    @classmethod
    def identity(cls) -> Self:
        return cls()

    def set_identity(self) -> Self:
        self._data[:] = self.default
        return self

    @property
    def determinant(self) -> float:
        """
        The determinant of the linear part of the transform.

        This property is read only.
        """
        return float(self._data[0] * self._data[3] - self._data[1] * self._data[2])

    def invert(self) -> Self:
        """
        Inverts the transform in place.

        If the determinant is 0 the transform is returned unchanged.
        """
        aa, ab, ac, ad, atx, aty = self._data
        det = aa * ad - ab * ac

        if not det:
            return self._singular()

        self._data[:] = np.array([ad, -ab, -ac, aa, ac * aty - ad * atx, ab * atx - aa * aty]) / det
        return self

    def multiply(self, b: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * b``.
        """
        a0, a1, a2, a3, a4, a5 = self._data
        b0, b1, b2, b3, b4, b5 = _check_array_and_shape(b, 6)

        self._data[:] = [a0 * b0 + a2 * b1,
                         a1 * b0 + a3 * b1,
                         a0 * b2 + a2 * b3,
                         a1 * b2 + a3 * b3,
                         a0 * b4 + a2 * b5 + a4,
                         a1 * b4 + a3 * b5 + a5]
        return self

    def __mul__(self, other: VECTOR_LIKE) -> Self:
        try:
            return self.clone().multiply(other)
        except ValueError:
            return NotImplemented

    def frobenius_norm(self) -> float:
        """
        The Frobenius norm of the full 3x3 matrix, including the implied 1 of the last row.
        """
        return float(np.sqrt(self._data @ self._data + 1))

    def rotate(self, rad: float) -> Self:
        a0, a1, a2, a3 = self._data[:4]
        s, c = np.sin(rad), np.cos(rad)
        self._data[:4] = [a0 * c + a2 * s, a1 * c + a3 * s, a0 * -s + a2 * c, a1 * -s + a3 * c]
        return self

    def scale(self, v: VECTOR_LIKE) -> Self:
        v0, v1 = _check_vector2(v)
        self._data[0:2] *= v0
        self._data[2:4] *= v1
        return self

    def translate(self, v: VECTOR_LIKE) -> Self:
        v0, v1 = _check_vector2(v)
        self._data[4:6] += self._data[0:2] * v0 + self._data[2:4] * v1
        return self

    def set_from_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        self._data[:] = [c, s, -s, c, 0, 0]
        return self

    def set_from_scaling(self, v: VECTOR_LIKE) -> Self:
        v0, v1 = _check_vector2(v)
        self._data[:] = [v0, 0, 0, v1, 0, 0]
        return self

    def set_from_translation(self, v: VECTOR_LIKE) -> Self:
        v0, v1 = _check_vector2(v)
        self._data[:] = [1, 0, 0, 1, v0, v1]
        return self
