# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Mat3` class, a column-major 3x3 matrix.

Description
-----------

A :class:`Mat3` is usually either a rotation/normal matrix for 3D data or a homogeneous transform for 2D data.  It is
the intermediate format used when extracting a quaternion from a rotation (see :meth:`.Quat.set_from_mat3`), and it
can be built from a quaternion with :meth:`Mat3.set_from_quat`.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector2, _check_quaternion, _check_array_and_shape
from glmath.matrices.matrix import SquareMatrix


__all__ = ['Mat3', 'quaternion_to_columns']


def quaternion_to_columns(q: VECTOR_LIKE) -> list[float]:
    r"""
    Computes the column-major 3x3 rotation matrix for the unit quaternion ``q``.

    Mathematically this is

    .. math::
        \mathbf{T}=\left[\begin{array}{ccc}
        1-2(y^2+z^2) & 2(xy-wz) & 2(xz+wy) \\
        2(xy+wz) & 1-2(x^2+z^2) & 2(yz-wx) \\
        2(xz-wy) & 2(yz+wx) & 1-2(x^2+y^2) \end{array}\right]

    The quaternion is not normalized first, so a non-unit input does not give a rotation matrix.

    :param q: the quaternion ``(x, y, z, w)``
    :return: the 9 matrix elements in column-major order
    """
    x, y, z, w = _check_quaternion(q)

    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx = x * x2
    yx = y * x2
    yy = y * y2
    zx = z * x2
    zy = z * y2
    zz = z * z2
    wx = w * x2
    wy = w * y2
    wz = w * z2

    return [1 - yy - zz, yx + wz, zx - wy,
            yx - wz, 1 - xx - zz, zy + wx,
            zx + wy, zy - wx, 1 - xx - yy]


class Mat3(SquareMatrix):
    """
    A 3x3 matrix stored column-major, with column ``c`` row ``r`` at index ``c*3 + r``.
    """

    size = 9
    dimension = 3
    default = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    label = 'mat3'

    def set_from_mat4(self, m: VECTOR_LIKE) -> Self:
        """
        Sets self to the upper left 3x3 block of the column-major 4x4 matrix ``m``.
        """
        matrix = _check_array_and_shape(m, 16)
        self._data[:] = matrix.reshape(4, 4)[:3, :3].ravel()
        return self

    @property
    def determinant(self) -> float:
        """
        The determinant of the matrix.

        This property is read only.
        """
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self._data
        return float(a00 * (a22 * a11 - a12 * a21) + a01 * (-a22 * a10 + a12 * a20) + a02 * (a21 * a10 - a11 * a20))

    def invert(self) -> Self:
        """
        Inverts the matrix in place.

        If the determinant is 0 the matrix is returned unchanged.
        """
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self._data

        b01 = a22 * a11 - a12 * a21
        b11 = -a22 * a10 + a12 * a20
        b21 = a21 * a10 - a11 * a20

        det = a00 * b01 + a01 * b11 + a02 * b21

        if not det:
            return self._singular()

        self._data[:] = np.array([b01, -a22 * a01 + a02 * a21, a12 * a01 - a02 * a11,
                                  b11, a22 * a00 - a02 * a20, -a12 * a00 + a02 * a10,
                                  b21, -a21 * a00 + a01 * a20, a11 * a00 - a01 * a10]) / det
        return self

    def adjoint(self) -> Self:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self._data

        self._data[:] = [a11 * a22 - a12 * a21, a02 * a21 - a01 * a22, a01 * a12 - a02 * a11,
                         a12 * a20 - a10 * a22, a00 * a22 - a02 * a20, a02 * a10 - a00 * a12,
                         a10 * a21 - a11 * a20, a01 * a20 - a00 * a21, a00 * a11 - a01 * a10]
        return self

    def translate(self, v: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * T(v)`` for the 2D translation ``v``.
        """
        x, y = _check_vector2(v)
        self._data[6:9] += self._data[0:3] * x + self._data[3:6] * y
        return self

    def rotate(self, rad: float) -> Self:
        """
        Sets self to ``self * R(rad)`` for the 2D rotation by ``rad`` radians.
        """
        s, c = np.sin(rad), np.cos(rad)
        column0 = self._data[0:3].copy()
        column1 = self._data[3:6].copy()

        self._data[0:3] = c * column0 + s * column1
        self._data[3:6] = c * column1 - s * column0
        return self

    def scale(self, v: VECTOR_LIKE) -> Self:
        """
        Scales the first two columns of the matrix by the components of the 2D vector ``v``.
        """
        x, y = _check_vector2(v)
        self._data[0:3] *= x
        self._data[3:6] *= y
        return self

    def set_from_translation(self, v: VECTOR_LIKE) -> Self:
        x, y = _check_vector2(v)
        self._data[:] = [1, 0, 0, 0, 1, 0, x, y, 1]
        return self

    def set_from_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        self._data[:] = [c, s, 0, -s, c, 0, 0, 0, 1]
        return self

    def set_from_scaling(self, v: VECTOR_LIKE) -> Self:
        x, y = _check_vector2(v)
        self._data[:] = [x, 0, 0, 0, y, 0, 0, 0, 1]
        return self

    def set_from_mat23(self, a: VECTOR_LIKE) -> Self:
        """
        Expands the 2D affine transform ``(a, b, c, d, tx, ty)`` into a full 3x3 matrix.
        """
        a0, a1, a2, a3, a4, a5 = _check_array_and_shape(a, 6)
        self._data[:] = [a0, a1, 0, a2, a3, 0, a4, a5, 1]
        return self

    def set_from_quat(self, q: VECTOR_LIKE) -> Self:
        """
        Sets self to the rotation matrix of the quaternion ``q`` (see :func:`quaternion_to_columns`).
        """
        self._data[:] = quaternion_to_columns(q)
        return self

    def set_from_normal_mat4(self, a: VECTOR_LIKE) -> Self:
        """
        Sets self to the normal matrix of the 4x4 matrix ``a``, that is the inverse transpose of its upper left 3x3
        block.

        If ``a`` is singular self is set to the identity.

        :param a: the column-major 4x4 model matrix
        :return: self
        """
        (a00, a01, a02, a03, a10, a11, a12, a13,
         a20, a21, a22, a23, a30, a31, a32, a33) = _check_array_and_shape(a, 16)

        b00 = a00 * a11 - a01 * a10
        b01 = a00 * a12 - a02 * a10
        b02 = a00 * a13 - a03 * a10
        b03 = a01 * a12 - a02 * a11
        b04 = a01 * a13 - a03 * a11
        b05 = a02 * a13 - a03 * a12
        b06 = a20 * a31 - a21 * a30
        b07 = a20 * a32 - a22 * a30
        b08 = a20 * a33 - a23 * a30
        b09 = a21 * a32 - a22 * a31
        b10 = a21 * a33 - a23 * a31
        b11 = a22 * a33 - a23 * a32

        det = b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06

        if not det:
            self._singular()
            return self.set_identity()

        self._data[:] = np.array([a11 * b11 - a12 * b10 + a13 * b09,
                                  a12 * b08 - a10 * b11 - a13 * b07,
                                  a10 * b10 - a11 * b08 + a13 * b06,
                                  a02 * b10 - a01 * b11 - a03 * b09,
                                  a00 * b11 - a02 * b08 + a03 * b07,
                                  a01 * b08 - a00 * b10 - a03 * b06,
                                  a31 * b05 - a32 * b04 + a33 * b03,
                                  a32 * b02 - a30 * b05 - a33 * b01,
                                  a30 * b04 - a31 * b02 + a33 * b00]) / det
        return self

    def set_from_projection(self, width: float, height: float) -> Self:
        """
        Sets self to the 2D projection mapping pixel coordinates of a ``width`` x ``height`` surface (origin top left,
        y down) to clip space.
        """
        self._data[:] = [2 / np.float64(width), 0, 0, 0, -2 / np.float64(height), 0, -1, 1, 1]
        return self
