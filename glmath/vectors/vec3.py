# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Vec3` class, a 3 component vector.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector2, _check_vector3, _check_quaternion, _check_array_and_shape
from glmath.common import RANDOM
from glmath.fixed_array import component
from glmath.vectors.vector import Vector


__all__ = ['Vec3']


class Vec3(Vector):
    """
    A 3 component vector ``(x, y, z)``.

    Besides the componentwise operations inherited from :class:`.Vector`, this class implements the cross product,
    cubic interpolation, and transformation by 3x3 and 4x4 matrices and by quaternions.
    """

    size = 3
    default = (0.0, 0.0, 0.0)
    label = 'vec3'

    x = component(0, 'The x component')
    y = component(1, 'The y component')
    z = component(2, 'The z component')

    @classmethod
    def right(cls) -> Self:
        """
        The unit x axis ``(1, 0, 0)``.
        """
        return cls(1, 0, 0)

    @classmethod
    def up(cls) -> Self:
        """
        The unit y axis ``(0, 1, 0)``.
        """
        return cls(0, 1, 0)

    @classmethod
    def from_vec2(cls, v: VECTOR_LIKE) -> Self:
        """
        A new vector holding the x and y components of the 2 vector ``v`` with a zero z component.
        """
        x, y = _check_vector2(v)
        return cls(x, y, 0)

    def cross(self, b: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self x b``.
        """
        self._data[:] = np.cross(self._data, _check_vector3(b))
        return self

    def angle(self, b: VECTOR_LIKE) -> float:
        """
        The unsigned angle between self and ``b`` in radians.

        If either vector is zero the angle is reported as pi/2.
        """
        return self._angle(b)

    def hermite(self, a: VECTOR_LIKE, b: VECTOR_LIKE, c: VECTOR_LIKE, d: VECTOR_LIKE, t: float) -> Self:
        """
        Sets self to the Hermite interpolation at ``t`` with end points ``a`` and ``d`` and control points ``b`` and
        ``c``.

        :return: self
        """
        factor_times2 = t * t
        factor1 = factor_times2 * (2 * t - 3) + 1
        factor2 = factor_times2 * (t - 2) + t
        factor3 = factor_times2 * (t - 1)
        factor4 = factor_times2 * (3 - 2 * t)

        self._data[:] = (_check_vector3(a) * factor1 + _check_vector3(b) * factor2 +
                         _check_vector3(c) * factor3 + _check_vector3(d) * factor4)
        return self

    def bezier(self, a: VECTOR_LIKE, b: VECTOR_LIKE, c: VECTOR_LIKE, d: VECTOR_LIKE, t: float) -> Self:
        """
        Sets self to the cubic Bezier interpolation at ``t`` with end points ``a`` and ``d`` and control points ``b``
        and ``c``.

        :return: self
        """
        inverse_factor = 1 - t
        inverse_factor_times2 = inverse_factor * inverse_factor
        factor_times2 = t * t
        factor1 = inverse_factor_times2 * inverse_factor
        factor2 = 3 * t * inverse_factor_times2
        factor3 = 3 * factor_times2 * inverse_factor
        factor4 = factor_times2 * t

        self._data[:] = (_check_vector3(a) * factor1 + _check_vector3(b) * factor2 +
                         _check_vector3(c) * factor3 + _check_vector3(d) * factor4)
        return self

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Self:
        """
        Sets self to a random direction uniformly distributed on the sphere, scaled by ``scale``.

        :param scale: the length of the resulting vector
        :param rng: the generator to draw from.  If ``None`` then :data:`.RANDOM` is used
        :return: self
        """
        rng = RANDOM if rng is None else rng

        r = rng.random() * 2.0 * np.pi
        z = rng.random() * 2.0 - 1.0
        z_scale = np.sqrt(1.0 - z * z) * scale

        self._data[:] = [np.cos(r) * z_scale, np.sin(r) * z_scale, z * scale]
        return self

    def transform_mat3(self, m: VECTOR_LIKE) -> Self:
        """
        Sets self to ``m * self`` for the column-major 3x3 matrix ``m``.
        """
        matrix = _check_array_and_shape(m, 9)
        self._data[:] = matrix.reshape(3, 3).T @ self._data
        return self

    def transform_mat4(self, m: VECTOR_LIKE) -> Self:
        """
        Transforms self as a point (``w=1``) by the column-major 4x4 matrix ``m``, including the perspective divide.

        If the transformed ``w`` is 0 then the divide is skipped.
        """
        matrix = _check_array_and_shape(m, 16)
        x, y, z = self._data

        w = matrix[3] * x + matrix[7] * y + matrix[11] * z + matrix[15]
        w = w or 1.0

        self._data[:] = (matrix[0:3] * x + matrix[4:7] * y + matrix[8:11] * z + matrix[12:15]) / w
        return self

    def transform_quat(self, q: VECTOR_LIKE) -> Self:
        r"""
        Rotates self by the quaternion ``q``:

        .. math::
            \mathbf{v}'=\mathbf{v}+2q_s(\mathbf{q}_v\times\mathbf{v})+
            2\mathbf{q}_v\times(\mathbf{q}_v\times\mathbf{v})

        :param q: the rotation quaternion ``(x, y, z, w)``
        :return: self
        """
        quaternion = _check_quaternion(q)
        qv = quaternion[:3]
        qs = quaternion[3]

        uv = np.cross(qv, self._data)
        uuv = np.cross(qv, uv)

        self._data += 2 * qs * uv + 2 * uuv
        return self

    def rotate_x(self, origin: VECTOR_LIKE, rad: float) -> Self:
        """
        Rotates the point self about the x axis through ``origin`` by ``rad`` radians.
        """
        center = _check_vector3(origin)
        p = self._data - center
        c, s = np.cos(rad), np.sin(rad)

        self._data[:] = [p[0], p[1] * c - p[2] * s, p[1] * s + p[2] * c]
        self._data += center
        return self

    def rotate_y(self, origin: VECTOR_LIKE, rad: float) -> Self:
        """
        Rotates the point self about the y axis through ``origin`` by ``rad`` radians.
        """
        center = _check_vector3(origin)
        p = self._data - center
        c, s = np.cos(rad), np.sin(rad)

        self._data[:] = [p[2] * s + p[0] * c, p[1], p[2] * c - p[0] * s]
        self._data += center
        return self

    def rotate_z(self, origin: VECTOR_LIKE, rad: float) -> Self:
        """
        Rotates the point self about the z axis through ``origin`` by ``rad`` radians.
        """
        center = _check_vector3(origin)
        p = self._data - center
        c, s = np.cos(rad), np.sin(rad)

        self._data[:] = [p[0] * c - p[1] * s, p[0] * s + p[1] * c, p[2]]
        self._data += center
        return self
