# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Vec4` class, a 4 component vector.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_quaternion, _check_array_and_shape
from glmath.common import RANDOM
from glmath.fixed_array import component
from glmath.vectors.vector import Vector


__all__ = ['Vec4']


class Vec4(Vector):
    """
    A 4 component vector ``(x, y, z, w)``.
    """

    size = 4
    default = (0.0, 0.0, 0.0, 0.0)
    label = 'vec4'

    x = component(0, 'The x component')
    y = component(1, 'The y component')
    z = component(2, 'The z component')
    w = component(3, 'The w component')

    def cross(self, u: VECTOR_LIKE, v: VECTOR_LIKE, w: VECTOR_LIKE) -> Self:
        """
        Sets self to the 4 dimensional cross product of ``u``, ``v``, and ``w``.

        The result is orthogonal to all three inputs.

        :return: self
        """
        u = _check_quaternion(u)
        v = _check_quaternion(v)
        w = _check_quaternion(w)

        a = v[0] * w[1] - v[1] * w[0]
        b = v[0] * w[2] - v[2] * w[0]
        c = v[0] * w[3] - v[3] * w[0]
        d = v[1] * w[2] - v[2] * w[1]
        e = v[1] * w[3] - v[3] * w[1]
        f = v[2] * w[3] - v[3] * w[2]
        g, h, i, j = u

        self._data[:] = [h * f - i * e + j * d,
                         -(g * f) + i * c - j * b,
                         g * e - h * c + j * a,
                         -(g * d) + h * b - i * a]
        return self

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Self:
        """
        Sets self to a random direction uniformly distributed on the unit 3-sphere, scaled by ``scale``.

        This uses Marsaglia's method (Ann. Math. Statist. 43 (1972), no. 2, 645--646).

        :param scale: the length of the resulting vector
        :param rng: the generator to draw from.  If ``None`` then :data:`.RANDOM` is used
        :return: self
        """
        rng = RANDOM if rng is None else rng

        while True:
            v1, v2 = rng.random(2) * 2 - 1
            s1 = v1 * v1 + v2 * v2
            if s1 < 1:
                break

        while True:
            v3, v4 = rng.random(2) * 2 - 1
            s2 = v3 * v3 + v4 * v4
            if 0 < s2 < 1:
                break

        d = np.sqrt((1 - s1) / s2)
        self._data[:] = [scale * v1, scale * v2, scale * v3 * d, scale * v4 * d]
        return self

    def transform_mat4(self, m: VECTOR_LIKE) -> Self:
        """
        Sets self to ``m * self`` for the column-major 4x4 matrix ``m``.
        """
        matrix = _check_array_and_shape(m, 16)
        self._data[:] = matrix.reshape(4, 4).T @ self._data
        return self

    def transform_quat(self, q: VECTOR_LIKE) -> Self:
        """
        Rotates the xyz part of self by the quaternion ``q``, leaving ``w`` unchanged.
        """
        quaternion = _check_quaternion(q)
        qv = quaternion[:3]
        qs = quaternion[3]

        uv = np.cross(qv, self._data[:3])
        uuv = np.cross(qv, uv)

        self._data[:3] += 2 * qs * uv + 2 * uuv
        return self
