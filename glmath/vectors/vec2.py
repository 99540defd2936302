# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Vec2` class, a 2 component vector.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector2, _check_array_and_shape
from glmath.common import RANDOM
from glmath.fixed_array import component
from glmath.vectors.vector import Vector
from glmath.vectors.vec3 import Vec3


__all__ = ['Vec2']


class Vec2(Vector):
    """
    A 2 component vector ``(x, y)``.
    """

    size = 2
    default = (0.0, 0.0)
    label = 'vec2'

    x = component(0, 'The x component')
    y = component(1, 'The y component')

    def cross(self, b: VECTOR_LIKE) -> Vec3:
        """
        The cross product of self and ``b`` treating both as lying in the xy plane.

        Self is not modified.

        :return: a new :class:`.Vec3` ``(0, 0, ax*by - ay*bx)``
        """
        ax, ay = self._data
        bx, by = _check_vector2(b)
        return Vec3(0, 0, ax * by - ay * bx)

    def angle(self, b: VECTOR_LIKE) -> float:
        """
        The unsigned angle between self and ``b`` in radians.

        If either vector is zero the angle is reported as pi/2.
        """
        return self._angle(b)

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Self:
        """
        Sets self to a random direction uniformly distributed on the unit circle, scaled by ``scale``.

        :param scale: the length of the resulting vector
        :param rng: the generator to draw from.  If ``None`` then :data:`.RANDOM` is used
        :return: self
        """
        rng = RANDOM if rng is None else rng
        r = rng.random() * 2.0 * np.pi
        self._data[:] = [np.cos(r) * scale, np.sin(r) * scale]
        return self

    def transform_mat2(self, m: VECTOR_LIKE) -> Self:
        matrix = _check_array_and_shape(m, 4)
        x, y = self._data
        self._data[:] = matrix[0:2] * x + matrix[2:4] * y
        return self

    def transform_mat23(self, m: VECTOR_LIKE) -> Self:
        """
        Transforms self as a point by the 2D affine matrix ``[a, b, c, d, tx, ty]``.
        """
        matrix = _check_array_and_shape(m, 6)
        x, y = self._data
        self._data[:] = matrix[0:2] * x + matrix[2:4] * y + matrix[4:6]
        return self

    def transform_mat3(self, m: VECTOR_LIKE) -> Self:
        """
        Transforms self by a column-major 3x3 matrix with an implied third component of 1.
        """
        matrix = _check_array_and_shape(m, 9)
        x, y = self._data
        self._data[:] = matrix[0:2] * x + matrix[3:5] * y + matrix[6:8]
        return self

    def transform_mat4(self, m: VECTOR_LIKE) -> Self:
        """
        Transforms self by a column-major 4x4 matrix with an implied third component of 0 and fourth of 1.
        """
        matrix = _check_array_and_shape(m, 16)
        x, y = self._data
        self._data[:] = matrix[0:2] * x + matrix[4:6] * y + matrix[12:14]
        return self

    def rotate(self, origin: VECTOR_LIKE, rad: float) -> Self:
        """
        Rotates the point self about ``origin`` by ``rad`` radians (counter clockwise).
        """
        center = _check_vector2(origin)
        p0, p1 = self._data - center
        c, s = np.cos(rad), np.sin(rad)

        self._data[:] = [p0 * c - p1 * s + center[0], p0 * s + p1 * c + center[1]]
        return self
