# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Vector` class which implements the componentwise operations shared by
:class:`.Vec2`, :class:`.Vec3`, and :class:`.Vec4`.
"""

from typing import Self

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_array_and_shape
from glmath.fixed_array import FixedArray


__all__ = ['Vector']


class Vector(FixedArray):
    """
    Componentwise arithmetic for fixed length vectors.

    Every binary operation accepts another vector of the same length or any array like with the same number of
    elements.  All operations that return self modify self in place.
    """

    def _other(self, b: VECTOR_LIKE) -> np.ndarray:
        return _check_array_and_shape(b, self.size)

    def zero(self) -> Self:
        """
        Sets every component to 0.
        """
        self._data[:] = 0.0
        return self

    def add(self, b: VECTOR_LIKE) -> Self:
        self._data += self._other(b)
        return self

    def subtract(self, b: VECTOR_LIKE) -> Self:
        self._data -= self._other(b)
        return self

    def multiply(self, b: VECTOR_LIKE) -> Self:
        """
        Componentwise multiplication.
        """
        self._data *= self._other(b)
        return self

    def divide(self, b: VECTOR_LIKE) -> Self:
        """
        Componentwise division.  Dividing by a zero component gives ``inf`` or ``nan``.
        """
        self._data /= self._other(b)
        return self

    def ceil(self) -> Self:
        np.ceil(self._data, out=self._data)
        return self

    def floor(self) -> Self:
        np.floor(self._data, out=self._data)
        return self

    def round(self) -> Self:
        """
        Rounds each component to the nearest integer.  Halves round up (towards positive infinity).
        """
        np.floor(self._data + 0.5, out=self._data)
        return self

    def min(self, b: VECTOR_LIKE) -> Self:
        """
        Replaces each component with the componentwise minimum of self and ``b``.
        """
        np.minimum(self._data, self._other(b), out=self._data)
        return self

    def max(self, b: VECTOR_LIKE) -> Self:
        """
        Replaces each component with the componentwise maximum of self and ``b``.
        """
        np.maximum(self._data, self._other(b), out=self._data)
        return self

    def scale(self, b: float) -> Self:
        self._data *= b
        return self

    def distance(self, b: VECTOR_LIKE) -> float:
        """
        The Euclidean distance between self and ``b``.
        """
        return float(np.linalg.norm(self._data - self._other(b)))

    def squared_distance(self, b: VECTOR_LIKE) -> float:
        difference = self._data - self._other(b)
        return float(difference @ difference)

    @property
    def length(self) -> float:
        """
        The Euclidean length of the vector.

        This property is read only.
        """
        return float(np.linalg.norm(self._data))

    @property
    def squared_length(self) -> float:
        """
        The squared Euclidean length of the vector.

        This property is read only.
        """
        return float(self._data @ self._data)

    def negate(self) -> Self:
        np.negative(self._data, out=self._data)
        return self

    def inverse(self) -> Self:
        """
        Replaces each component with its reciprocal.  Zero components become ``inf``.
        """
        np.divide(1.0, self._data, out=self._data)
        return self

    def normalize(self) -> Self:
        """
        Scales the vector to unit length.

        A zero vector is left unchanged.
        """
        squared_length = self._data @ self._data
        if squared_length > 0:
            self._data /= np.sqrt(squared_length)
        return self

    def dot(self, b: VECTOR_LIKE) -> float:
        return float(self._data @ self._other(b))

    def lerp(self, a: VECTOR_LIKE, b: VECTOR_LIKE, t: float) -> Self:
        r"""
        Sets self to the linear interpolation between ``a`` and ``b``:

        .. math::
            \mathbf{v}=\mathbf{a}+t(\mathbf{b}-\mathbf{a})

        :param a: the start of the interpolation (returned for ``t=0``)
        :param b: the end of the interpolation (returned for ``t=1``)
        :param t: the interpolation parameter
        :return: self
        """
        start = self._other(a)
        self._data[:] = start + t * (self._other(b) - start)
        return self

    def _angle(self, b: VECTOR_LIKE) -> float:
        other = self._other(b)
        magnitude = np.sqrt((self._data @ self._data) * (other @ other))
        cosine = (self._data @ other) / magnitude if magnitude else 0.0

        # ensure the domain for acos
        return float(np.arccos(np.clip(cosine, -1, 1)))
