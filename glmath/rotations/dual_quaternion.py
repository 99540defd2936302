# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the :class:`DualQuat` class for representing rigid motions (a rotation followed by a translation).

Description
-----------

A dual quaternion is stored as 8 values, the ``real`` quaternion (indices 0-3) followed by the ``dual`` quaternion
(indices 4-7).  For a rotation :math:`\mathbf{q}` followed by a translation :math:`\mathbf{t}`

.. math::
    \mathbf{q}_r = \mathbf{q}\\
    \mathbf{q}_d = \frac{1}{2}\mathbf{t}\otimes\mathbf{q}

where :math:`\mathbf{t}` is treated as the pure quaternion :math:`(t_x, t_y, t_z, 0)`.  A valid rigid motion has a unit
real part that is orthogonal to the dual part; :meth:`DualQuat.normalize` restores both conditions.

The rigid motion is equivalent to the 4x4 matrix :math:`\mathbf{T}(\mathbf{t})\mathbf{R}(\mathbf{q})` (see
:meth:`.Mat4.set_from_quat2`) and the composition methods here match the corresponding :class:`.Mat4` methods:
:meth:`~DualQuat.multiply` matches :meth:`.Mat4.multiply`, :meth:`~DualQuat.translate` matches :meth:`.Mat4.translate`,
:meth:`~DualQuat.rotate_around_axis` matches :meth:`.Mat4.rotate`, and :meth:`~DualQuat.rotate_by_quat_prepend`
matches pre-multiplying by the rotation matrix of the quaternion.
"""

import logging

from typing import Callable, Self, TYPE_CHECKING

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_array_and_shape, _check_quaternion, _check_vector3
from glmath.common import EPSILON
from glmath.fixed_array import FixedArray
from glmath.vectors.vec3 import Vec3
from glmath.rotations.quaternion import Quat, quaternion_multiplication, quaternion_conjugate

if TYPE_CHECKING:
    from glmath.matrices.mat4 import Mat4


__all__ = ['DualQuat']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting ignored dual quaternion rotations.
"""


def _pure(v: VECTOR_LIKE) -> np.ndarray:
    # the vector as a quaternion with a zero scalar part
    return np.concatenate([_check_vector3(v), [0.0]])


class DualQuat(FixedArray):
    """
    A dual quaternion ``(real, dual)`` stored as 8 values.

    The default constructor gives the identity motion, ``real=(0, 0, 0, 1)`` and ``dual=(0, 0, 0, 0)``.
    """

    size = 8
    default = (0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)
    label = 'quat2'

    @classmethod
    def identity(cls) -> Self:
        """
        Returns a new identity dual quaternion.
        """
        return cls()

    def set_identity(self) -> Self:
        self._data[:] = self.default
        return self

    def __mul__(self, other: VECTOR_LIKE) -> 'DualQuat':
        try:
            return self.clone().multiply(other)
        except ValueError:
            return NotImplemented

    @property
    def real(self) -> Quat:
        """
        The real (rotation) part as a new :class:`.Quat`.

        Setting this property copies the 4 given values into the real part.
        """
        return Quat(self._data[:4])

    @real.setter
    def real(self, value: VECTOR_LIKE):
        self._data[:4] = _check_quaternion(value)

    @property
    def dual(self) -> Quat:
        """
        The dual part as a new :class:`.Quat`.

        Setting this property copies the 4 given values into the dual part.
        """
        return Quat(self._data[4:])

    @dual.setter
    def dual(self, value: VECTOR_LIKE):
        self._data[4:] = _check_quaternion(value)

    def set_from_rotation(self, q: VECTOR_LIKE) -> Self:
        """
        Sets self to the pure rotation ``q``.
        """
        self._data[:4] = _check_quaternion(q)
        self._data[4:] = 0
        return self

    def set_from_translation(self, v: VECTOR_LIKE) -> Self:
        """
        Sets self to the pure translation ``v``.
        """
        self._data[:4] = Quat.default
        self._data[4:] = _pure(v) * 0.5
        return self

    def set_from_translation_rotation(self, q: VECTOR_LIKE, v: VECTOR_LIKE) -> Self:
        """
        Sets self to the rotation ``q`` followed by the translation ``v``.

        :param q: the unit rotation quaternion
        :param v: the translation
        :return: self
        """
        rotation = _check_quaternion(q)
        self._data[:4] = rotation
        self._data[4:] = quaternion_multiplication(_pure(v) * 0.5, rotation)
        return self

    def set_from_mat4(self, m: 'Mat4') -> Self:
        """
        Sets self to the rigid motion of the 4x4 transform ``m``, which must not contain scale or shear.
        """
        return self.set_from_translation_rotation(m.rotation, m.translation)

    @property
    def translation(self) -> Vec3:
        """
        The translation of the rigid motion, ``2 * dual * conjugate(real)``.

        This assumes the real part is unit length.  This property is read only.
        """
        return Vec3(quaternion_multiplication(self._data[4:], quaternion_conjugate(self._data[:4]))[:3] * 2)

    def translate(self, v: VECTOR_LIKE) -> Self:
        """
        Applies the translation ``v`` before the current motion, matching :meth:`.Mat4.translate`.
        """
        self._data[4:] += quaternion_multiplication(self._data[:4], _pure(v) * 0.5)
        return self

    def _rotate_real(self, rotation: Callable[[Quat, float], Quat], rad: float) -> Self:
        # rotate the real part while keeping the translation of the motion
        half_translation = quaternion_multiplication(self._data[4:], quaternion_conjugate(self._data[:4]))
        real = rotation(self.real, rad)
        self._data[:4] = real
        self._data[4:] = quaternion_multiplication(half_translation, real)
        return self

    def rotate_x(self, rad: float) -> Self:
        """
        Rotates about the x axis before the current motion, matching :meth:`.Mat4.rotate_x`.
        """
        return self._rotate_real(Quat.rotate_x, rad)

    def rotate_y(self, rad: float) -> Self:
        """
        Rotates about the y axis before the current motion, matching :meth:`.Mat4.rotate_y`.
        """
        return self._rotate_real(Quat.rotate_y, rad)

    def rotate_z(self, rad: float) -> Self:
        """
        Rotates about the z axis before the current motion, matching :meth:`.Mat4.rotate_z`.
        """
        return self._rotate_real(Quat.rotate_z, rad)

    def rotate_by_quat_append(self, q: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * q``, applying the rotation ``q`` before the current motion.
        """
        rotation = _check_quaternion(q)
        self._data[:4] = quaternion_multiplication(self._data[:4], rotation)
        self._data[4:] = quaternion_multiplication(self._data[4:], rotation)
        return self

    def rotate_by_quat_prepend(self, q: VECTOR_LIKE) -> Self:
        """
        Sets self to ``q * self``, applying the rotation ``q`` after the current motion.

        This rotates the translation of the motion as well as its orientation.
        """
        rotation = _check_quaternion(q)
        self._data[:4] = quaternion_multiplication(rotation, self._data[:4])
        self._data[4:] = quaternion_multiplication(rotation, self._data[4:])
        return self

    def rotate_around_axis(self, axis: VECTOR_LIKE, rad: float) -> Self:
        """
        Rotates by ``rad`` radians about ``axis`` before the current motion, matching :meth:`.Mat4.rotate`.

        Angles smaller than :data:`.EPSILON` leave self unchanged.

        :param axis: the rotation axis, which is normalized before use
        :param rad: the angle in radians
        :return: self
        """
        if abs(rad) < EPSILON:
            _LOGGER.debug(f'rotation angle {rad} is below tolerance, ignoring it')
            return self

        return self.rotate_by_quat_append(Quat().set_from_axis_angle(axis, rad))

    def add(self, b: VECTOR_LIKE) -> Self:
        self._data += _check_array_and_shape(b, self.size)
        return self

    def multiply(self, b: VECTOR_LIKE) -> Self:
        r"""
        Sets self to the dual quaternion product ``self * b``:

        .. math::
            \mathbf{q}_r' = \mathbf{a}_r\otimes\mathbf{b}_r\\
            \mathbf{q}_d' = \mathbf{a}_r\otimes\mathbf{b}_d + \mathbf{a}_d\otimes\mathbf{b}_r

        The result applies ``b`` first and then self, like :meth:`.Mat4.multiply`.
        """
        other = _check_array_and_shape(b, self.size)
        real = self._data[:4].copy()
        dual = self._data[4:].copy()

        self._data[:4] = quaternion_multiplication(real, other[:4])
        self._data[4:] = quaternion_multiplication(real, other[4:]) + quaternion_multiplication(dual, other[:4])
        return self

    def scale(self, b: float) -> Self:
        self._data *= b
        return self

    def dot(self, b: VECTOR_LIKE) -> float:
        """
        The dot product of the real parts of self and ``b``.
        """
        return float(self._data[:4] @ _check_array_and_shape(b, self.size)[:4])

    def lerp(self, a: VECTOR_LIKE, b: VECTOR_LIKE, t: float) -> Self:
        """
        Sets self to the linear interpolation between ``a`` and ``b``, flipping ``b`` when the real parts are in
        opposite hemispheres.  The result is not normalized.
        """
        start = _check_array_and_shape(a, self.size)
        end = _check_array_and_shape(b, self.size)

        mt = 1 - t
        if start[:4] @ end[:4] < 0:
            t = -t

        self._data[:] = start * mt + end * t
        return self

    def invert(self) -> Self:
        """
        Sets self to its inverse, the conjugate of both parts divided by the squared length of the real part.
        """
        squared_length = self._data[:4] @ self._data[:4]
        self.conjugate()
        self._data /= squared_length
        return self

    def conjugate(self) -> Self:
        """
        Negates the vector portions of the real and dual parts.
        """
        self._data[0:3] *= -1
        self._data[4:7] *= -1
        return self

    @property
    def length(self) -> float:
        """
        The length of the real part.

        This property is read only.
        """
        return float(np.linalg.norm(self._data[:4]))

    @property
    def squared_length(self) -> float:
        """
        The squared length of the real part.

        This property is read only.
        """
        return float(self._data[:4] @ self._data[:4])

    def normalize(self) -> Self:
        """
        Scales self so the real part is unit length and then removes the component of the dual part parallel to the
        real part.

        A zero real part gives ``nan`` components.
        """
        self._data /= np.sqrt(self._data[:4] @ self._data[:4])

        real = self._data[:4]
        self._data[4:] -= (real @ self._data[4:]) * real
        return self
