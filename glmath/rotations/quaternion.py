# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This module provides the :class:`Quat` class along with the underlying quaternion product and conjugate functions.

Description
-----------

Quaternions in glmath are stored as ``(x, y, z, w)`` with the vector part first and the scalar part last, representing
:math:`q = w + xi + yj + zk`.  A unit quaternion represents the rotation

.. math::
    \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
    \text{cos}(\frac{\theta}{2})\end{array}\right]

where :math:`\hat{\mathbf{x}}` is the rotation axis and :math:`\theta` the angle.  The type does not enforce unit length;
methods that assume a unit input say so and callers should :meth:`~Quat.normalize` where required.

Use
---

    >>> import numpy as np
    >>> from glmath import Quat, Vec3
    >>> q = Quat.identity().set_from_axis_angle([0, 0, 1], np.pi / 2)
    >>> Vec3(1, 0, 0).transform_quat(q).equals_approximately([0, 1, 0])
    True
"""

import logging

from typing import Self

import numpy as np

from glmath._typing import ARRAY_LIKE, DOUBLE_ARRAY, VECTOR_LIKE, EULER_ORDERS
from glmath._helpers import _check_quaternion, _check_vector3
from glmath.common import EPSILON, RANDOM, DEGREE_TO_RAD
from glmath.fixed_array import FixedArray, component
from glmath.vectors.vec3 import Vec3
from glmath.matrices.mat3 import Mat3


__all__ = ['quaternion_multiplication', 'quaternion_conjugate', 'Quat']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting the fallback branches taken by the quaternion routines.
"""

_AXES: dict[str, DOUBLE_ARRAY] = {'x': np.array([1.0, 0.0, 0.0]),
                                  'y': np.array([0.0, 1.0, 0.0]),
                                  'z': np.array([0.0, 0.0, 1.0])}


def quaternion_multiplication(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    The product composes rotations so that ``q1 * q2`` applies ``q2`` first and then ``q1``.

    :param quaternion_1: The first quaternion to multiply
    :param quaternion_2: The second quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion(quaternion_1)
    quaternion_2 = _check_quaternion(quaternion_2)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2), [qs1 * qs2 - qv1 @ qv2]])


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function negates the vector portion of a quaternion.

    For a unit quaternion this is the inverse rotation.

    :param quaternion: The quaternion to conjugate
    :return: a new array containing the conjugate
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion(quaternion)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


class Quat(FixedArray):
    """
    A quaternion ``(x, y, z, w)`` with the scalar part last.

    The default constructor gives the identity rotation ``(0, 0, 0, 1)``.  Every method that returns a :class:`Quat`
    modifies self in place and returns it.  The multiplication operator ``*`` returns a new quaternion:

        >>> from glmath import Quat
        >>> Quat(1, 2, 3, 4) * Quat(5, 6, 7, 8)
        Quat(24.0, 48.0, 48.0, -6.0)
    """

    size = 4
    default = (0.0, 0.0, 0.0, 1.0)
    label = 'quat'

    x = component(0, 'The x (first vector) component')
    y = component(1, 'The y (second vector) component')
    z = component(2, 'The z (third vector) component')
    w = component(3, 'The w (scalar) component')

    @classmethod
    def identity(cls) -> Self:
        """
        Returns a new identity quaternion ``(0, 0, 0, 1)``.
        """
        return cls()

    def set_identity(self) -> Self:
        self._data[:] = self.default
        return self

    def __mul__(self, other: VECTOR_LIKE) -> 'Quat':
        try:
            return self.clone().multiply(other)
        except ValueError:
            return NotImplemented

    def set_from_axis_angle(self, axis: VECTOR_LIKE, rad: float) -> Self:
        """
        Sets self to the rotation by ``rad`` radians about ``axis``.

        The axis is normalized before use.  A zero length axis gives ``nan`` components.

        :param axis: the rotation axis
        :param rad: the rotation angle in radians
        :return: self
        """
        axis = _check_vector3(axis)
        half = rad * 0.5

        self._data[:3] = axis * (np.sin(half) / np.sqrt(axis @ axis))
        self._data[3] = np.cos(half)
        return self

    @property
    def axis_angle(self) -> tuple[Vec3, float]:
        """
        The rotation axis and angle (in radians) represented by this unit quaternion.

        The angle is ``2*acos(w)`` and so lies in ``[0, 2*pi]``; it is not wrapped to ``[0, pi]``.  If the angle is 0
        (to within :data:`.EPSILON`) the axis is indeterminate and the x axis is returned.

        This property is read only.
        """
        x, y, z, w = self._data

        # ensure the domain for acos
        rad = np.arccos(np.clip(w, -1, 1)) * 2
        s = np.sin(rad / 2)

        if s > EPSILON:
            return Vec3(x / s, y / s, z / s), float(rad)

        _LOGGER.debug('the rotation axis is indeterminate, reporting the x axis')
        return Vec3(1, 0, 0), float(rad)

    def angle_distance(self, b: VECTOR_LIKE) -> float:
        r"""
        The angle of the rotation that takes self to ``b``, that is the angle of ``conjugate(self) * b``.

        The result is in :math:`[0, \pi]` and is 0 when self and ``b`` represent the same rotation, even when their
        signs differ.  Self is not modified.
        """
        relative = quaternion_multiplication(quaternion_conjugate(self._data), b)

        # q and -q are the same rotation
        return float(np.arccos(np.clip(abs(relative[3]), -1, 1)) * 2)

    def multiply(self, b: VECTOR_LIKE) -> Self:
        """
        Sets self to the hamiltonian product ``self * b`` (see :func:`quaternion_multiplication`).
        """
        self._data[:] = quaternion_multiplication(self._data, b)
        return self

    def rotate_x(self, rad: float) -> Self:
        """
        Sets self to ``self * qx(rad)`` where ``qx`` is a rotation about the x axis.
        """
        ax, ay, az, aw = self._data
        half = rad * 0.5
        bx, bw = np.sin(half), np.cos(half)

        self._data[:] = [ax * bw + aw * bx, ay * bw + az * bx, az * bw - ay * bx, aw * bw - ax * bx]
        return self

    def rotate_y(self, rad: float) -> Self:
        """
        Sets self to ``self * qy(rad)`` where ``qy`` is a rotation about the y axis.
        """
        ax, ay, az, aw = self._data
        half = rad * 0.5
        by, bw = np.sin(half), np.cos(half)

        self._data[:] = [ax * bw - az * by, ay * bw + aw * by, az * bw + ax * by, aw * bw - ay * by]
        return self

    def rotate_z(self, rad: float) -> Self:
        """
        Sets self to ``self * qz(rad)`` where ``qz`` is a rotation about the z axis.
        """
        ax, ay, az, aw = self._data
        half = rad * 0.5
        bz, bw = np.sin(half), np.cos(half)

        self._data[:] = [ax * bw + ay * bz, ay * bw - ax * bz, az * bw + aw * bz, aw * bw - az * bz]
        return self

    def calculate_w(self) -> Self:
        """
        Recomputes the scalar part from the vector part assuming the quaternion is unit length.
        """
        x, y, z = self._data[:3]
        self._data[3] = np.sqrt(max(0.0, 1.0 - x * x - y * y - z * z))
        return self

    def exp(self) -> Self:
        r"""
        Sets self to the quaternion exponential

        .. math::
            e^{\mathbf{q}}=e^{q_s}\left[\begin{array}{c}\frac{\text{sin}(r)}{r}\mathbf{q}_v\\
            \text{cos}(r)\end{array}\right]

        where :math:`r=\|\mathbf{q}_v\|`.  For :math:`r` below :data:`.EPSILON` the limit :math:`\frac{\text{sin}(r)}{r}=1`
        and :math:`\text{cos}(r)=1` is used.
        """
        vector = self._data[:3]
        r = np.sqrt(vector @ vector)
        et = np.exp(self._data[3])

        if r > EPSILON:
            self._data[:3] *= et * np.sin(r) / r
            self._data[3] = et * np.cos(r)
        else:
            self._data[:3] *= et
            self._data[3] = et

        return self

    def ln(self) -> Self:
        r"""
        Sets self to the quaternion natural logarithm

        .. math::
            \text{ln}(\mathbf{q})=\left[\begin{array}{c}\frac{\text{atan2}(r, q_s)}{r}\mathbf{q}_v\\
            \frac{1}{2}\text{ln}(\|\mathbf{q}\|^2)\end{array}\right]

        where :math:`r=\|\mathbf{q}_v\|`.  For a positive :math:`q_s` and :math:`r` below :data:`.EPSILON` the vector
        scale uses its limit :math:`\frac{1}{q_s}`.  When :math:`r=0` and :math:`q_s\leq 0` the vector part stays 0.
        """
        vector = self._data[:3]
        squared = vector @ vector
        r = np.sqrt(squared)
        w = self._data[3]

        # near -1 the scale is large but finite
        if r > EPSILON or (r > 0 and w <= 0):
            t = np.arctan2(r, w) / r
        elif w > 0:
            t = 1 / w
        else:
            t = 0.0

        self._data[3] = 0.5 * np.log(squared + w * w)
        self._data[:3] *= t
        return self

    def pow(self, b: float) -> Self:
        """
        Raises self to the real power ``b`` through ``exp(b * ln(self))``.
        """
        return self.ln().scale(b).exp()

    def slerp(self, a: VECTOR_LIKE, b: VECTOR_LIKE, t: float) -> Self:
        r"""
        Sets self to the spherical linear interpolation between the unit quaternions ``a`` and ``b``.

        .. math::
            \omega = \text{cos}^{-1}(\mathbf{a}^T\mathbf{b})\\
            \mathbf{q}=\frac{\text{sin}((1-t)\omega)}{\text{sin}(\omega)}\mathbf{a}+
            \frac{\text{sin}(t\omega)}{\text{sin}(\omega)}\mathbf{b}

        If ``a`` and ``b`` are in opposite hemispheres ``b`` is negated first so the shorter arc is taken.  If they are
        nearly parallel (``1 - cos(omega)`` at most :data:`.EPSILON`) a linear interpolation is used instead.

        :param a: the start of the interpolation (returned for ``t=0``)
        :param b: the end of the interpolation (returned, up to sign, for ``t=1``)
        :param t: the interpolation parameter
        :return: self
        """
        start = _check_quaternion(a)
        end = _check_quaternion(b)

        cos_omega = start @ end

        # take the shorter arc
        if cos_omega < 0:
            cos_omega = -cos_omega
            end = -end

        if 1 - cos_omega > EPSILON:
            omega = np.arccos(cos_omega)
            sin_omega = np.sin(omega)
            scale0 = np.sin((1 - t) * omega) / sin_omega
            scale1 = np.sin(t * omega) / sin_omega
        else:
            _LOGGER.debug('quaternions are nearly parallel, using linear interpolation')
            scale0 = 1 - t
            scale1 = t

        self._data[:] = scale0 * start + scale1 * end
        return self

    def sqlerp(self, a: VECTOR_LIKE, b: VECTOR_LIKE, c: VECTOR_LIKE, d: VECTOR_LIKE, t: float) -> Self:
        """
        Sets self to the spherical cubic (squad) interpolation with end points ``a`` and ``d`` and control points ``b``
        and ``c``.

        This is ``slerp(slerp(a, d, t), slerp(b, c, t), 2t(1-t))``.
        """
        temp1 = Quat().slerp(a, d, t)
        temp2 = Quat().slerp(b, c, t)
        return self.slerp(temp1, temp2, 2 * t * (1 - t))

    def random(self, rng: np.random.Generator | None = None) -> Self:
        """
        Sets self to a random unit quaternion uniformly distributed over the rotations.

        :param rng: the generator to draw from.  If ``None`` then :data:`.RANDOM` is used
        :return: self
        """
        rng = RANDOM if rng is None else rng
        u1, u2, u3 = rng.random(3)

        sqrt1_minus_u1 = np.sqrt(1 - u1)
        sqrt_u1 = np.sqrt(u1)

        self._data[:] = [sqrt1_minus_u1 * np.sin(2.0 * np.pi * u2),
                         sqrt1_minus_u1 * np.cos(2.0 * np.pi * u2),
                         sqrt_u1 * np.sin(2.0 * np.pi * u3),
                         sqrt_u1 * np.cos(2.0 * np.pi * u3)]
        return self

    def invert(self) -> Self:
        """
        Sets self to its multiplicative inverse, ``conjugate(self) / squared_length``.

        For a unit quaternion this is the same as :meth:`conjugate`.  A zero quaternion gives ``nan``.
        """
        self._data[:] = quaternion_conjugate(self._data) / (self._data @ self._data)
        return self

    def conjugate(self) -> Self:
        self._data[:3] *= -1
        return self

    def set_from_mat3(self, m: VECTOR_LIKE) -> Self:
        """
        Sets self from the column-major 3x3 rotation matrix ``m``.

        This uses Ken Shoemake's algorithm from "Quaternion Calculus and Fast Animation" (SIGGRAPH 1987), branching on
        the trace and otherwise on the largest diagonal element.  The result is not normalized.

        :param m: the rotation matrix, which should be orthonormal
        :return: self
        """
        matrix = Mat3(m)
        f_trace = matrix[0] + matrix[4] + matrix[8]

        if f_trace > 0.0:
            # |w| > 1/2
            f_root = np.sqrt(f_trace + 1.0)
            self._data[3] = 0.5 * f_root
            f_root = 0.5 / f_root
            self._data[0] = (matrix[5] - matrix[7]) * f_root
            self._data[1] = (matrix[6] - matrix[2]) * f_root
            self._data[2] = (matrix[1] - matrix[3]) * f_root
            return self

        # |w| <= 1/2
        i = 0
        if matrix[4] > matrix[0]:
            i = 1
        if matrix[8] > matrix[Mat3.index(i, i)]:
            i = 2
        j = (i + 1) % 3
        k = (i + 2) % 3

        f_root = np.sqrt(matrix[Mat3.index(i, i)] - matrix[Mat3.index(j, j)] - matrix[Mat3.index(k, k)] + 1.0)
        self._data[i] = 0.5 * f_root
        f_root = 0.5 / f_root
        self._data[3] = (matrix[Mat3.index(j, k)] - matrix[Mat3.index(k, j)]) * f_root
        self._data[j] = (matrix[Mat3.index(j, i)] + matrix[Mat3.index(i, j)]) * f_root
        self._data[k] = (matrix[Mat3.index(k, i)] + matrix[Mat3.index(i, k)]) * f_root
        return self

    def set_from_euler_degrees(self, x: float, y: float, z: float, order: EULER_ORDERS = 'xyz') -> Self:
        r"""
        Sets self from Euler angles given in degrees.

        ``order`` gives the sequence in which the elementary rotations are applied.  For the default ``'xyz'`` the
        rotation about x is applied first, then y, then z, so that

        .. math::
            \mathbf{q}=\mathbf{q}_z(z)\otimes\mathbf{q}_y(y)\otimes\mathbf{q}_x(x)

        :param x: the angle about the x axis in degrees
        :param y: the angle about the y axis in degrees
        :param z: the angle about the z axis in degrees
        :param order: the order the rotations are applied in, a permutation of ``'xyz'``
        :return: self
        :raises ValueError: if order is not a permutation of ``'xyz'``
        """
        if not isinstance(order, str):
            raise ValueError(f'order must be a permutation of "xyz", not {order!r}')

        order = order.lower()  # type: ignore
        if sorted(order) != ['x', 'y', 'z']:
            raise ValueError(f'order must be a permutation of "xyz", not {order!r}')

        angles = {'x': x, 'y': y, 'z': z}
        rotation = Quat()
        for axis in order:
            rotation = Quat().set_from_axis_angle(_AXES[axis], angles[axis] * DEGREE_TO_RAD).multiply(rotation)

        return self.set(rotation)

    def add(self, b: VECTOR_LIKE) -> Self:
        self._data += _check_quaternion(b)
        return self

    def scale(self, b: float) -> Self:
        self._data *= b
        return self

    def dot(self, b: VECTOR_LIKE) -> float:
        return float(self._data @ _check_quaternion(b))

    def lerp(self, a: VECTOR_LIKE, b: VECTOR_LIKE, t: float) -> Self:
        """
        Sets self to the componentwise linear interpolation between ``a`` and ``b``.  The result is not normalized.
        """
        start = _check_quaternion(a)
        self._data[:] = start + t * (_check_quaternion(b) - start)
        return self

    @property
    def length(self) -> float:
        """
        The Euclidean length of the quaternion.

        This property is read only.
        """
        return float(np.linalg.norm(self._data))

    @property
    def squared_length(self) -> float:
        """
        The squared Euclidean length of the quaternion.

        This property is read only.
        """
        return float(self._data @ self._data)

    def normalize(self) -> Self:
        """
        Scales self to unit length.  A zero quaternion gives ``nan`` components.
        """
        self._data *= 1.0 / np.sqrt(self._data @ self._data)
        return self

    def rotation_to(self, a: VECTOR_LIKE, b: VECTOR_LIKE) -> Self:
        """
        Sets self to the shortest arc rotation taking the unit vector ``a`` onto the unit vector ``b``.

        If the vectors are antiparallel the rotation is a half turn about an axis perpendicular to ``a`` (the cross of
        the x axis with ``a``, or of the y axis with ``a`` when ``a`` lies along x).

        :param a: the unit vector to rotate from
        :param b: the unit vector to rotate to
        :return: self
        """
        start = _check_vector3(a)
        end = _check_vector3(b)

        dot = start @ end

        if dot < -1 + EPSILON:
            _LOGGER.debug('vectors are antiparallel, rotating a half turn about a perpendicular axis')
            axis = np.cross(_AXES['x'], start)
            if np.sqrt(axis @ axis) < EPSILON:
                axis = np.cross(_AXES['y'], start)

            return self.set_from_axis_angle(axis, np.pi)

        self._data[:3] = np.cross(start, end)
        self._data[3] = 1 + dot
        return self.normalize()

    def set_from_axes(self, view: VECTOR_LIKE, right: VECTOR_LIKE, up: VECTOR_LIKE) -> Self:
        """
        Sets self to the rotation whose basis has the given axes, with the view direction along -z.

        The OpenGL defaults ``view=(0, 0, -1)``, ``right=(1, 0, 0)``, ``up=(0, 1, 0)`` give the identity.

        :param view: the unit view (forward) direction
        :param right: the unit right direction
        :param up: the unit up direction
        :return: self
        """
        view = _check_vector3(view)
        right = _check_vector3(right)
        up = _check_vector3(up)

        matrix = Mat3(right[0], up[0], -view[0],
                      right[1], up[1], -view[1],
                      right[2], up[2], -view[2])

        return self.set_from_mat3(matrix).normalize()
