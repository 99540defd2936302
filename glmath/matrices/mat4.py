# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`Mat4` class, a column-major 4x4 matrix for 3D transforms and projections.

Description
-----------

A :class:`Mat4` can be composed from a translation, a rotation quaternion, and a scale
(:meth:`~Mat4.set_from_translation_rotation_scale`) and decomposed back into them through the
:attr:`~Mat4.translation`, :attr:`~Mat4.rotation`, and :attr:`~Mat4.scaling` properties.  It can also be built from a
dual quaternion (:meth:`~Mat4.set_from_quat2`) and used to build viewing (:meth:`~Mat4.set_from_look_at`,
:meth:`~Mat4.set_from_target_to`) and projection (:meth:`~Mat4.set_from_perspective`, :meth:`~Mat4.set_from_ortho`,
:meth:`~Mat4.set_from_frustum`) matrices.

Vectors are treated as columns, so ``m * v`` transforms ``v`` and ``a.multiply(b)`` applies ``b`` first and then
``a``.  Methods such as :meth:`~Mat4.translate` and :meth:`~Mat4.rotate` post-multiply, that is they apply the new
transform before the existing one.
"""

import logging

from typing import Self, TYPE_CHECKING

import numpy as np

from glmath._typing import VECTOR_LIKE
from glmath._helpers import _check_vector3, _check_array_and_shape
from glmath.common import EPSILON, DEGREE_TO_RAD
from glmath.matrices.matrix import SquareMatrix
from glmath.matrices.mat3 import quaternion_to_columns
from glmath.vectors.vec3 import Vec3
from glmath.rotations.quaternion import Quat

if TYPE_CHECKING:
    from glmath.rotations.dual_quaternion import DualQuat


__all__ = ['Mat4']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate transform requests.
"""


class Mat4(SquareMatrix):
    """
    A 4x4 matrix stored column-major, with column ``c`` row ``r`` at index ``c*4 + r``.

    The translation of an affine transform lives in elements 12, 13, and 14.
    """

    size = 16
    dimension = 4
    default = (1.0, 0.0, 0.0, 0.0,
               0.0, 1.0, 0.0, 0.0,
               0.0, 0.0, 1.0, 0.0,
               0.0, 0.0, 0.0, 1.0)
    label = 'mat4'

    def __str__(self) -> str:
        columns = self._data.reshape(4, 4).tolist()
        body = '\n'.join('  ' + ','.join(str(v) for v in column) for column in columns)
        return f'{self.label}(\n{body}\n)'

    def _cofactor_terms(self) -> tuple[np.ndarray, np.float64]:
        (a00, a01, a02, a03, a10, a11, a12, a13,
         a20, a21, a22, a23, a30, a31, a32, a33) = self._data

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

        adjugate = np.array([a11 * b11 - a12 * b10 + a13 * b09,
                             a02 * b10 - a01 * b11 - a03 * b09,
                             a31 * b05 - a32 * b04 + a33 * b03,
                             a22 * b04 - a21 * b05 - a23 * b03,
                             a12 * b08 - a10 * b11 - a13 * b07,
                             a00 * b11 - a02 * b08 + a03 * b07,
                             a32 * b02 - a30 * b05 - a33 * b01,
                             a20 * b05 - a22 * b02 + a23 * b01,
                             a10 * b10 - a11 * b08 + a13 * b06,
                             a01 * b08 - a00 * b10 - a03 * b06,
                             a30 * b04 - a31 * b02 + a33 * b00,
                             a21 * b02 - a20 * b04 - a23 * b00,
                             a11 * b07 - a10 * b09 - a12 * b06,
                             a00 * b09 - a01 * b07 + a02 * b06,
                             a31 * b01 - a30 * b03 - a32 * b00,
                             a20 * b03 - a21 * b01 + a22 * b00])

        return adjugate, det

    @property
    def determinant(self) -> float:
        """
        The determinant of the matrix.

        This property is read only.
        """
        return float(self._cofactor_terms()[1])

    def invert(self) -> Self:
        """
        Inverts the matrix in place.

        If the determinant is exactly 0 the matrix is returned unchanged.
        """
        adjugate, det = self._cofactor_terms()

        if not det:
            return self._singular()

        self._data[:] = adjugate / det
        return self

    def adjoint(self) -> Self:
        self._data[:] = self._cofactor_terms()[0]
        return self

    def translate(self, v: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * T(v)``.
        """
        x, y, z = _check_vector3(v)
        self._data[12:16] += self._data[0:4] * x + self._data[4:8] * y + self._data[8:12] * z
        return self

    def scale(self, v: VECTOR_LIKE) -> Self:
        """
        Sets self to ``self * S(v)``, scaling the first three columns by the components of ``v``.
        """
        x, y, z = _check_vector3(v)
        self._data[0:4] *= x
        self._data[4:8] *= y
        self._data[8:12] *= z
        return self

    @staticmethod
    def _axis_rotation(axis: VECTOR_LIKE, rad: float) -> list[float] | None:
        # the 3x3 column-major rotation about axis, or None if the axis is too short to normalize
        x, y, z = _check_vector3(axis)
        length = np.sqrt(x * x + y * y + z * z)

        if length < EPSILON:
            _LOGGER.debug(f'rotation axis ({x}, {y}, {z}) is too short to define a rotation')
            return None

        x, y, z = x / length, y / length, z / length
        s, c = np.sin(rad), np.cos(rad)
        t = 1 - c

        return [x * x * t + c, y * x * t + z * s, z * x * t - y * s,
                x * y * t - z * s, y * y * t + c, z * y * t + x * s,
                x * z * t + y * s, y * z * t - x * s, z * z * t + c]

    def rotate(self, axis: VECTOR_LIKE, rad: float) -> Self:
        """
        Sets self to ``self * R(axis, rad)``.

        If the axis is shorter than :data:`.EPSILON` the matrix is returned unchanged.

        :param axis: the axis to rotate about.  It does not need to be unit length
        :param rad: the angle to rotate by in radians
        :return: self
        """
        rotation = self._axis_rotation(axis, rad)
        if rotation is None:
            return self

        b00, b01, b02, b10, b11, b12, b20, b21, b22 = rotation
        column0 = self._data[0:4].copy()
        column1 = self._data[4:8].copy()
        column2 = self._data[8:12].copy()

        self._data[0:4] = column0 * b00 + column1 * b01 + column2 * b02
        self._data[4:8] = column0 * b10 + column1 * b11 + column2 * b12
        self._data[8:12] = column0 * b20 + column1 * b21 + column2 * b22
        return self

    def rotate_x(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        column1 = self._data[4:8].copy()
        column2 = self._data[8:12].copy()

        self._data[4:8] = column1 * c + column2 * s
        self._data[8:12] = column2 * c - column1 * s
        return self

    def rotate_y(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        column0 = self._data[0:4].copy()
        column2 = self._data[8:12].copy()

        self._data[0:4] = column0 * c - column2 * s
        self._data[8:12] = column0 * s + column2 * c
        return self

    def rotate_z(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        column0 = self._data[0:4].copy()
        column1 = self._data[4:8].copy()

        self._data[0:4] = column0 * c + column1 * s
        self._data[4:8] = column1 * c - column0 * s
        return self

    def _set_upper(self, columns: list[float], translation: VECTOR_LIKE = (0, 0, 0)) -> Self:
        # sets an affine transform from a 3x3 column-major block and a translation
        self._data[:] = self.default
        self._data[0:3] = columns[0:3]
        self._data[4:7] = columns[3:6]
        self._data[8:11] = columns[6:9]
        self._data[12:15] = translation
        return self

    def set_from_translation(self, v: VECTOR_LIKE) -> Self:
        return self._set_upper([1, 0, 0, 0, 1, 0, 0, 0, 1], _check_vector3(v))

    def set_from_scaling(self, v: VECTOR_LIKE) -> Self:
        x, y, z = _check_vector3(v)
        return self._set_upper([x, 0, 0, 0, y, 0, 0, 0, z])

    def set_from_rotation(self, axis: VECTOR_LIKE, rad: float) -> Self:
        """
        Sets self to the rotation by ``rad`` radians about ``axis``.

        If the axis is shorter than :data:`.EPSILON` self is set to the identity.
        """
        rotation = self._axis_rotation(axis, rad)
        if rotation is None:
            return self.set_identity()

        return self._set_upper(rotation)

    def set_from_x_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        return self._set_upper([1, 0, 0, 0, c, s, 0, -s, c])

    def set_from_y_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        return self._set_upper([c, 0, -s, 0, 1, 0, s, 0, c])

    def set_from_z_rotation(self, rad: float) -> Self:
        s, c = np.sin(rad), np.cos(rad)
        return self._set_upper([c, s, 0, -s, c, 0, 0, 0, 1])

    def set_from_quat(self, q: VECTOR_LIKE) -> Self:
        """
        Sets self to the rotation represented by the unit quaternion ``q``.
        """
        return self._set_upper(quaternion_to_columns(q))

    def set_from_translation_rotation(self, q: VECTOR_LIKE, v: VECTOR_LIKE) -> Self:
        """
        Sets self to ``T(v) * R(q)``, a rotation by the unit quaternion ``q`` followed by a translation by ``v``.

        This is the inverse of the :attr:`rotation` and :attr:`translation` properties.

        :param q: the rotation quaternion
        :param v: the translation
        :return: self
        """
        return self._set_upper(quaternion_to_columns(q), _check_vector3(v))

    def set_from_translation_rotation_scale(self, v: VECTOR_LIKE, q: VECTOR_LIKE, s: VECTOR_LIKE) -> Self:
        """
        Sets self to ``T(v) * R(q) * S(s)``.

        This is the inverse of the :attr:`translation`, :attr:`rotation`, and :attr:`scaling` properties.

        :param v: the translation
        :param q: the rotation quaternion
        :param s: the scale along each axis
        :return: self
        """
        sx, sy, sz = _check_vector3(s)
        columns = quaternion_to_columns(q)
        scaled = [value * scale for value, scale in zip(columns, [sx] * 3 + [sy] * 3 + [sz] * 3)]
        return self._set_upper(scaled, _check_vector3(v))

    def set_from_translation_rotation_scale_origin(self, v: VECTOR_LIKE, q: VECTOR_LIKE, s: VECTOR_LIKE,
                                                   o: VECTOR_LIKE) -> Self:
        """
        Sets self to ``T(v) * T(o) * R(q) * S(s) * T(-o)``, a rotation and scale about the point ``o`` followed by a
        translation by ``v``.
        """
        self.set_from_translation_rotation_scale(v, q, s)
        origin = _check_vector3(o)

        self._data[12:15] += origin - self._rows()[:3, :3] @ origin
        return self

    def set_from_quat2(self, a: 'DualQuat | VECTOR_LIKE') -> Self:
        """
        Sets self to the rigid transform represented by the dual quaternion ``a``.

        The translation is recovered as ``2 * dual * conjugate(real)`` divided by the squared length of the real part
        (when it is non-zero) and then combined with the real part through :meth:`set_from_translation_rotation`.

        :param a: the dual quaternion ``(real, dual)``
        :return: self
        """
        bx, by, bz, bw, ax, ay, az, aw = _check_array_and_shape(a, 8)
        bx, by, bz = -bx, -by, -bz

        translation = np.array([ax * bw + aw * bx + ay * bz - az * by,
                                ay * bw + aw * by + az * bx - ax * bz,
                                az * bw + aw * bz + ax * by - ay * bx]) * 2

        magnitude = bx * bx + by * by + bz * bz + bw * bw
        # only scale if it makes sense
        if magnitude > 0:
            translation /= magnitude

        return self.set_from_translation_rotation([-bx, -by, -bz, bw], translation)

    @property
    def translation(self) -> Vec3:
        """
        The translation part of the transform, elements 12, 13, and 14.

        This property is read only.
        """
        return Vec3(self._data[12:15])

    @property
    def scaling(self) -> Vec3:
        """
        The scale along each axis, taken as the lengths of the first three columns.

        This assumes the columns are orthogonal, which is true for matrices built by
        :meth:`set_from_translation_rotation_scale`.  This property is read only.
        """
        return Vec3(np.linalg.norm(self._data[:12].reshape(3, 4)[:, :3], axis=1))

    @property
    def rotation(self) -> Quat:
        """
        The rotation of the upper left 3x3 block as a quaternion.

        The block is assumed to be orthonormal.  The result is not normalized.  This property is read only.
        """
        # http://www.euclideanspace.com/maths/geometry/rotations/conversions/matrixToQuaternion/index.htm
        m = self._data
        trace = m[0] + m[5] + m[10]

        if trace > 0:
            s = np.sqrt(trace + 1) * 2
            return Quat((m[6] - m[9]) / s, (m[8] - m[2]) / s, (m[1] - m[4]) / s, 0.25 * s)

        elif m[0] > m[5] and m[0] > m[10]:
            s = np.sqrt(1.0 + m[0] - m[5] - m[10]) * 2
            return Quat(0.25 * s, (m[1] + m[4]) / s, (m[8] + m[2]) / s, (m[6] - m[9]) / s)

        elif m[5] > m[10]:
            s = np.sqrt(1.0 + m[5] - m[0] - m[10]) * 2
            return Quat((m[1] + m[4]) / s, 0.25 * s, (m[6] + m[9]) / s, (m[8] - m[2]) / s)

        s = np.sqrt(1.0 + m[10] - m[0] - m[5]) * 2
        return Quat((m[8] + m[2]) / s, (m[6] + m[9]) / s, 0.25 * s, (m[1] - m[4]) / s)

    def set_from_frustum(self, left: float, right: float, bottom: float, top: float, near: float,
                         far: float) -> Self:
        """
        Sets self to the perspective projection of the given view frustum.
        """
        rl = 1 / np.float64(right - left)
        tb = 1 / np.float64(top - bottom)
        nf = 1 / np.float64(near - far)

        self._data[:] = [near * 2 * rl, 0, 0, 0,
                         0, near * 2 * tb, 0, 0,
                         (right + left) * rl, (top + bottom) * tb, (far + near) * nf, -1,
                         0, 0, far * near * 2 * nf, 0]
        return self

    def set_from_perspective(self, fovy: float, aspect: float, near: float, far: float | None = None) -> Self:
        """
        Sets self to a perspective projection.

        If ``far`` is ``None``, ``0``, or infinite then the projection has no far plane.

        :param fovy: the vertical field of view in radians
        :param aspect: the aspect ratio, typically viewport width over height
        :param near: the distance to the near plane
        :param far: the distance to the far plane
        :return: self
        """
        f = 1.0 / np.tan(np.float64(fovy) / 2)

        self._data[:] = [f / aspect, 0, 0, 0,
                         0, f, 0, 0,
                         0, 0, -1, -1,
                         0, 0, -2 * near, 0]

        if far and np.isfinite(far):
            nf = 1 / np.float64(near - far)
            self._data[10] = (far + near) * nf
            self._data[14] = 2 * far * near * nf

        return self

    def set_from_perspective_from_field_of_view(self, up_degrees: float, down_degrees: float, left_degrees: float,
                                                right_degrees: float, near: float, far: float) -> Self:
        """
        Sets self to an asymmetric perspective projection given the angles from the view direction to each side of
        the frustum in degrees.
        """
        up_tan = np.tan(up_degrees * DEGREE_TO_RAD)
        down_tan = np.tan(down_degrees * DEGREE_TO_RAD)
        left_tan = np.tan(left_degrees * DEGREE_TO_RAD)
        right_tan = np.tan(right_degrees * DEGREE_TO_RAD)
        x_scale = 2.0 / (left_tan + right_tan)
        y_scale = 2.0 / (up_tan + down_tan)
        nf = 1 / np.float64(near - far)

        self._data[:] = [x_scale, 0, 0, 0,
                         0, y_scale, 0, 0,
                         -((left_tan - right_tan) * x_scale * 0.5), (up_tan - down_tan) * y_scale * 0.5, far * nf, -1,
                         0, 0, far * near * nf, 0]
        return self

    def set_from_ortho(self, left: float, right: float, bottom: float, top: float, near: float, far: float) -> Self:
        """
        Sets self to an orthographic projection of the given box.
        """
        lr = 1 / np.float64(left - right)
        bt = 1 / np.float64(bottom - top)
        nf = 1 / np.float64(near - far)

        self._data[:] = [-2 * lr, 0, 0, 0,
                         0, -2 * bt, 0, 0,
                         0, 0, 2 * nf, 0,
                         (left + right) * lr, (top + bottom) * bt, (far + near) * nf, 1]
        return self

    def set_from_look_at(self, eye: VECTOR_LIKE, center: VECTOR_LIKE, up: VECTOR_LIKE) -> Self:
        """
        Sets self to the view matrix of a camera at ``eye`` looking at ``center``.

        If ``eye`` and ``center`` are within :data:`.EPSILON` of each other self is set to the identity.  If ``up`` is
        parallel to the view direction the right vector of the basis is zero.

        :param eye: the position of the viewer
        :param center: the point the viewer is looking at
        :param up: the up direction
        :return: self
        """
        eye = _check_vector3(eye)
        center = _check_vector3(center)
        up = _check_vector3(up)

        if np.all(np.abs(eye - center) < EPSILON):
            _LOGGER.debug('the eye and center are coincident, using the identity view')
            return self.set_identity()

        z_axis = eye - center
        z_axis *= 1 / np.sqrt(z_axis @ z_axis)

        x_axis = np.cross(up, z_axis)
        length = np.sqrt(x_axis @ x_axis)
        if length:
            x_axis /= length
        else:
            x_axis[:] = 0

        y_axis = np.cross(z_axis, x_axis)

        self._data[:] = [x_axis[0], y_axis[0], z_axis[0], 0,
                         x_axis[1], y_axis[1], z_axis[1], 0,
                         x_axis[2], y_axis[2], z_axis[2], 0,
                         -(x_axis @ eye), -(y_axis @ eye), -(z_axis @ eye), 1]
        return self

    def set_from_target_to(self, eye: VECTOR_LIKE, target: VECTOR_LIKE, up: VECTOR_LIKE) -> Self:
        """
        Sets self to the model matrix that places an object at ``eye`` facing towards ``target``.

        This is the inverse of the view built by :meth:`set_from_look_at`.  If ``up`` is parallel to the direction
        the right vector of the basis is zero.
        """
        eye = _check_vector3(eye)
        up = _check_vector3(up)

        z_axis = eye - _check_vector3(target)
        length = z_axis @ z_axis
        if length > 0:
            z_axis /= np.sqrt(length)

        x_axis = np.cross(up, z_axis)
        length = x_axis @ x_axis
        if length > 0:
            x_axis /= np.sqrt(length)

        y_axis = np.cross(z_axis, x_axis)

        self._data[:] = [*x_axis, 0, *y_axis, 0, *z_axis, 0, *eye, 1]
        return self
