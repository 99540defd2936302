from unittest import TestCase

import numpy as np

from glmath import Quat, Vec3, Mat3
from glmath.rotations import quaternion_multiplication, quaternion_conjugate


SQRT2_2 = np.sqrt(2) / 2


def align(q, reference):
    """
    Returns q flipped onto the same hemisphere as reference so quaternions can be compared up to sign.
    """
    q = np.asarray(q, dtype=np.float64)
    return q if q @ np.asarray(reference) >= 0 else -q


class TestQuaternionFunctions(TestCase):

    def test_quaternion_multiplication(self):

        quat_1 = [1, 0, 0, 0]
        quat_2 = [0, 1, 0, 0]

        qm = quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_equal(qm, [0, 0, 1, 0])

        quat_1 = [SQRT2_2, 0, 0, SQRT2_2]
        quat_2 = [0, SQRT2_2, 0, SQRT2_2]

        qm = quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_almost_equal(np.abs(qm), [0.5, 0.5, 0.5, 0.5])

        quat_1 = [0.25532186, 0.51064372, 0.76596558, -0.29555113]
        quat_2 = [-0.43199286, -0.53999107, -0.64798929, -0.31922045]

        qm = quaternion_multiplication(quat_1, quat_2)

        # truth comes from matrix rotations
        np.testing.assert_array_almost_equal(qm, [0.12889493, -0.16885878, 0.02972499, 0.97672373])

        with self.assertRaises(ValueError):
            quaternion_multiplication([1, 2, 3], quat_2)

    def test_quaternion_conjugate(self):

        q = [1, 2, 3, 4]

        np.testing.assert_array_equal(quaternion_conjugate(q), [-1, -2, -3, 4])

        # the input is not modified
        self.assertEqual(q, [1, 2, 3, 4])


class TestQuat(TestCase):

    def setUp(self):

        self.rng = np.random.default_rng(8675309)

    def random_quat(self):
        return Quat().random(rng=self.rng)

    def test_init(self):

        np.testing.assert_array_equal(Quat(), [0, 0, 0, 1])
        np.testing.assert_array_equal(Quat.identity(), [0, 0, 0, 1])
        np.testing.assert_array_equal(Quat(1, 2, 3, 4), [1, 2, 3, 4])
        np.testing.assert_array_equal(Quat([1, 2, 3, 4]), [1, 2, 3, 4])

        q = Quat(1, 2, 3, 4)

        self.assertEqual(q.x, 1)
        self.assertEqual(q.y, 2)
        self.assertEqual(q.z, 3)
        self.assertEqual(q.w, 4)

        with self.assertRaises(ValueError):
            Quat([1, 2, 3])

        with self.assertRaises(ValueError):
            Quat(1, 2, 3)

    def test_set_identity(self):

        q = Quat(1, 2, 3, 4)

        self.assertIs(q.set_identity(), q)
        np.testing.assert_array_equal(q, [0, 0, 0, 1])

    def test_multiply(self):

        a = Quat(1, 2, 3, 4)
        b = Quat(5, 6, 7, 8)

        result = a.multiply(b)

        self.assertIs(result, a)
        np.testing.assert_array_equal(a, [24, 48, 48, -6])
        np.testing.assert_array_equal(b, [5, 6, 7, 8])

        np.testing.assert_array_equal(Quat(1, 2, 3, 4) * [5, 6, 7, 8], [24, 48, 48, -6])

    def test_multiply_associative_not_commutative(self):

        a, b, c = self.random_quat(), self.random_quat(), self.random_quat()

        left = (a * b) * c
        right = a * (b * c)

        np.testing.assert_array_almost_equal(left, right)

        self.assertFalse((a * b).equals_approximately(b * a))

    def test_invert(self):

        q = Quat(1, 2, 3, 4).invert()

        np.testing.assert_array_almost_equal(q, np.array([-1, -2, -3, 4]) / 30)

        np.testing.assert_array_almost_equal(q * Quat(1, 2, 3, 4), [0, 0, 0, 1])

        for _ in range(5):
            unit = self.random_quat()

            with self.subTest(q=unit):
                np.testing.assert_array_almost_equal(unit.clone().invert(), unit.clone().conjugate())

    def test_conjugate(self):

        q = Quat(1, 2, 3, 4)

        self.assertIs(q.conjugate(), q)
        np.testing.assert_array_equal(q, [-1, -2, -3, 4])

    def test_set_from_axis_angle(self):

        q = Quat.identity().set_from_axis_angle([1, 0, 0], np.pi / 2)

        np.testing.assert_array_almost_equal(q, [SQRT2_2, 0, 0, SQRT2_2])

        # the axis is normalized
        q = Quat().set_from_axis_angle(Vec3(0, 0, 5), np.pi)

        np.testing.assert_array_almost_equal(q, [0, 0, 1, 0])

        with np.errstate(divide='ignore', invalid='ignore'):
            q = Quat().set_from_axis_angle([0, 0, 0], 1)

        self.assertTrue(np.isnan(q[:3]).all())

    def test_axis_angle(self):

        axis, rad = Quat().set_from_axis_angle([1, 0, 0], 0.7778).axis_angle

        np.testing.assert_array_almost_equal(axis, [1, 0, 0])
        self.assertAlmostEqual(rad, 0.7778)

        axis, rad = Quat().set_from_axis_angle([0.26726124, 0.534522474, 0.8017837], 0.55).axis_angle

        np.testing.assert_array_almost_equal(axis, [0.26726124, 0.534522474, 0.8017837])
        self.assertAlmostEqual(rad, 0.55)

        # angles past pi are not wrapped
        axis, rad = Quat().set_from_axis_angle([0, 1, 0], 1.5 * np.pi).axis_angle

        np.testing.assert_array_almost_equal(axis, [0, 1, 0])
        self.assertAlmostEqual(rad, 1.5 * np.pi)

    def test_axis_angle_identity(self):

        axis, rad = Quat.identity().axis_angle

        self.assertIsInstance(axis, Vec3)
        np.testing.assert_array_equal(axis, [1, 0, 0])
        self.assertEqual(rad, 0)

        # a scalar part slightly over 1 from round off does not give nan
        axis, rad = Quat(0, 0, 0, 1 + 1e-12).axis_angle

        np.testing.assert_array_equal(axis, [1, 0, 0])
        self.assertEqual(rad, 0)

    def test_angle_distance(self):

        a = Quat().set_from_axis_angle([0, 0, 1], 0.3)
        b = Quat().set_from_axis_angle([0, 0, 1], 1.0)

        self.assertAlmostEqual(a.angle_distance(b), 0.7)
        self.assertAlmostEqual(b.angle_distance(a), 0.7)
        self.assertAlmostEqual(a.angle_distance(a), 0, places=5)

        # the receiver is not modified
        np.testing.assert_array_almost_equal(a, Quat().set_from_axis_angle([0, 0, 1], 0.3))

        c = Quat().set_from_axis_angle([1, 0, 0], np.pi / 2)

        self.assertAlmostEqual(Quat.identity().angle_distance(c), np.pi / 2)

        # opposite signs describe the same rotation
        self.assertAlmostEqual(a.angle_distance(a.clone().scale(-1)), 0, places=5)
        self.assertAlmostEqual(a.angle_distance(b.clone().scale(-1)), 0.7)

        # the shorter way round
        d = Quat().set_from_axis_angle([0, 0, 1], 1.5 * np.pi)

        self.assertAlmostEqual(Quat.identity().angle_distance(d), 0.5 * np.pi)

    def test_rotate_xyz(self):

        q = Quat.identity().rotate_x(np.pi / 2)

        np.testing.assert_array_almost_equal(Vec3(0, 0, -1).transform_quat(q), [0, 1, 0])

        q = Quat.identity().rotate_y(np.pi / 2)

        np.testing.assert_array_almost_equal(Vec3(0, 0, -1).transform_quat(q), [-1, 0, 0])

        q = Quat.identity().rotate_z(np.pi / 2)

        np.testing.assert_array_almost_equal(Vec3(0, 1, 0).transform_quat(q), [-1, 0, 0])

        for method, axis in [('rotate_x', [1, 0, 0]), ('rotate_y', [0, 1, 0]), ('rotate_z', [0, 0, 1])]:

            with self.subTest(method=method):
                q = self.random_quat()
                expected = q * Quat().set_from_axis_angle(axis, 0.4)

                np.testing.assert_array_almost_equal(getattr(q, method)(0.4), expected)

    def test_calculate_w(self):

        q = Quat(0.5, 0.5, 0.5, 99).calculate_w()

        np.testing.assert_array_almost_equal(q, [0.5, 0.5, 0.5, 0.5])

        q = Quat(1, 1, 0, 99).calculate_w()

        self.assertEqual(q.w, 0)

    def test_exp_ln(self):

        np.testing.assert_array_almost_equal(Quat.identity().ln(), [0, 0, 0, 0])
        np.testing.assert_array_almost_equal(Quat(0, 0, 0, 0).exp(), [0, 0, 0, 1])

        q = Quat().set_from_axis_angle([0, 0, 1], 1.2)

        np.testing.assert_array_almost_equal(q.clone().ln(), [0, 0, 0.6, 0])

        for value in [Quat(1, 2, 3, 4), self.random_quat(), Quat(0.1, -0.2, 0.3, -0.9)]:

            with self.subTest(q=value):
                np.testing.assert_array_almost_equal(value.clone().ln().exp(), value)

    def test_pow(self):

        q = self.random_quat()

        np.testing.assert_array_almost_equal(q.clone().pow(1), q)
        np.testing.assert_array_almost_equal(q.clone().pow(2), q * q)
        np.testing.assert_array_almost_equal(q.clone().pow(-1), q.clone().conjugate())

        for exponent in [0.3, 0.8, -0.7]:

            with self.subTest(exponent=exponent):
                np.testing.assert_array_almost_equal(q.clone().pow(exponent).pow(1 / exponent), q)

        # a tiny vector part next to -1 still carries the rotation axis
        near_flip = Quat(5e-7, 0, 0, -1).normalize()

        for exponent in [0.5, 0.25]:

            with self.subTest(exponent=exponent, near_flip=True):
                result = near_flip.clone().pow(exponent).pow(1 / exponent)

                np.testing.assert_allclose(result, near_flip, atol=1e-9)

    def test_ln_small_vector(self):

        q = Quat(5e-7, 0, 0, -1).ln()

        self.assertAlmostEqual(q.x, np.pi, places=5)
        self.assertAlmostEqual(q.w, 0)

        # the limit for a positive scalar part
        np.testing.assert_array_almost_equal(Quat(5e-7, 0, 0, 2).ln(), [2.5e-7, 0, 0, np.log(2)])

        np.testing.assert_array_equal(Quat(0, 0, 0, -1).ln(), [0, 0, 0, 0])

    def test_slerp(self):

        q = Quat().slerp(Quat(0, 0, 0, 1), Quat(0, 1, 0, 0), 0.5)

        np.testing.assert_array_almost_equal(q, [0, 0.707106, 0, 0.707106])

        q0 = [0, 0, 0, 1]
        q1 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_array_almost_equal(Quat().slerp(q0, q1, 0), q0)
        np.testing.assert_array_almost_equal(Quat().slerp(q0, q1, 1), q1)

        qtrue = (np.array(q0) + np.array(q1)) / 2
        qtrue /= np.linalg.norm(qtrue)

        np.testing.assert_array_almost_equal(Quat().slerp(q0, q1, 0.5), qtrue)

        # comes from ODTBX matlab function
        qtrue = [0.424985851398278, 0.424985851398278, 0.424985851398278, 0.676875969682661]

        np.testing.assert_array_almost_equal(Quat().slerp(q0, q1, 0.79), qtrue)

    def test_slerp_antipodal(self):

        q = Quat().slerp(Quat(1, 0, 0, 0), Quat(-1, 0, 0, 0), 0.5)

        np.testing.assert_array_almost_equal(q, [1, 0, 0, 0])

        a = Quat().set_from_axis_angle([0, 0, 1], 0.2)
        b = Quat().set_from_axis_angle([0, 0, 1], 0.8).scale(-1)

        # the shorter arc is taken so the midpoint is halfway between the rotations
        mid = Quat().slerp(a, b, 0.5)

        np.testing.assert_array_almost_equal(mid, Quat().set_from_axis_angle([0, 0, 1], 0.5))

        # the end point is the same rotation as b
        np.testing.assert_array_almost_equal(align(Quat().slerp(a, b, 1), b), b)

    def test_slerp_parallel(self):

        q = self.random_quat()

        for t in [0, 0.25, 0.5, 1]:

            with self.subTest(t=t):
                np.testing.assert_array_almost_equal(Quat().slerp(q, q, t), q)

    def test_sqlerp(self):

        a, b, c, d = [self.random_quat() for _ in range(4)]

        np.testing.assert_array_almost_equal(Quat().sqlerp(a, b, c, d, 0), a)
        np.testing.assert_array_almost_equal(align(Quat().sqlerp(a, b, c, d, 1), d), d)

        for t in [0.2, 0.5, 0.9]:

            with self.subTest(t=t):
                np.testing.assert_array_almost_equal(Quat().sqlerp(a, a, a, a, t), a)

                expected = Quat().slerp(Quat().slerp(a, d, t), Quat().slerp(b, c, t), 2 * t * (1 - t))

                np.testing.assert_array_almost_equal(Quat().sqlerp(a, b, c, d, t), expected)

    def test_random(self):

        first = Quat().random(rng=np.random.default_rng(1))
        second = Quat().random(rng=np.random.default_rng(1))
        third = Quat().random(rng=np.random.default_rng(2))

        self.assertAlmostEqual(first.length, 1)
        self.assertTrue(first.equals_exact(second))
        self.assertFalse(first.equals_exact(third))

        self.assertAlmostEqual(Quat().random().length, 1)

    def test_set_from_mat3(self):

        q = Quat().set_from_mat3([1, 0, 0, 0, 0, -1, 0, 1, 0])

        np.testing.assert_array_almost_equal(q, [-SQRT2_2, 0, 0, SQRT2_2])

        q = Quat().set_from_mat3(Mat3())

        np.testing.assert_array_almost_equal(q, [0, 0, 0, 1])

        # column-major storage of the rotation matrix
        rotation = np.array([[-0.69492056, -0.19200697, 0.69297817],
                             [0.71352099, -0.30378504, 0.6313497],
                             [0.08929286, 0.93319235, 0.34810748]])

        q = Quat().set_from_mat3(rotation.T.ravel())

        np.testing.assert_array_almost_equal(q, [0.25532186, 0.51064372, 0.76596558, 0.29555113])

    def test_set_from_mat3_branches(self):

        half_turns = {'x': [1, 0, 0, 0], 'y': [0, 1, 0, 0], 'z': [0, 0, 1, 0]}

        for axis, expected in half_turns.items():

            with self.subTest(axis=axis):
                matrix = Mat3().set_from_quat(expected)

                np.testing.assert_array_almost_equal(np.abs(Quat().set_from_mat3(matrix)), expected)

        for _ in range(10):
            q = self.random_quat()

            with self.subTest(q=q):
                result = Quat().set_from_mat3(Mat3().set_from_quat(q))

                np.testing.assert_array_almost_equal(align(result, q), q)

    def test_set_from_euler_degrees(self):

        q = Quat().set_from_euler_degrees(-90, 0, 0)

        np.testing.assert_array_almost_equal(q, [-SQRT2_2, 0, 0, SQRT2_2])
        np.testing.assert_array_almost_equal(align(q, Quat().set_from_axis_angle([1, 0, 0], -np.pi / 2)),
                                             Quat().set_from_axis_angle([1, 0, 0], -np.pi / 2))

        x, y, z = 10, 20, 30

        qx = Quat().set_from_axis_angle([1, 0, 0], np.radians(x))
        qy = Quat().set_from_axis_angle([0, 1, 0], np.radians(y))
        qz = Quat().set_from_axis_angle([0, 0, 1], np.radians(z))

        np.testing.assert_array_almost_equal(Quat().set_from_euler_degrees(x, y, z), qz * qy * qx)
        np.testing.assert_array_almost_equal(Quat().set_from_euler_degrees(x, y, z, order='zyx'), qx * qy * qz)
        np.testing.assert_array_almost_equal(Quat().set_from_euler_degrees(x, y, z, order='yxz'), qz * qx * qy)

        # the closed form of the default order
        cx, sx = np.cos(np.radians(x) / 2), np.sin(np.radians(x) / 2)
        cy, sy = np.cos(np.radians(y) / 2), np.sin(np.radians(y) / 2)
        cz, sz = np.cos(np.radians(z) / 2), np.sin(np.radians(z) / 2)

        np.testing.assert_array_almost_equal(Quat().set_from_euler_degrees(x, y, z),
                                             [sx * cy * cz - cx * sy * sz,
                                              cx * sy * cz + sx * cy * sz,
                                              cx * cy * sz - sx * sy * cz,
                                              cx * cy * cz + sx * sy * sz])

        for order in ['xxy', 'abc', 'xyzx', None, 3, ['x', 'y', 'z']]:

            with self.subTest(order=order):
                with self.assertRaises(ValueError):
                    Quat().set_from_euler_degrees(x, y, z, order=order)

    def test_vector_space(self):

        a = Quat(1, 2, 3, 4)

        self.assertEqual(a.dot([5, 6, 7, 8]), 70)
        self.assertEqual(a.squared_length, 30)
        self.assertAlmostEqual(a.length, np.sqrt(30))

        np.testing.assert_array_equal(a.clone().add([1, 1, 1, 1]), [2, 3, 4, 5])
        np.testing.assert_array_equal(a.clone().scale(2), [2, 4, 6, 8])
        np.testing.assert_array_almost_equal(Quat().lerp(a, [5, 6, 7, 8], 0.5), [3, 4, 5, 6])

        normalized = a.clone().normalize()

        np.testing.assert_array_almost_equal(normalized, np.array([1, 2, 3, 4]) / np.sqrt(30))
        self.assertAlmostEqual(normalized.length, 1)

        with np.errstate(divide='ignore', invalid='ignore'):
            zero = Quat(0, 0, 0, 0).normalize()

        self.assertTrue(np.isnan(zero[:]).all())

    def test_equality(self):

        a = Quat(1, 2, 3, 4)

        self.assertTrue(a.equals_exact([1, 2, 3, 4]))
        self.assertFalse(a.equals_exact([1, 2, 3, 4 + 1e-9]))
        self.assertTrue(a.equals_approximately([1, 2, 3, 4 + 1e-9]))
        self.assertFalse(a.equals_approximately([1, 2, 3, 4 + 1e-3]))
        self.assertEqual(a, Quat(1, 2, 3, 4))
        self.assertNotEqual(a, Quat(1, 2, 3, 5))
        self.assertNotEqual(a, 'quat')

    def test_rotation_to(self):

        q = Quat().rotation_to([0, 1, 0], [1, 0, 0])

        np.testing.assert_array_almost_equal(q, [0, 0, -SQRT2_2, SQRT2_2])
        np.testing.assert_array_almost_equal(Vec3(0, 1, 0).transform_quat(q), [1, 0, 0])

        for v in [[1, 0, 0], [0, 1, 0], [0, 0, 1], Vec3().random(rng=self.rng)]:

            with self.subTest(v=v):
                np.testing.assert_array_almost_equal(Quat().rotation_to(v, v), [0, 0, 0, 1])

    def test_rotation_to_antiparallel(self):

        for v in [[1, 0, 0], [0, 1, 0], [0, 0, 1], [-1, 0, 0], Vec3().random(rng=self.rng)]:

            with self.subTest(v=v):
                opposite = Vec3(v).negate()

                q = Quat().rotation_to(v, opposite)

                self.assertAlmostEqual(q.length, 1)
                self.assertAlmostEqual(q.w, 0)
                np.testing.assert_array_almost_equal(Vec3(v).transform_quat(q), opposite)

    def test_set_from_axes(self):

        q = Quat().set_from_axes([0, 0, -1], [1, 0, 0], [0, 1, 0])

        np.testing.assert_array_almost_equal(q, [0, 0, 0, 1])

        # looking left
        q = Quat().set_from_axes([-1, 0, 0], [0, 0, -1], [0, 1, 0])

        np.testing.assert_array_almost_equal(q, [0, -SQRT2_2, 0, SQRT2_2])
        np.testing.assert_array_almost_equal(Vec3(0, 0, -1).transform_quat(q), [1, 0, 0])
        np.testing.assert_array_almost_equal(Vec3(1, 0, 0).transform_quat(q), [0, 0, 1])

    def test_clone_and_set(self):

        a = Quat(1, 2, 3, 4)
        b = a.clone()

        b.x = 10

        self.assertEqual(a.x, 1)

        a.set(b)

        np.testing.assert_array_equal(a, [10, 2, 3, 4])

        with self.assertRaises(ValueError):
            a.set([1, 2])

    def test_str(self):

        self.assertEqual(str(Quat(1, 2, 3, 4)), 'quat(1.0, 2.0, 3.0, 4.0)')
        self.assertEqual(repr(Quat(1, 2, 3, 4)), 'Quat(1.0, 2.0, 3.0, 4.0)')
