from unittest import TestCase

import numpy as np

from glmath import Vec2, Vec3, Mat3, Mat4, Quat


class TestVec3(TestCase):

    def test_init(self):

        np.testing.assert_array_equal(Vec3(), [0, 0, 0])
        np.testing.assert_array_equal(Vec3.right(), [1, 0, 0])
        np.testing.assert_array_equal(Vec3.up(), [0, 1, 0])

        a = Vec3(1, 2, 3)

        self.assertEqual((a.x, a.y, a.z), (1, 2, 3))

        a.z = 7

        np.testing.assert_array_equal(a, [1, 2, 7])

    def test_from_vec2(self):

        a = Vec3.from_vec2(Vec2(1, 2))

        self.assertIsInstance(a, Vec3)
        np.testing.assert_array_equal(a, [1, 2, 0])
        np.testing.assert_array_equal(Vec3.from_vec2([3, 4]), [3, 4, 0])

        with self.assertRaises(ValueError):
            Vec3.from_vec2([1, 2, 3])

    def test_cross(self):

        a = Vec3(1, 2, 3)

        self.assertIs(a.cross([4, 5, 6]), a)
        np.testing.assert_array_equal(a, [-3, 6, -3])

        np.testing.assert_array_equal(Vec3.right().cross(Vec3.up()), [0, 0, 1])

    def test_hermite(self):

        a, b, c, d = [1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]

        np.testing.assert_array_almost_equal(Vec3().hermite(a, b, c, d, 0), a)
        np.testing.assert_array_almost_equal(Vec3().hermite(a, b, c, d, 1), d)
        np.testing.assert_array_almost_equal(Vec3().hermite(a, b, c, d, 0.5), [5.125, 6.125, 7.125])

    def test_bezier(self):

        a, b, c, d = [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]

        np.testing.assert_array_almost_equal(Vec3().bezier(a, b, c, d, 0), a)
        np.testing.assert_array_almost_equal(Vec3().bezier(a, b, c, d, 1), d)
        np.testing.assert_array_almost_equal(Vec3().bezier(a, b, c, d, 0.5), [0.75, 0.5, 0])

    def test_random(self):

        a = Vec3().random(scale=2, rng=np.random.default_rng(7))

        self.assertAlmostEqual(a.length, 2)
        np.testing.assert_array_equal(Vec3().random(scale=2, rng=np.random.default_rng(7)), a)
        self.assertAlmostEqual(Vec3().random().length, 1)

    def test_transform_mat3(self):

        np.testing.assert_array_almost_equal(Vec3(1, 0, 0).transform_mat3(Mat3().set_from_rotation(np.pi / 2)),
                                             [0, 1, 0])
        np.testing.assert_array_equal(Vec3(1, 2, 3).transform_mat3(np.arange(9)), [24, 30, 36])

    def test_transform_mat4(self):

        np.testing.assert_array_equal(Vec3(1, 2, 3).transform_mat4(Mat4().set_from_translation([1, 1, 1])),
                                      [2, 3, 4])

        # the perspective divide
        m = Mat4()
        m[15] = 2

        np.testing.assert_array_equal(Vec3(2, 4, 6).transform_mat4(m), [1, 2, 3])

        # a zero w skips the divide
        m = Mat4()
        m[15] = 0

        np.testing.assert_array_equal(Vec3(2, 4, 6).transform_mat4(m), [2, 4, 6])

    def test_transform_quat(self):

        q = Quat().set_from_axis_angle([0, 0, 1], np.pi / 2)

        np.testing.assert_array_almost_equal(Vec3(1, 0, 0).transform_quat(q), [0, 1, 0])

        # length is preserved by unit quaternions
        q = Quat().random(rng=np.random.default_rng(11))

        self.assertAlmostEqual(Vec3(1, 2, 3).transform_quat(q).length, np.sqrt(14))

    def test_rotate_about_origin(self):

        np.testing.assert_array_almost_equal(Vec3(0, 2, 0).rotate_x([0, 1, 0], np.pi), [0, 0, 0])
        np.testing.assert_array_almost_equal(Vec3(0, 1, 0).rotate_x([0, 0, 0], np.pi / 2), [0, 0, 1])
        np.testing.assert_array_almost_equal(Vec3(1, 0, 0).rotate_y([0, 0, 0], np.pi / 2), [0, 0, -1])
        np.testing.assert_array_almost_equal(Vec3(2, 1, 5).rotate_z([1, 1, 0], np.pi / 2), [1, 2, 5])

        # matches the rotation matrices
        v = Vec3(1, -2, 3)

        np.testing.assert_array_almost_equal(v.clone().rotate_y([0, 0, 0], 0.3),
                                             v.clone().transform_mat4(Mat4().set_from_y_rotation(0.3)))

    def test_str(self):

        self.assertEqual(str(Vec3(1, 2, 3)), 'vec3(1.0, 2.0, 3.0)')
        self.assertEqual(repr(Vec3(1, 2, 3)), 'Vec3(1.0, 2.0, 3.0)')
