from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation as SciRotation

from rotconv import rotations as rot


ROT_X_90 = np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]])
ROT_Z_90 = np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]])


class TestMatrixFromAxisAngle(TestCase):

    def test_matrix_from_axis_angle(self):

        mat = rot.matrix_from_axis_angle(1, 0, 0, np.pi / 2)

        self.assertIsInstance(mat, rot.RotationMatrix)
        np.testing.assert_array_almost_equal(mat.as_array(), ROT_X_90)

        np.testing.assert_array_almost_equal(rot.matrix_from_axis_angle(2, 0, 0, np.pi / 2).as_array(), ROT_X_90)

        np.testing.assert_array_almost_equal(rot.matrix_from_axis_angle(0, 0, 1, np.pi / 2).as_array(), ROT_Z_90)

    def test_zero(self):

        np.testing.assert_array_equal(rot.matrix_from_axis_angle(0, 0, 0, 1).as_array(), np.eye(3))

    def test_against_scipy(self):

        rng = np.random.default_rng(3)

        for _ in range(50):
            axis = rng.normal(size=3)
            angle = rng.uniform(-2 * np.pi, 2 * np.pi)

            np.testing.assert_allclose(rot.matrix_from_axis_angle(*axis, angle).as_array(),
                                       SciRotation.from_rotvec(axis / np.linalg.norm(axis) * angle).as_matrix(),
                                       atol=1e-12)

    def test_nan(self):

        for index in range(4):
            aa = [0.1, 0.2, 0.3, 0.4]
            aa[index] = np.nan

            self.assertTrue(np.isnan(rot.matrix_from_axis_angle(*aa)).all())


class TestMatrixFromRotationVector(TestCase):

    def test_matrix_from_rotation_vector(self):

        np.testing.assert_array_almost_equal(rot.matrix_from_rotation_vector(0, 0, np.pi / 2).as_array(), ROT_Z_90)

        np.testing.assert_array_equal(rot.matrix_from_rotation_vector(0, 0, 0).as_array(), np.eye(3))

        self.assertTrue(np.isnan(rot.matrix_from_rotation_vector(np.nan, 0, 0)).all())


class TestMatrixFromQuaternion(TestCase):

    def test_matrix_from_quaternion(self):

        np.testing.assert_array_almost_equal(
            rot.matrix_from_quaternion(np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2).as_array(), ROT_X_90
        )

        # non-unit quaternions describe the same rotation
        np.testing.assert_array_almost_equal(rot.matrix_from_quaternion(1, 0, 0, 1).as_array(), ROT_X_90)
        np.testing.assert_array_almost_equal(rot.matrix_from_quaternion(-3, 0, 0, -3).as_array(), ROT_X_90)

    def test_zero(self):

        np.testing.assert_array_equal(rot.matrix_from_quaternion(0, 0, 0, 0).as_array(), np.eye(3))

    def test_against_scipy(self):

        rng = np.random.default_rng(4)

        for _ in range(50):
            q = rng.normal(size=4)

            np.testing.assert_allclose(rot.matrix_from_quaternion(*q).as_array(),
                                       SciRotation.from_quat(q).as_matrix(), atol=1e-12)

    def test_nan(self):

        for index in range(4):
            q = [0.1, 0.2, 0.3, 0.4]
            q[index] = np.nan

            self.assertTrue(np.isnan(rot.matrix_from_quaternion(*q)).all())

    def test_infinite(self):

        self.assertTrue(np.isnan(rot.matrix_from_quaternion(np.inf, np.inf, 0, 1)).all())


class TestMatrixFromYawPitchRoll(TestCase):

    def test_matrix_from_yaw_pitch_roll(self):

        np.testing.assert_array_almost_equal(rot.matrix_from_yaw_pitch_roll(np.pi / 2, 0, 0).as_array(), ROT_Z_90)

        np.testing.assert_array_almost_equal(rot.matrix_from_yaw_pitch_roll(0, 0, np.pi / 2).as_array(), ROT_X_90)

        np.testing.assert_array_equal(rot.matrix_from_yaw_pitch_roll(0, 0, 0).as_array(), np.eye(3))

    def test_elemental_product(self):

        rng = np.random.default_rng(8)

        for _ in range(20):
            yaw, pitch, roll = rng.uniform(-np.pi, np.pi, size=3)

            expected = (rot.yaw_matrix(yaw).as_array() @ rot.pitch_matrix(pitch).as_array() @
                        rot.roll_matrix(roll).as_array())

            np.testing.assert_allclose(rot.matrix_from_yaw_pitch_roll(yaw, pitch, roll).as_array(), expected,
                                       atol=1e-14)

    def test_nan(self):

        for index in range(3):
            ypr = [0.1, 0.2, 0.3]
            ypr[index] = np.nan

            self.assertTrue(np.isnan(rot.matrix_from_yaw_pitch_roll(*ypr)).all())

    def test_out(self):

        out = np.zeros((3, 3))

        rot.matrix_from_yaw_pitch_roll(np.pi / 2, 0, 0, out=out)

        np.testing.assert_array_almost_equal(out, ROT_Z_90)

        out = [0.0] * 9

        rot.matrix_from_yaw_pitch_roll(np.pi / 2, 0, 0, out=out)

        np.testing.assert_array_almost_equal(out, ROT_Z_90.ravel())


class TestMatrixValidity(TestCase):

    def check(self, matrix):

        matrix = np.asarray(matrix).reshape(3, 3)

        np.testing.assert_allclose(np.linalg.norm(matrix, axis=1), 1, atol=1e-10)

        for first, second in [(0, 1), (0, 2), (1, 2)]:
            self.assertAlmostEqual(matrix[first] @ matrix[second], 0, delta=1e-10)

        self.assertAlmostEqual(np.linalg.det(matrix), 1, delta=1e-10)

        self.assertTrue(rot.is_rotation_matrix(*matrix.ravel(), epsilon=1e-10))

    def test_random_rotations(self):

        rng = np.random.default_rng(2024)

        for _ in range(100):
            axis = rng.normal(size=3)
            axis /= np.linalg.norm(axis)

            self.check(rot.matrix_from_axis_angle(*axis, rng.uniform(-np.pi, np.pi)))

            q = rng.normal(size=4)
            q /= np.linalg.norm(q)

            self.check(rot.matrix_from_quaternion(*q))

            self.check(rot.matrix_from_yaw_pitch_roll(*rng.uniform(-np.pi, np.pi, size=3)))

            self.check(rot.matrix_from_rotation_vector(*rng.uniform(-4, 4, size=3)))
