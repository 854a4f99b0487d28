from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation as SciRotation

from rotconv import rotations as rot


class TestPitchBounds(TestCase):

    def test_constants(self):

        self.assertAlmostEqual(rot.MAX_PITCH_ANGLE, np.pi / 2 - np.deg2rad(1.82))
        self.assertEqual(rot.MIN_PITCH_ANGLE, -rot.MAX_PITCH_ANGLE)
        self.assertLess(rot.MAX_PITCH_ANGLE, np.pi / 2)

    def test_matrix_boundary(self):

        for pitch in [rot.MAX_PITCH_ANGLE, rot.MIN_PITCH_ANGLE]:
            ypr = rot.yaw_pitch_roll_from_matrix(*rot.matrix_from_yaw_pitch_roll(0.3, pitch, -0.2))

            self.assertFalse(np.isnan(ypr).any())
            np.testing.assert_allclose(ypr, [0.3, pitch, -0.2], atol=1e-10)

        for pitch in [rot.MAX_PITCH_ANGLE + 1e-9, rot.MIN_PITCH_ANGLE - 1e-9, np.pi / 2, -np.pi / 2]:
            ypr = rot.yaw_pitch_roll_from_matrix(*rot.matrix_from_yaw_pitch_roll(0.3, pitch, -0.2))

            self.assertTrue(np.isnan(ypr).all())

    def test_quaternion_boundary(self):

        for pitch in [rot.MAX_PITCH_ANGLE, rot.MIN_PITCH_ANGLE]:
            ypr = rot.yaw_pitch_roll_from_quaternion(*rot.quaternion_from_yaw_pitch_roll(-1.1, pitch, 2.5))

            np.testing.assert_allclose(ypr, [-1.1, pitch, 2.5], atol=1e-10)

        for pitch in [rot.MAX_PITCH_ANGLE + 1e-9, rot.MIN_PITCH_ANGLE - 1e-9]:
            ypr = rot.yaw_pitch_roll_from_quaternion(*rot.quaternion_from_yaw_pitch_roll(-1.1, pitch, 2.5))

            self.assertTrue(np.isnan(ypr).all())

    def test_custom_bounds(self):

        tolerances = rot.ConversionTolerances(safe_pitch_threshold=0.5)

        matrix = rot.matrix_from_yaw_pitch_roll(0.1, 1.2, 0.1)

        self.assertFalse(np.isnan(rot.yaw_pitch_roll_from_matrix(*matrix)).any())

        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_matrix(*matrix, tolerances=tolerances)).all())


class TestYawPitchRollFromMatrix(TestCase):

    def test_yaw_pitch_roll_from_matrix(self):

        ypr = rot.yaw_pitch_roll_from_matrix(0, -1, 0, 1, 0, 0, 0, 0, 1)

        self.assertIsInstance(ypr, rot.YawPitchRoll)
        np.testing.assert_allclose(ypr, [np.pi / 2, 0, 0])

    def test_round_trip(self):

        rng = np.random.default_rng(41)

        for _ in range(100):
            ypr = [rng.uniform(-np.pi, np.pi), rng.uniform(rot.MIN_PITCH_ANGLE, rot.MAX_PITCH_ANGLE),
                   rng.uniform(-np.pi, np.pi)]

            np.testing.assert_allclose(rot.yaw_pitch_roll_from_matrix(*rot.matrix_from_yaw_pitch_roll(*ypr)), ypr,
                                       atol=1e-10)

    def test_zero(self):

        np.testing.assert_array_equal(rot.yaw_pitch_roll_from_matrix(*np.eye(3).ravel()), [0, 0, 0])

    def test_nan(self):

        # only m00, m10, m20, m21, and m22 are used
        for index in [0, 3, 6, 7, 8]:
            matrix = np.eye(3).ravel()
            matrix[index] = np.nan

            self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_matrix(*matrix)).all())


class TestYawPitchRollFromQuaternion(TestCase):

    def test_yaw_pitch_roll_from_quaternion(self):

        np.testing.assert_allclose(rot.yaw_pitch_roll_from_quaternion(0, 0, 1, 1), [np.pi / 2, 0, 0], atol=1e-15)

        np.testing.assert_allclose(rot.yaw_pitch_roll_from_quaternion(0, np.sin(0.25), 0, np.cos(0.25)), [0, 0.5, 0],
                                   atol=1e-15)

    def test_against_scipy(self):

        rng = np.random.default_rng(43)

        checked = 0

        while checked < 50:
            q = rng.normal(size=4)

            expected = SciRotation.from_quat(q).as_euler('ZYX')

            if abs(expected[1]) > rot.MAX_PITCH_ANGLE - 1e-3:
                continue

            np.testing.assert_allclose(rot.yaw_pitch_roll_from_quaternion(*q), expected, atol=1e-10)

            checked += 1

    def test_zero(self):

        np.testing.assert_array_equal(rot.yaw_pitch_roll_from_quaternion(0, 0, 0, 0), [0, 0, 0])
        np.testing.assert_array_equal(rot.yaw_pitch_roll_from_quaternion(0, 0, 0, 1), [0, 0, 0])

    def test_nan(self):

        for index in range(4):
            q = [0.1, 0.2, 0.3, 0.4]
            q[index] = np.nan

            self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_quaternion(*q)).all())


class TestYawPitchRollFromAxisAngle(TestCase):

    def test_yaw_pitch_roll_from_axis_angle(self):

        np.testing.assert_allclose(rot.yaw_pitch_roll_from_axis_angle(0, 0, 3, 0.7), [0.7, 0, 0], atol=1e-15)

        np.testing.assert_allclose(rot.yaw_pitch_roll_from_axis_angle(-1, 0, 0, 0.7), [0, 0, -0.7], atol=1e-15)

    def test_matches_quaternion(self):

        rng = np.random.default_rng(47)

        for _ in range(50):
            axis = rng.normal(size=3)
            angle = rng.uniform(-np.pi, np.pi)

            np.testing.assert_allclose(rot.yaw_pitch_roll_from_axis_angle(*axis, angle),
                                       rot.yaw_pitch_roll_from_quaternion(*rot.quaternion_from_axis_angle(*axis,
                                                                                                          angle)),
                                       atol=1e-10)

    def test_zero(self):

        np.testing.assert_array_equal(rot.yaw_pitch_roll_from_axis_angle(0, 0, 0, 2), [0, 0, 0])

    def test_nan(self):

        for index in range(4):
            aa = [0.1, 0.2, 0.3, 0.4]
            aa[index] = np.nan

            self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_axis_angle(*aa)).all())

    def test_gimbal_lock(self):

        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_axis_angle(0, 1, 0, np.pi / 2)).all())


class TestYawPitchRollFromRotationVector(TestCase):

    def test_yaw_pitch_roll_from_rotation_vector(self):

        np.testing.assert_allclose(rot.yaw_pitch_roll_from_rotation_vector(0, 0.4, 0), [0, 0.4, 0], atol=1e-15)

        np.testing.assert_array_equal(rot.yaw_pitch_roll_from_rotation_vector(0, 0, 0), [0, 0, 0])

    def test_against_scipy(self):

        rng = np.random.default_rng(53)

        for _ in range(50):
            ypr = rng.uniform(-1.2, 1.2, size=3)

            vector = SciRotation.from_euler('ZYX', ypr).as_rotvec()

            np.testing.assert_allclose(rot.yaw_pitch_roll_from_rotation_vector(*vector), ypr, atol=1e-10)

    def test_nan(self):

        for index in range(3):
            v = [0.1, 0.2, 0.3]
            v[index] = np.nan

            self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_rotation_vector(*v)).all())


class TestComputeSingleAngles(TestCase):

    def test_matrix(self):

        matrix = rot.matrix_from_yaw_pitch_roll(0.4, -0.3, 1.1)

        self.assertAlmostEqual(rot.compute_yaw_from_matrix(matrix.m00, matrix.m10, matrix.m20), 0.4)
        self.assertAlmostEqual(rot.compute_pitch_from_matrix(matrix.m20), -0.3)
        self.assertAlmostEqual(rot.compute_roll_from_matrix(matrix.m20, matrix.m21, matrix.m22), 1.1)

        self.assertTrue(np.isnan(rot.compute_pitch_from_matrix(np.nan)))
        self.assertTrue(np.isnan(rot.compute_yaw_from_matrix(np.nan, 0, 0)))
        self.assertTrue(np.isnan(rot.compute_roll_from_matrix(0, 0, np.nan)))

    def test_matrix_gimbal_lock(self):

        self.assertTrue(np.isnan(rot.compute_pitch_from_matrix(-1)))
        self.assertTrue(np.isnan(rot.compute_yaw_from_matrix(0, 0, -1)))
        self.assertTrue(np.isnan(rot.compute_roll_from_matrix(1, 0, 0)))

    def test_other_sources(self):

        ypr = np.array([-0.8, 0.6, 0.25])

        q = rot.quaternion_from_yaw_pitch_roll(*ypr)
        aa = rot.axis_angle_from_quaternion(*q)
        vector = rot.rotation_vector_from_quaternion(*q)

        self.assertAlmostEqual(rot.compute_yaw_from_quaternion(*q), ypr[0])
        self.assertAlmostEqual(rot.compute_pitch_from_quaternion(*q), ypr[1])
        self.assertAlmostEqual(rot.compute_roll_from_quaternion(*q), ypr[2])

        self.assertAlmostEqual(rot.compute_yaw_from_axis_angle(*aa), ypr[0])
        self.assertAlmostEqual(rot.compute_pitch_from_axis_angle(*aa), ypr[1])
        self.assertAlmostEqual(rot.compute_roll_from_axis_angle(*aa), ypr[2])

        self.assertAlmostEqual(rot.compute_yaw_from_rotation_vector(*vector), ypr[0])
        self.assertAlmostEqual(rot.compute_pitch_from_rotation_vector(*vector), ypr[1])
        self.assertAlmostEqual(rot.compute_roll_from_rotation_vector(*vector), ypr[2])

    def test_gimbal_lock(self):

        q = rot.quaternion_from_yaw_pitch_roll(0.2, np.pi / 2, 0.1)

        self.assertTrue(np.isnan(rot.compute_yaw_from_quaternion(*q)))
        self.assertTrue(np.isnan(rot.compute_pitch_from_quaternion(*q)))
        self.assertTrue(np.isnan(rot.compute_roll_from_quaternion(*q)))

    def test_match_full_decomposition(self):

        rng = np.random.default_rng(59)

        for _ in range(50):
            q = rng.normal(size=4)
            aa = rot.axis_angle_from_quaternion(*q)
            vector = rot.rotation_vector_from_quaternion(*q)

            expected = rot.yaw_pitch_roll_from_quaternion(*q)

            for computed in [[rot.compute_yaw_from_quaternion(*q), rot.compute_pitch_from_quaternion(*q),
                              rot.compute_roll_from_quaternion(*q)],
                             [rot.compute_yaw_from_axis_angle(*aa), rot.compute_pitch_from_axis_angle(*aa),
                              rot.compute_roll_from_axis_angle(*aa)],
                             [rot.compute_yaw_from_rotation_vector(*vector),
                              rot.compute_pitch_from_rotation_vector(*vector),
                              rot.compute_roll_from_rotation_vector(*vector)]]:
                np.testing.assert_allclose(computed, expected, atol=1e-10)

    def test_zero_and_invalid(self):

        for func in [rot.compute_yaw_from_quaternion, rot.compute_pitch_from_quaternion,
                     rot.compute_roll_from_quaternion]:
            self.assertEqual(func(0, 0, 0, 0), 0)
            self.assertTrue(np.isnan(func(0, np.nan, 0, 1)))
            self.assertTrue(np.isnan(func(np.inf, 0, 0, 1)))

        for func in [rot.compute_yaw_from_axis_angle, rot.compute_pitch_from_axis_angle,
                     rot.compute_roll_from_axis_angle]:
            self.assertEqual(func(0, 0, 0, 1), 0)
            self.assertTrue(np.isnan(func(0, 0, 1, np.inf)))

        for func in [rot.compute_yaw_from_rotation_vector, rot.compute_pitch_from_rotation_vector,
                     rot.compute_roll_from_rotation_vector]:
            self.assertEqual(func(0, 0, 0), 0)
            self.assertTrue(np.isnan(func(0, -np.inf, 0)))

        self.assertTrue(np.isnan(rot.compute_pitch_from_matrix(np.inf)))


class TestNonFiniteInput(TestCase):

    def test_infinite(self):

        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_quaternion(np.inf, 0, 0, 1)).all())
        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_axis_angle(0, 0, 1, np.inf)).all())
        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_rotation_vector(np.inf, 0, 0)).all())
        self.assertTrue(np.isnan(rot.yaw_pitch_roll_from_matrix(1, 0, 0, np.inf, 1, 0, 0, 0, 1)).all())
