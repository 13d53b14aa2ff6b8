import math

import numpy as np
import pytest

from fpdriver import gnss_tf

ECEF_ERR = 5e-4
RAD_ERR = 1e-8

LLH_DEG = [
    (47.398826818, 8.458494107, 457.518),
    (0.0, 0.0, 0.0),
    (-33.8688, 151.2093, 58.0),
    (64.1466, -21.9426, 12.5),
    (10.0, -170.0, -30.0),
]

ECEF_POINTS = [
    (4282251.9970, 641470.7361, 4668050.6007),
    (6378137.0, 0.0, 0.0),
    (-2694044.4111565403, -4266368.805493665, 3888310.602276871),
]


def _llh_rad(llh_deg):
    return np.array([math.radians(llh_deg[0]), math.radians(llh_deg[1]), llh_deg[2]])


def _compare_llh(a, b):
    assert a[0] == pytest.approx(b[0], abs=RAD_ERR)
    assert a[1] == pytest.approx(b[1], abs=RAD_ERR)
    assert a[2] == pytest.approx(b[2], abs=ECEF_ERR)


def test_equator_origin_to_ecef():
    assert np.allclose(gnss_tf.tf_ecef_wgs84llh([0.0, 0.0, 0.0]), [gnss_tf.WGS84_A, 0.0, 0.0], atol=ECEF_ERR)


def test_equator_origin_from_ecef():
    _compare_llh(gnss_tf.tf_wgs84llh_ecef([gnss_tf.WGS84_A, 0.0, 0.0]), [0.0, 0.0, 0.0])


def test_north_pole_to_ecef():
    ecef = gnss_tf.tf_ecef_wgs84llh([math.pi / 2, 0.0, 0.0])
    assert np.allclose(ecef, [0.0, 0.0, gnss_tf.WGS84_B], atol=1e-3)


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_llh_ecef_round_trip(llh_deg):
    llh = _llh_rad(llh_deg)
    ecef = gnss_tf.tf_ecef_wgs84llh(llh)
    _compare_llh(gnss_tf.tf_wgs84llh_ecef(ecef), llh)


@pytest.mark.parametrize("ecef", ECEF_POINTS)
def test_ecef_llh_round_trip(ecef):
    llh = gnss_tf.tf_wgs84llh_ecef(ecef)
    assert np.allclose(gnss_tf.tf_ecef_wgs84llh(llh), ecef, atol=ECEF_ERR)


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_enu_of_reference_is_zero(llh_deg):
    llh = _llh_rad(llh_deg)
    ecef = gnss_tf.tf_ecef_wgs84llh(llh)
    assert np.allclose(gnss_tf.tf_enu_ecef(ecef, llh), np.zeros(3), atol=ECEF_ERR)


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_up_direction_in_enu(llh_deg):
    llh = _llh_rad(llh_deg)
    raised = llh + np.array([0.0, 0.0, 100.0])
    enu = gnss_tf.tf_enu_ecef(gnss_tf.tf_ecef_wgs84llh(raised), llh)
    assert np.allclose(enu, [0.0, 0.0, 100.0], atol=ECEF_ERR)


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_enu_ecef_round_trip(llh_deg):
    llh = _llh_rad(llh_deg)
    enu = np.array([120.5, -37.25, 8.0])
    ecef = gnss_tf.tf_ecef_enu(enu, llh)
    assert np.allclose(gnss_tf.tf_enu_ecef(ecef, llh), enu, atol=ECEF_ERR)


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_ned_ecef_round_trip(llh_deg):
    llh = _llh_rad(llh_deg)
    ned = np.array([-15.0, 210.0, 3.5])
    ecef = gnss_tf.tf_ecef_ned(ned, llh)
    assert np.allclose(gnss_tf.tf_ned_ecef(ecef, llh), ned, atol=ECEF_ERR)


def test_ned_is_swapped_enu():
    llh = _llh_rad(LLH_DEG[0])
    ecef = np.array(ECEF_POINTS[0]) + np.array([10.0, -20.0, 30.0])
    enu = gnss_tf.tf_enu_ecef(ecef, llh)
    ned = gnss_tf.tf_ned_ecef(ecef, llh)
    assert np.allclose(ned, [enu[1], enu[0], -enu[2]], atol=ECEF_ERR)


def test_rot_ned_enu_matrix():
    assert np.array_equal(gnss_tf.rot_ned_enu(), np.array([[0, 1, 0], [1, 0, 0], [0, 0, -1]], dtype=float))


@pytest.mark.parametrize("llh_deg", LLH_DEG)
def test_rotations_are_orthonormal(llh_deg):
    llh = _llh_rad(llh_deg)
    for rot in (gnss_tf.rot_enu_ecef(llh[0], llh[1]), gnss_tf.rot_ned_ecef(llh[0], llh[1])):
        assert np.allclose(rot @ rot.T, np.eye(3))


def test_rotation_at_position_matches_lat_lon():
    ecef = ECEF_POINTS[0]
    llh = gnss_tf.tf_wgs84llh_ecef(ecef)
    assert np.allclose(gnss_tf.rot_enu_ecef_at(ecef), gnss_tf.rot_enu_ecef(llh[0], llh[1]))
    assert np.allclose(gnss_tf.rot_ned_ecef_at(ecef), gnss_tf.rot_ned_ecef(llh[0], llh[1]))


def test_enu_aligned_pose_has_zero_euler():
    ecef = ECEF_POINTS[0]
    ecef_r = gnss_tf.rot_enu_ecef_at(ecef).T
    assert np.allclose(gnss_tf.ecef_pose_to_enu_eul(ecef, ecef_r), np.zeros(3), atol=1e-9)


def test_enu_pose_with_yaw():
    ecef = ECEF_POINTS[0]
    yaw = 0.6
    rz = np.array([[math.cos(yaw), -math.sin(yaw), 0], [math.sin(yaw), math.cos(yaw), 0], [0, 0, 1]])
    ecef_r = gnss_tf.rot_enu_ecef_at(ecef).T @ rz
    assert np.allclose(gnss_tf.ecef_pose_to_enu_eul(ecef, ecef_r), [yaw, 0.0, 0.0], atol=1e-9)


def test_bad_vector_shape_raises():
    with pytest.raises(ValueError):
        gnss_tf.tf_ecef_wgs84llh([1.0, 2.0])