"""Test :mod:`odlink.partials.scaling`

"""

# Third party imports
import numpy as np
import pytest

# Odlink imports
from odlink.lib import exceptions
from odlink.partials.scaling import AngularPositionScaling, OneWayRangeScaling


def test_range_scaling_static_geometry():
    scaling = OneWayRangeScaling()
    states = {"transmitter": np.zeros(6), "receiver": np.array([3.0e6, 4.0e6, 0, 0, 0, 0])}
    times = {"transmitter": 0.0, "receiver": 0.02}

    scaling.update(states, times, "receiver")

    np.testing.assert_allclose(scaling.scaling_factor("receiver"), [[0.6, 0.8, 0]])
    np.testing.assert_allclose(scaling.scaling_factor("transmitter"), [[-0.6, -0.8, 0]])
    np.testing.assert_allclose(scaling.scaling_factor("reflector"), np.zeros((1, 3)))
    np.testing.assert_allclose(scaling.light_time_partial_scaling(), [[299792458.0]])


def test_range_scaling_moving_transmitter():
    scaling = OneWayRangeScaling()
    states = {"transmitter": np.array([0, 0, 0, 1.0e3, 0, 0]), "receiver": np.array([1.0e7, 0, 0, 0, 0, 0])}

    scaling.update(states, {"transmitter": 0.0, "receiver": 0.03}, "receiver")

    factor = 1 / (1 - 1.0e3 / 299792458.0)
    np.testing.assert_allclose(scaling.scaling_factor("receiver"), [[factor, 0, 0]])


def test_angular_position_scaling():
    scaling = AngularPositionScaling()
    states = {"transmitter": np.array([1.0, 1.0, 0, 0, 0, 0]), "receiver": np.zeros(6)}

    scaling.update(states, {"transmitter": 0.0, "receiver": 0.0}, "receiver")

    np.testing.assert_allclose(scaling.scaling_factor("transmitter"), [[-0.5, 0.5, 0], [0, 0, 1 / np.sqrt(2)]])
    np.testing.assert_allclose(scaling.scaling_factor("receiver"), -scaling.scaling_factor("transmitter"))
    assert scaling.light_time_partial_scaling().shape == (2, 1)


def test_angular_position_scaling_matches_finite_difference():
    scaling = AngularPositionScaling()
    transmitter = np.array([3.0e8, -1.0e8, 2.0e8])
    scaling.update({"transmitter": transmitter, "receiver": np.zeros(3)}, {}, "receiver")

    numerical = _finite_difference(_angles, transmitter, delta=1.0)
    np.testing.assert_allclose(scaling.scaling_factor("transmitter"), numerical, rtol=1e-6, atol=1e-20)


def test_scaling_must_be_updated():
    with pytest.raises(exceptions.ScalingNotUpdatedError):
        OneWayRangeScaling().scaling_factor("receiver")
    with pytest.raises(exceptions.ScalingNotUpdatedError):
        AngularPositionScaling().light_time_partial_scaling()


#
# Angular position partials through the light time of a moving link end
#
SPEED_OF_LIGHT = 299792458.0
FAR_POSITION = np.array([3.0e8, 2.0e8, 1.5e8])
NEAR_POSITION = np.array([1.0e6, -2.0e6, 5.0e5])


def _angles(vector):
    x, y, z = vector
    return np.array([np.arctan2(y, x), np.arctan2(z, np.hypot(x, y))])


def _light_time(link_vector, light_time_correction=0.0):
    """Solve the light time by fixed point iteration, link_vector gives the link for a given light time"""
    light_time = 0.0
    for _ in range(20):
        light_time = np.linalg.norm(link_vector(light_time)) / SPEED_OF_LIGHT + light_time_correction
    return light_time


def _finite_difference(function, position, delta):
    columns = [(function(position + delta * e) - function(position - delta * e)) / (2 * delta) for e in np.eye(3)]
    return np.array(columns).T


def test_angular_position_scaling_moving_transmitter():
    velocity = np.array([0, 3.0e4, 1.0e4])

    def transmitter_position(time):
        return FAR_POSITION + velocity * time

    def observed_angles(receiver_position, light_time_correction=0.0):
        light_time = _light_time(lambda lt: receiver_position - transmitter_position(-lt), light_time_correction)
        return _angles(transmitter_position(-light_time) - receiver_position)

    light_time = _light_time(lambda lt: NEAR_POSITION - transmitter_position(-lt))
    states = {
        "transmitter": np.hstack((transmitter_position(-light_time), velocity)),
        "receiver": np.hstack((NEAR_POSITION, np.zeros(3))),
    }
    scaling = AngularPositionScaling()
    scaling.update(states, {"transmitter": -light_time, "receiver": 0.0}, "receiver")

    numerical = _finite_difference(observed_angles, NEAR_POSITION, delta=1000.0)
    np.testing.assert_allclose(scaling.scaling_factor("receiver"), numerical, rtol=1e-6, atol=1e-17)

    delta = 1e-3
    numerical = (observed_angles(NEAR_POSITION, delta) - observed_angles(NEAR_POSITION, -delta)) / (2 * delta)
    np.testing.assert_allclose(scaling.light_time_partial_scaling()[:, 0], numerical, rtol=1e-6)


def test_angular_position_scaling_moving_receiver():
    velocity = np.array([2.0e4, -1.0e4, 5.0e3])

    def receiver_position(time):
        return NEAR_POSITION + velocity * time

    def observed_angles(transmitter_position, light_time_correction=0.0):
        light_time = _light_time(lambda lt: receiver_position(lt) - transmitter_position, light_time_correction)
        return _angles(transmitter_position - receiver_position(light_time))

    light_time = _light_time(lambda lt: receiver_position(lt) - FAR_POSITION)
    states = {
        "transmitter": np.hstack((FAR_POSITION, np.zeros(3))),
        "receiver": np.hstack((receiver_position(light_time), velocity)),
    }
    scaling = AngularPositionScaling()
    scaling.update(states, {"transmitter": 0.0, "receiver": light_time}, "transmitter")

    numerical = _finite_difference(observed_angles, FAR_POSITION, delta=1000.0)
    np.testing.assert_allclose(scaling.scaling_factor("transmitter"), numerical, rtol=1e-6, atol=1e-17)

    delta = 1e-3
    numerical = (observed_angles(FAR_POSITION, delta) - observed_angles(FAR_POSITION, -delta)) / (2 * delta)
    np.testing.assert_allclose(scaling.light_time_partial_scaling()[:, 0], numerical, rtol=1e-6)
