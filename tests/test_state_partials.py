"""Test :mod:`odlink.partials.state`

"""

# Third party imports
import numpy as np

# Odlink imports
from odlink.estimation import parameters
from odlink.lib import enums
from odlink.lib import rotation
from odlink.partials.state import BodyStatePartialProvider

from conftest import WETTZELL


def test_body_position(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)

    partials = provider.state_partials_wrt_body_position(station_link_ends, "LAGEOS")
    assert list(partials) == [enums.LinkEndType.receiver]
    np.testing.assert_array_equal(partials[enums.LinkEndType.receiver].position_partial(None, 0.0)[:, :3], np.eye(3))

    # The station moves with the Earth
    partials = provider.state_partials_wrt_body_position(station_link_ends, "Earth")
    assert list(partials) == [enums.LinkEndType.transmitter]
    assert provider.state_partials_wrt_body_position(station_link_ends, "Sun") == {}


def test_arc_wise_body_position(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)
    parameter = parameters.ArcWiseInitialTranslationalState("LAGEOS", [0.0, 86400.0], np.zeros((2, 6)))

    partials = provider.state_partials_wrt_body_position(station_link_ends, "LAGEOS", parameter)
    partial = partials[enums.LinkEndType.receiver].position_partial(None, 90000.0)

    assert partial.shape == (3, 12)
    np.testing.assert_array_equal(partial[:, 6:9], np.eye(3))
    np.testing.assert_array_equal(partial[:, :6], np.zeros((3, 6)))


def test_rotational_state(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)

    partials = provider.state_partials_wrt_body_rotational_state(station_link_ends, "Earth")
    partial = partials[enums.LinkEndType.transmitter].position_partial(None, 100.0)

    quaternion = bodies["Earth"].rotation_model.quaternion(100.0)
    delta = 1e-3
    for idx in range(4):
        dq = delta * np.eye(4)[idx]
        dR = rotation.quaternion_to_matrix(quaternion + dq) - rotation.quaternion_to_matrix(quaternion - dq)
        np.testing.assert_allclose(partial[:, idx], dR @ WETTZELL / (2 * delta), rtol=1e-6, atol=1e-3)
    np.testing.assert_array_equal(partial[:, 4:], np.zeros((3, 3)))

    # Centre of a body does not move when the body rotates
    assert provider.state_partials_wrt_body_rotational_state(station_link_ends, "LAGEOS") == {}


def test_ground_station_position(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)
    earth = bodies["Earth"]
    parameter = parameters.GroundStationPosition(earth, "Wettzell")

    partials = provider.state_partials_wrt_parameter(station_link_ends, parameter)
    partial = partials[enums.LinkEndType.transmitter].position_partial(None, 0.0)

    np.testing.assert_allclose(partial, earth.rotation_model.body_fixed_to_inertial(0.0))
    np.testing.assert_allclose(partial @ partial.T, np.eye(3), atol=1e-12)


def test_rotation_rate(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)
    earth = bodies["Earth"]
    parameter = parameters.ConstantRotationRate(earth)

    partial = provider.state_partials_wrt_parameter(station_link_ends, parameter)[enums.LinkEndType.transmitter]

    np.testing.assert_allclose(partial.position_partial(None, 0.0), np.zeros((3, 1)), atol=1e-9)

    time, delta = 3600.0, 1e-9
    rate = earth.rotation_model.rotation_rate
    positions = list()
    for rotation_rate in (rate + delta, rate - delta):
        earth.rotation_model.rotation_rate = rotation_rate
        positions.append(earth.rotation_model.body_fixed_to_inertial(time) @ WETTZELL)
    earth.rotation_model.rotation_rate = rate

    numerical = (positions[0] - positions[1]) / (2 * delta)
    np.testing.assert_allclose(partial.position_partial(None, time)[:, 0], numerical, rtol=1e-5, atol=1e-2)


def test_no_state_dependency(bodies, station_link_ends):
    provider = BodyStatePartialProvider(bodies)

    parameter = parameters.GravitationalParameter(bodies["Earth"])
    assert provider.state_partials_wrt_parameter(station_link_ends, parameter) == {}
