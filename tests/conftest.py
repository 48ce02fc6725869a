"""Common functions for all tests

"""

# Third party imports
import numpy as np
import pytest

# Odlink imports
from odlink.environment.bodies import Body, SimpleRotationModel, SystemOfBodies
from odlink.observation.link_ends import LinkEnds
from odlink.partials.state import BodyStatePartialProvider

# Position of Wettzell in the ITRF, in meters
WETTZELL = np.array([4075539.8, 931735.3, 4801629.4])


@pytest.fixture
def bodies():
    """Earth with one ground station, the Sun, a satellite and two bodies without any models"""
    earth = Body("Earth", gravitational_parameter=3.986004418e14, ephemeris=lambda t: np.zeros(6))
    earth.rotation_model = SimpleRotationModel(rotation_rate=7.292115e-5, initial_angle=0.3)
    earth.add_ground_station("Wettzell", WETTZELL)

    sun_state = np.array([1.496e11, 0, 0, 0, 0, 0])
    sun = Body("Sun", gravitational_parameter=1.32712440018e20, ephemeris=lambda t: sun_state)

    return SystemOfBodies(
        [earth, sun, Body("LAGEOS"), Body("StationA", gravitational_parameter=1.0e5), Body("BodyB")]
    )


@pytest.fixture
def provider(bodies):
    return RecordingProvider(bodies)


@pytest.fixture
def range_link_ends():
    """One-way range link from a body that is not estimated to the body that is"""
    return LinkEnds(transmitter="StationA", receiver="BodyB")


@pytest.fixture
def station_link_ends():
    """Link from a ground station on a rotating Earth to a satellite"""
    return LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS")


class RecordingProvider(BodyStatePartialProvider):
    """State partial provider remembering which parameters it has been asked about"""

    def __init__(self, bodies):
        super().__init__(bodies)
        self.requested = list()

    def state_partials_wrt_body_position(self, link_ends, body, parameter=None):
        self.requested.append(("body_position", body))
        return super().state_partials_wrt_body_position(link_ends, body, parameter)

    def state_partials_wrt_body_rotational_state(self, link_ends, body, parameter=None):
        self.requested.append(("rotational_state", body))
        return super().state_partials_wrt_body_rotational_state(link_ends, body, parameter)

    def state_partials_wrt_parameter(self, link_ends, parameter):
        self.requested.append(("parameter", parameter.identifier))
        return super().state_partials_wrt_parameter(link_ends, parameter)
