"""Bodies taking part in the tracking links

Description:
------------

A light-weight environment holding what the state partials need to know about each body: its gravitational parameter,
its ephemeris, its rotation model and the body-fixed positions of the ground stations on it.

Example:
--------

    >>> bodies = SystemOfBodies()
    >>> earth = bodies.add(Body("Earth", gravitational_parameter=3.986004418e14))
    >>> earth.rotation_model = SimpleRotationModel(rotation_rate=7.2921150e-5)
    >>> earth.add_ground_station("Wettzell", [4075539.8, 931735.3, 4801629.4])

"""

# Standard library imports
import bisect

# External library imports
import numpy as np

# Odlink imports
from odlink.lib import exceptions
from odlink.lib import rotation


class SimpleRotationModel:
    """Rotation about the inertial z-axis with a constant rotation rate

    The rotation angle at time `t` is `initial_angle + rotation_rate * (t - reference_epoch)`.
    """

    def __init__(self, rotation_rate, initial_angle=0.0, reference_epoch=0.0):
        self.rotation_rate = rotation_rate
        self.initial_angle = initial_angle
        self.reference_epoch = reference_epoch

    def angle(self, time):
        return self.initial_angle + self.rotation_rate * (time - self.reference_epoch)

    def body_fixed_to_inertial(self, time):
        """Rotation matrix from body-fixed to inertial frame at the given time"""
        return rotation.body_fixed_to_inertial(self.angle(time))

    def dbody_fixed_to_inertial_drate(self, time):
        """Derivative of the rotation matrix with respect to the rotation rate"""
        return (time - self.reference_epoch) * rotation.dbody_fixed_to_inertial_dangle(self.angle(time))

    def quaternion(self, time):
        """Rotational attitude as a quaternion (w, x, y, z) at the given time"""
        return rotation.matrix_to_quaternion(self.body_fixed_to_inertial(time))


class Body:
    """A natural or artificial body

    Args:
        name (String):                      Name of body, used as identity in link ends and parameters.
        gravitational_parameter (Float):    Gravitational parameter in m**3/s**2.
        ephemeris (Function):               Function of time returning the 6-element inertial state.
        rotation_model (SimpleRotationModel): Rotation model of the body.
    """

    def __init__(self, name, gravitational_parameter=None, ephemeris=None, rotation_model=None):
        self.name = name
        self.gravitational_parameter = gravitational_parameter
        self.ephemeris = ephemeris
        self.rotation_model = rotation_model
        self.ground_stations = dict()

    def add_ground_station(self, station, body_fixed_position):
        """Add a ground station given its position in the body-fixed frame"""
        self.ground_stations[station] = np.asarray(body_fixed_position, dtype=float)

    def ground_station_position(self, station):
        try:
            return self.ground_stations[station]
        except KeyError:
            raise exceptions.UnknownBodyError(f"Unknown ground station {station!r} on body {self.name!r}") from None

    def state(self, time):
        """Inertial state (position, velocity) of the body at the given time"""
        if self.ephemeris is None:
            raise exceptions.UnknownBodyError(f"No ephemeris defined for body {self.name!r}")
        return np.asarray(self.ephemeris(time), dtype=float)

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class SystemOfBodies:
    """Collection of bodies, looked up by name"""

    def __init__(self, bodies=None):
        self._bodies = dict()
        for body in bodies or []:
            self.add(body)

    def add(self, body):
        self._bodies[body.name] = body
        return body

    def __getitem__(self, name):
        try:
            return self._bodies[name]
        except KeyError:
            raise exceptions.UnknownBodyError(f"Unknown body {name!r}. Use one of {', '.join(self._bodies)}") from None

    def __contains__(self, name):
        return name in self._bodies

    def __iter__(self):
        return iter(self._bodies.values())

    def __len__(self):
        return len(self._bodies)

    @property
    def names(self):
        return list(self._bodies)


def arc_index(arc_start_times, time):
    """Index of the arc containing the given time

    Times before the first arc start belong to the first arc.
    """
    return max(bisect.bisect_right(arc_start_times, time) - 1, 0)
