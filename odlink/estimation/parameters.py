"""Estimatable parameters

Description:
------------

Each estimatable parameter has a type (see the `parameter_type` enumeration), a target identity and a size. The
parameters are split in three groups, by the class they inherit from:

- :class:`InitialStateParameter`:  Initial translational and rotational states of bodies.
- :class:`DoubleParameter`:        Scalar parameters, e.g. gravitational parameters.
- :class:`VectorParameter`:        Vector parameters, e.g. ground station positions and observation biases.

The identity of a parameter, :attr:`EstimatableParameter.identifier`, is a :class:`ParameterId` and is unique within a
set of estimated parameters.

"""
# Standard library imports
from collections import namedtuple

# External library imports
import numpy as np

# Odlink imports
from odlink.lib import enums
from odlink.observation.link_ends import LinkEnds

# Parameter types attached to an observable and its link ends rather than to the physical state
_LINK_PROPERTY_TYPES = (
    enums.ParameterType.constant_additive_observation_bias,
    enums.ParameterType.constant_relative_observation_bias,
)


class ParameterId(namedtuple("ParameterId", ["parameter_type", "body", "secondary"])):
    """Identity of an estimatable parameter"""

    __slots__ = ()

    def __str__(self):
        target = f"{self.body}/{self.secondary}" if self.secondary else self.body
        return f"{self.parameter_type.name}({target})"


def is_link_property(parameter_type):
    """Check whether a parameter type is a property of an observable and its link ends (e.g. a bias)"""
    return enums.to_enum("parameter_type", parameter_type) in _LINK_PROPERTY_TYPES


class EstimatableParameter:
    """Base class for estimatable parameters"""

    parameter_type = None
    size = 1

    def __init__(self, body, secondary=""):
        self.body = body
        self.secondary = secondary

    @property
    def identifier(self):
        return ParameterId(self.parameter_type, self.body, self.secondary)

    @property
    def is_link_property(self):
        return is_link_property(self.parameter_type)

    @property
    def value(self):
        raise NotImplementedError

    @value.setter
    def value(self, value):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier!s})"


#
# Initial state parameters
#
class InitialStateParameter(EstimatableParameter):
    """Initial state of a body, the value is kept by the parameter"""

    def __init__(self, body, initial_state):
        super().__init__(body)
        initial_state = np.asarray(initial_state, dtype=float)
        if initial_state.size != self.size:
            raise ValueError(f"Initial state of {body!r} must have {self.size} elements, not {initial_state.size}")
        self._value = initial_state

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value[:] = value


class InitialTranslationalState(InitialStateParameter):
    """Initial position and velocity of a body"""

    parameter_type = enums.ParameterType.initial_body_state
    size = 6


class ArcWiseInitialTranslationalState(InitialStateParameter):
    """Initial position and velocity of a body at the start of each of a number of arcs"""

    parameter_type = enums.ParameterType.arc_wise_initial_body_state

    def __init__(self, body, arc_start_times, initial_states):
        self.arc_start_times = list(arc_start_times)
        self.size = 6 * len(self.arc_start_times)
        super().__init__(body, np.ravel(initial_states))


class InitialRotationalState(InitialStateParameter):
    """Initial attitude quaternion (w, x, y, z) and angular velocity of a body"""

    parameter_type = enums.ParameterType.initial_rotational_body_state
    size = 7


#
# Scalar parameters
#
class DoubleParameter(EstimatableParameter):
    """Scalar parameter"""

    size = 1


class GravitationalParameter(DoubleParameter):
    """Gravitational parameter of a body"""

    parameter_type = enums.ParameterType.gravitational_parameter

    def __init__(self, body):
        super().__init__(body.name)
        self._body = body

    @property
    def value(self):
        return self._body.gravitational_parameter

    @value.setter
    def value(self, value):
        self._body.gravitational_parameter = value


class PpnParameterGamma(DoubleParameter):
    """Post-Newtonian parameter gamma, shared by the given relativistic light-time corrections"""

    parameter_type = enums.ParameterType.ppn_parameter_gamma

    def __init__(self, corrections=None, value=1.0):
        super().__init__("global_metric")
        self._corrections = list(corrections or [])
        self.value = value

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        for correction in self._corrections:
            correction.ppn_gamma = value


class ConstantRotationRate(DoubleParameter):
    """Rotation rate of the rotation model of a body"""

    parameter_type = enums.ParameterType.constant_rotation_rate

    def __init__(self, body):
        super().__init__(body.name)
        self._rotation_model = body.rotation_model

    @property
    def value(self):
        return self._rotation_model.rotation_rate

    @value.setter
    def value(self, value):
        self._rotation_model.rotation_rate = value


#
# Vector parameters
#
class VectorParameter(EstimatableParameter):
    """Vector parameter"""

    pass


class GroundStationPosition(VectorParameter):
    """Body-fixed position of a ground station"""

    parameter_type = enums.ParameterType.ground_station_position
    size = 3

    def __init__(self, body, station):
        super().__init__(body.name, station)
        self._body = body
        self._body.ground_station_position(station)

    @property
    def value(self):
        return self._body.ground_station_position(self.secondary)

    @value.setter
    def value(self, value):
        self._body.ground_stations[self.secondary][:] = value


class ObservationBias(VectorParameter):
    """Bias of one observable on one set of link ends, one element for each element of the observation"""

    def __init__(self, link_ends, observable_type, value=None):
        # Import locally to avoid circular imports
        from odlink.observation import observables

        self.link_ends = link_ends if isinstance(link_ends, LinkEnds) else LinkEnds(link_ends)
        self.observable_type = enums.to_enum("observable_type", observable_type)
        self.size = observables.observation_size(self.observable_type)
        super().__init__(self.observable_type.name, repr(self.link_ends))
        self._value = np.zeros(self.size) if value is None else np.asarray(value, dtype=float).reshape(self.size)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value[:] = value


class ConstantObservationBias(ObservationBias):
    """Constant additive observation bias, in the unit of the observation"""

    parameter_type = enums.ParameterType.constant_additive_observation_bias


class ConstantRelativeObservationBias(ObservationBias):
    """Constant observation bias relative to the value of the observation"""

    parameter_type = enums.ParameterType.constant_relative_observation_bias
