"""Partials of an observation with respect to one estimated parameter

Description:
------------

An observation partial object is created for each estimated parameter an observation depends on. Calling it with the
states and times of the link ends gives the partial derivative of the observation with respect to the parameter, as a
list of `(partial, time)`-tuples. Each partial is an observation size x parameter size matrix, and the time is the
time at which the parameter affects the observation (which differs between the link ends). The partials with
respect to initial states are the partials with respect to the current states at these times, and must be mapped to
the initial epoch with the state transition matrices by the estimator.

"""

# External library imports
import numpy as np

# Odlink imports
from odlink.observation.link_ends import by_link_end_type
from odlink.observation.link_ends import link_end_type


class ObservationPartial:
    """Base class for observation partials

    Args:
        parameter_id (ParameterId):   Identity of the parameter the partials are taken with respect to.
    """

    def __init__(self, parameter_id):
        self.parameter_id = parameter_id

    def __call__(self, states, times, fixed_link_end, current_observation=None):
        """Calculate the partials

        Args:
            states (Dict):               Inertial state (position, velocity) of each link end role.
            times (Dict):                Time at each link end role.
            fixed_link_end (String):     Role at which the observation time is fixed.
            current_observation (Array): The current value of the observation.

        Returns:
            List: Tuples of partial (observation size x parameter size) and time of the partial.
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.parameter_id!s})"


class OneWayLinkObservationPartial(ObservationPartial):
    """Observation partial through the positions of the link ends and the light-time corrections

    Args:
        scaling (PositionPartialScaling):   Scaling shared by all partials of the link, updated by the caller.
        position_partials (Dict):           Position partial of each link end role depending on the parameter.
        parameter_id (ParameterId):         Identity of the parameter.
        light_time_partials (List):         Light-time correction partial functions depending on the parameter.
    """

    def __init__(self, scaling, position_partials, parameter_id, light_time_partials=None):
        super().__init__(parameter_id)
        self.scaling = scaling
        self.position_partials = by_link_end_type(position_partials)
        self.light_time_partials = list(light_time_partials or [])

    @property
    def num_light_time_partials(self):
        return len(self.light_time_partials)

    def __call__(self, states, times, fixed_link_end, current_observation=None):
        states, times = by_link_end_type(states), by_link_end_type(times)
        partials = list()
        for role, position_partial in self.position_partials.items():
            partial = self.scaling.scaling_factor(role) @ position_partial.position_partial(states[role], times[role])
            partials.append((partial, times[role]))

        if self.light_time_partials:
            light_time_partial = sum(f(states, times) for f in self.light_time_partials)
            partial = self.scaling.light_time_partial_scaling() @ light_time_partial
            partials.append((partial, times[link_end_type(fixed_link_end)]))

        return partials


class ObservationBiasPartial(ObservationPartial):
    """Partial of an observation with respect to its constant additive bias"""

    def __init__(self, parameter_id, observation_size):
        super().__init__(parameter_id)
        self.observation_size = observation_size

    def __call__(self, states, times, fixed_link_end, current_observation=None):
        times = by_link_end_type(times)
        return [(np.eye(self.observation_size), times[link_end_type(fixed_link_end)])]


class RelativeObservationBiasPartial(ObservationBiasPartial):
    """Partial of an observation with respect to its constant relative bias, which is the observation itself"""

    def __call__(self, states, times, fixed_link_end, current_observation=None):
        if current_observation is None:
            raise ValueError(f"The current observation is needed to calculate partials for {self.parameter_id}")

        times = by_link_end_type(times)
        current_observation = np.asarray(current_observation, dtype=float).reshape(self.observation_size)
        return [(np.diag(current_observation), times[link_end_type(fixed_link_end)])]
