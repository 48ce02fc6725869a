"""Scaling of position partials to observation partials

Description:
------------

The partial derivative of an observation with respect to a parameter is computed by the chain rule, as the partial of
the observation with respect to the position of each link end, times the partial of that position with respect to the
parameter. The first factor depends only on the observable type and the link geometry, and is provided by the scaling
objects in this module.

One scaling object is shared by all observation partials of a link. It must be updated with the link geometry of the
current epoch, by calling :meth:`PositionPartialScaling.update`, before any of the partials are evaluated.

"""

# External library imports
import numpy as np

# Midgard imports
from midgard.math.constant import constant

# Odlink imports
from odlink.lib import enums
from odlink.lib import exceptions
from odlink.observation.link_ends import by_link_end_type, link_end_type


class PositionPartialScaling:
    """Base class for scaling of position partials to observation partials"""

    observation_size = None

    def __init__(self):
        self._scaling_factors = None
        self._light_time_partial_scaling = None

    def update(self, states, times, fixed_link_end, current_observation=None):
        """Update the scaling to the link geometry of the current epoch

        Args:
            states (Dict):               Inertial state (position, velocity) of each link end role.
            times (Dict):                Time at each link end role.
            fixed_link_end (String):     Role at which the observation time is fixed.
            current_observation (Array): The current value of the observation, if needed by the scaling.
        """
        raise NotImplementedError

    def scaling_factor(self, role):
        """Partial of the observation with respect to the position of the given link end role

        Returns:
            Numpy array: observation_size x 3 matrix, zeros if the role does not take part in the observable.
        """
        if self._scaling_factors is None:
            raise exceptions.ScalingNotUpdatedError(f"{type(self).__name__} used before it was updated")
        return self._scaling_factors.get(link_end_type(role), np.zeros((self.observation_size, 3)))

    def light_time_partial_scaling(self):
        """Partial of the observation with respect to the light time

        Returns:
            Numpy array: observation_size x 1 matrix.
        """
        if self._light_time_partial_scaling is None:
            raise exceptions.ScalingNotUpdatedError(f"{type(self).__name__} used before it was updated")
        return self._light_time_partial_scaling


def _position_velocity(state):
    state = np.asarray(state, dtype=float)
    velocity = state[3:6] if state.size >= 6 else np.zeros(3)
    return state[:3], velocity


class OneWayRangeScaling(PositionPartialScaling):
    """Scaling of position partials to one-way range partials

    The range partial with respect to the receiver position is the unit vector from transmitter to receiver, and the
    opposite for the transmitter position. Both are scaled by a factor accounting for the motion of the link end that
    is not fixed during the light time, see Montenbruck and Gill, Satellite Orbits, section 7.
    """

    observation_size = 1

    def update(self, states, times, fixed_link_end, current_observation=None):
        states = by_link_end_type(states)
        transmitter_position, transmitter_velocity = _position_velocity(states[enums.LinkEndType.transmitter])
        receiver_position, receiver_velocity = _position_velocity(states[enums.LinkEndType.receiver])

        range_vector = receiver_position - transmitter_position
        unit_vector = range_vector / np.linalg.norm(range_vector)

        is_receiver_fixed = link_end_type(fixed_link_end) is enums.LinkEndType.receiver
        moving_velocity = transmitter_velocity if is_receiver_fixed else receiver_velocity
        light_time_factor = 1 / (1 - unit_vector @ moving_velocity / constant.c)

        self._scaling_factors = {
            enums.LinkEndType.receiver: light_time_factor * unit_vector[None, :],
            enums.LinkEndType.transmitter: -light_time_factor * unit_vector[None, :],
        }
        self._light_time_partial_scaling = np.array([[light_time_factor * constant.c]])


class AngularPositionScaling(PositionPartialScaling):
    """Scaling of position partials to right ascension and declination partials

    The angles are those of the vector from the receiver to the transmitter. Moving a link end changes the light time,
    and thereby the position of the link end that is not fixed. The partials include this through the partial of the
    light time with respect to the link end positions, as for :class:`OneWayRangeScaling`.
    """

    observation_size = 2

    def update(self, states, times, fixed_link_end, current_observation=None):
        states = by_link_end_type(states)
        transmitter_position, transmitter_velocity = _position_velocity(states[enums.LinkEndType.transmitter])
        receiver_position, receiver_velocity = _position_velocity(states[enums.LinkEndType.receiver])

        x, y, z = transmitter_position - receiver_position
        horizontal_sq = x ** 2 + y ** 2
        distance_sq = horizontal_sq + z ** 2
        dangles_dposition = np.array(
            [
                [-y / horizontal_sq, x / horizontal_sq, 0],
                [
                    -x * z / (distance_sq * np.sqrt(horizontal_sq)),
                    -y * z / (distance_sq * np.sqrt(horizontal_sq)),
                    np.sqrt(horizontal_sq) / distance_sq,
                ],
            ]
        )

        unit_vector = (receiver_position - transmitter_position) / np.sqrt(distance_sq)
        is_receiver_fixed = link_end_type(fixed_link_end) is enums.LinkEndType.receiver
        moving_velocity = transmitter_velocity if is_receiver_fixed else receiver_velocity
        light_time_factor = 1 / (1 - unit_vector @ moving_velocity / constant.c)

        # Partial of the angles with respect to the light time, and of the light time with respect to the receiver
        dangles_dlight_time = -(dangles_dposition @ moving_velocity)[:, None]
        dlight_time_dreceiver = light_time_factor * unit_vector[None, :] / constant.c
        light_time_term = dangles_dlight_time @ dlight_time_dreceiver

        self._scaling_factors = {
            enums.LinkEndType.transmitter: dangles_dposition - light_time_term,
            enums.LinkEndType.receiver: -dangles_dposition + light_time_term,
        }
        self._light_time_partial_scaling = light_time_factor * dangles_dlight_time
