"""Partial derivatives of link end positions

Description:
------------

Each class gives the partial derivative of the inertial position of a link end with respect to one parameter, as a
3 x parameter size matrix evaluated at the state and time of the link end.

"""

# External library imports
import numpy as np

# Odlink imports
from odlink.environment.bodies import arc_index
from odlink.lib import rotation


class CartesianStatePartial:
    """Base class for partials of the position of a link end"""

    parameter_size = None

    def position_partial(self, state, time):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class PositionPartialWrtTranslationalState(CartesianStatePartial):
    """Partial of the position of a body with respect to its own (current) translational state

    For arc-wise states, the partial is placed in the columns of the arc containing the time.
    """

    def __init__(self, arc_start_times=None):
        self.arc_start_times = arc_start_times
        self.parameter_size = 6 if arc_start_times is None else 6 * len(arc_start_times)

    def position_partial(self, state, time):
        partial = np.zeros((3, self.parameter_size))
        start = 0 if self.arc_start_times is None else 6 * arc_index(self.arc_start_times, time)
        partial[:, start : start + 3] = np.eye(3)
        return partial


class PositionPartialWrtRotationalState(CartesianStatePartial):
    """Partial of the position of a point fixed on a body with respect to the rotational state of the body

    The rotational state is the attitude quaternion (w, x, y, z) followed by the angular velocity. The position does
    not depend on the angular velocity.
    """

    parameter_size = 7

    def __init__(self, rotation_model, body_fixed_position):
        self.rotation_model = rotation_model
        self.body_fixed_position = body_fixed_position

    def position_partial(self, state, time):
        dR_dq = rotation.dmatrix_dquaternion(self.rotation_model.quaternion(time))
        partial = np.zeros((3, self.parameter_size))
        partial[:, :4] = (dR_dq @ self.body_fixed_position).T
        return partial


class PositionPartialWrtGroundStationPosition(CartesianStatePartial):
    """Partial of the inertial position of a ground station with respect to its body-fixed position"""

    parameter_size = 3

    def __init__(self, rotation_model=None):
        self.rotation_model = rotation_model

    def position_partial(self, state, time):
        if self.rotation_model is None:
            return np.eye(3)
        return self.rotation_model.body_fixed_to_inertial(time)


class PositionPartialWrtRotationRate(CartesianStatePartial):
    """Partial of the inertial position of a ground station with respect to the rotation rate of its body"""

    parameter_size = 1

    def __init__(self, rotation_model, body_fixed_position):
        self.rotation_model = rotation_model
        self.body_fixed_position = body_fixed_position

    def position_partial(self, state, time):
        return (self.rotation_model.dbody_fixed_to_inertial_drate(time) @ self.body_fixed_position)[:, None]
