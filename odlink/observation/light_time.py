"""Light-time corrections of a signal path

Description:
------------

The light time of a signal between transmitter and receiver is the geometric travel time plus a number of additive
corrections. This module only holds what is needed to set up partial derivatives of the corrections, the light-time
solution itself is computed elsewhere.

"""

# External library imports
import numpy as np

# Midgard imports
from midgard.math.constant import constant

# Odlink imports
from odlink.lib import enums


class LightTimeCorrection:
    """Base class for additive light-time corrections"""

    correction_type = None

    def __repr__(self):
        return f"{type(self).__name__}({self.correction_type.name})"


class FirstOrderRelativisticCorrection(LightTimeCorrection):
    """First order relativistic (Shapiro) delay of the signal path due to a set of perturbing bodies

    Args:
        bodies (SystemOfBodies):        Bodies, providing gravitational parameters and ephemerides.
        perturbing_bodies (List):       Names of the bodies causing the delay.
        ppn_gamma (Float):              PPN parameter gamma.
    """

    correction_type = enums.LightTimeCorrectionType.first_order_relativistic

    def __init__(self, bodies, perturbing_bodies, ppn_gamma=1.0):
        self.bodies = bodies
        self.perturbing_bodies = list(perturbing_bodies)
        self.ppn_gamma = ppn_gamma

    def log_factor(self, body, transmitter_state, receiver_state, transmission_time, reception_time):
        """Logarithmic distance term of the delay caused by a single body

        The position of the perturbing body is taken at the mid-point between transmission and reception.
        """
        body_position = self.bodies[body].state((transmission_time + reception_time) / 2)[:3]
        transmitter_distance = np.linalg.norm(transmitter_state[:3] - body_position)
        receiver_distance = np.linalg.norm(receiver_state[:3] - body_position)
        link_distance = np.linalg.norm(receiver_state[:3] - transmitter_state[:3])
        return np.log(
            (transmitter_distance + receiver_distance + link_distance)
            / (transmitter_distance + receiver_distance - link_distance)
        )

    def correction(self, transmitter_state, receiver_state, transmission_time, reception_time):
        """Light-time correction in seconds"""
        args = (transmitter_state, receiver_state, transmission_time, reception_time)
        return sum(
            (1 + self.ppn_gamma) * self.bodies[b].gravitational_parameter / constant.c ** 3 * self.log_factor(b, *args)
            for b in self.perturbing_bodies
        )

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(self.perturbing_bodies)})"


class TabulatedCorrection(LightTimeCorrection):
    """Correction interpolated in a table, e.g. tropospheric or ionospheric delays, with no estimatable parameters

    Args:
        correction_type (String):   Name of light-time correction type.
        times (Array):              Epochs of the tabulated corrections.
        values (Array):             Tabulated corrections in seconds.
    """

    def __init__(self, correction_type, times, values):
        self.correction_type = enums.to_enum("light_time_correction_type", correction_type)
        self.times = np.asarray(times, dtype=float)
        self.values = np.asarray(values, dtype=float)

    def correction(self, transmitter_state, receiver_state, transmission_time, reception_time):
        return np.interp(reception_time, self.times, self.values)


class LightTimeCalculator:
    """The signal path between one transmitter and one receiver, and the corrections to its light time"""

    def __init__(self, transmitter, receiver, corrections=None):
        self.transmitter = transmitter
        self.receiver = receiver
        self.corrections = list(corrections or [])

    def total_correction(self, transmitter_state, receiver_state, transmission_time, reception_time):
        args = (transmitter_state, receiver_state, transmission_time, reception_time)
        return sum(c.correction(*args) for c in self.corrections)
