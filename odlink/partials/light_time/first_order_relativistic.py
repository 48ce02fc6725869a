"""Partials of the first order relativistic light-time correction

Description:
------------

The first order relativistic (Shapiro) delay caused by a body with gravitational parameter `GM` is

    dt = (1 + gamma) * GM / c**3 * ln((r_t + r_r + r_tr) / (r_t + r_r - r_tr))

where `r_t` and `r_r` are the distances from the body to transmitter and receiver, and `r_tr` the distance between
transmitter and receiver. The delay depends on the gravitational parameter of each perturbing body and on the PPN
parameter gamma.

References:
-----------

.. [1] Moyer, Theodore D., Formulation for Observed and Computed Values of Deep Space Network Data Types for
       Navigation, JPL Publication 00-7, 2000.

"""
# External library imports
import numpy as np

# Midgard imports
from midgard.dev import plugins
from midgard.math.constant import constant

# Odlink imports
from odlink.lib import enums
from odlink.observation.link_ends import by_link_end_type
from odlink.partials.light_time import LightTimeCorrectionPartial


@plugins.register
def first_order_relativistic(correction):
    return FirstOrderRelativisticPartial(correction)


class FirstOrderRelativisticPartial(LightTimeCorrectionPartial):
    def partial_function(self, parameter_id):
        if parameter_id.parameter_type is enums.ParameterType.gravitational_parameter:
            if parameter_id.body in self.correction.perturbing_bodies:
                return lambda states, times: self.wrt_gravitational_parameter(parameter_id.body, states, times)
        elif parameter_id.parameter_type is enums.ParameterType.ppn_parameter_gamma:
            return self.wrt_ppn_gamma

        return None

    def _log_factor(self, body, states, times):
        states, times = by_link_end_type(states), by_link_end_type(times)
        return self.correction.log_factor(
            body,
            states[enums.LinkEndType.transmitter],
            states[enums.LinkEndType.receiver],
            times[enums.LinkEndType.transmitter],
            times[enums.LinkEndType.receiver],
        )

    def wrt_gravitational_parameter(self, body, states, times):
        """Partial of the light-time correction with respect to the gravitational parameter of a perturbing body"""
        return np.array([[(1 + self.correction.ppn_gamma) / constant.c ** 3 * self._log_factor(body, states, times)]])

    def wrt_ppn_gamma(self, states, times):
        """Partial of the light-time correction with respect to the PPN parameter gamma"""
        bodies = self.correction.bodies
        return np.array(
            [
                [
                    sum(
                        bodies[b].gravitational_parameter / constant.c ** 3 * self._log_factor(b, states, times)
                        for b in self.correction.perturbing_bodies
                    )
                ]
            ]
        )
