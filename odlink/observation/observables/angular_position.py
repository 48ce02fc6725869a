"""Angular position

Description:
------------

Right ascension and declination, in radians, of the transmitter as seen from the receiver.

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials import scaling


@plugins.register
def observation_size():
    return 2


@plugins.register
def light_time_corrections(observation_model):
    return observation_model.light_time_corrections()


@plugins.register
def position_scaling(link_ends):
    return scaling.AngularPositionScaling()
