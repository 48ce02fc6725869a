"""One-way range

Description:
------------

Distance travelled by a signal from the transmitter to the receiver, in meters.

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials import scaling


@plugins.register
def observation_size():
    return 1


@plugins.register
def light_time_corrections(observation_model):
    return observation_model.light_time_corrections()


@plugins.register
def position_scaling(link_ends):
    return scaling.OneWayRangeScaling()
