"""One-way Doppler

Description:
------------

Ratio of received to transmitted frequency, minus one. Partial derivatives need velocity partials of the link ends,
which are not available, so no position partial scaling is defined.

"""
# Midgard imports
from midgard.dev import plugins


@plugins.register
def observation_size():
    return 1


@plugins.register
def light_time_corrections(observation_model):
    return observation_model.light_time_corrections()
