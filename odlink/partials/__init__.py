"""Framework for partial derivatives of observations

Description:
------------

The observation partials are assembled by the functions in :mod:`odlink.partials.create`. The building blocks are

- :mod:`odlink.partials.scaling`:              Observation partials with respect to link end positions.
- :mod:`odlink.partials.state`:                Link end positions with respect to the estimated parameters.
- :mod:`odlink.partials.light_time`:           Light-time corrections with respect to the estimated parameters.
- :mod:`odlink.partials.observation_partial`:  Observation partials with respect to one estimated parameter.

"""
