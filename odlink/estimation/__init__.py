"""Framework for estimation

Description:
------------

The estimatable parameters and the set (catalog) of parameters that are estimated. The estimator itself is not part
of odlink, it consumes the observation partials created by :mod:`odlink.partials.create`.

"""
