"""Partials of link end positions with respect to the arc-wise translational state of a body

Description:
------------

As for :mod:`odlink.partials.state.initial_body_state`, but the partial is placed in the columns of the arc containing
the time of the link end.

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials.state._cartesian import PositionPartialWrtTranslationalState


@plugins.register
def arc_wise_initial_body_state(link_end_id, bodies, target_body, parameter):
    if link_end_id.body != target_body:
        return None

    return PositionPartialWrtTranslationalState(arc_start_times=parameter.arc_start_times)
