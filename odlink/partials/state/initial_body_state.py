"""Partials of link end positions with respect to the translational state of a body

Description:
------------

The position of a body, and of any ground station on it, moves one to one with the position of the body.

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials.state._cartesian import PositionPartialWrtTranslationalState


@plugins.register
def initial_body_state(link_end_id, bodies, target_body, parameter):
    if link_end_id.body != target_body:
        return None

    return PositionPartialWrtTranslationalState()
