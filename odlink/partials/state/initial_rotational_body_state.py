"""Partials of link end positions with respect to the rotational state of a body

Description:
------------

Only points fixed on the body with a non-zero offset from its centre, i.e. ground stations, move when the body
rotates. The body must have a rotation model.

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials.state._cartesian import PositionPartialWrtRotationalState


@plugins.register
def initial_rotational_body_state(link_end_id, bodies, target_body, parameter):
    if link_end_id.body != target_body or not link_end_id.reference_point:
        return None

    body = bodies[target_body]
    if body.rotation_model is None:
        return None

    return PositionPartialWrtRotationalState(
        body.rotation_model, body.ground_station_position(link_end_id.reference_point)
    )
