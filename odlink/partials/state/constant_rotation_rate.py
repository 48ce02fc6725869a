"""Partials of link end positions with respect to the rotation rate of a body

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials.state._cartesian import PositionPartialWrtRotationRate


@plugins.register
def constant_rotation_rate(link_end_id, bodies, target_body, parameter):
    if link_end_id.body != target_body or not link_end_id.reference_point:
        return None

    body = bodies[target_body]
    station_position = body.ground_station_position(link_end_id.reference_point)
    return PositionPartialWrtRotationRate(body.rotation_model, station_position)
