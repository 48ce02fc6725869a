"""Partials of link end positions with respect to the body-fixed position of a ground station

"""
# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.partials.state._cartesian import PositionPartialWrtGroundStationPosition


@plugins.register
def ground_station_position(link_end_id, bodies, target_body, parameter):
    if link_end_id.body != target_body or link_end_id.reference_point != parameter.secondary:
        return None

    return PositionPartialWrtGroundStationPosition(bodies[target_body].rotation_model)
