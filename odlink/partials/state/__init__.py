"""Framework for partial derivatives of link end positions

Description:
------------

The partial derivatives of the position of a link end with respect to a parameter are created by plug-ins, one for
each parameter type that may change the position of a link end. Each plug-in should be defined in a separate .py-file
named after the parameter type, with a function decorated with the :func:`~midgard.dev.plugins.register` decorator
as follows::

    from midgard.dev import plugins

    @plugins.register
    def ground_station_position(link_end_id, bodies, target_body, parameter):
        ...

The decorated function is called once for each link end, and should return a
:class:`~odlink.partials.state._cartesian.CartesianStatePartial`, or None if the position of the link end does not
depend on the parameter. Parameter types without a plug-in (e.g. gravitational parameters) do not change the position
of any link end.

"""
# Standard library imports
from functools import lru_cache

# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.lib import enums
from odlink.lib import log


@lru_cache()
def names():
    """List the names of the parameter types with state partial plug-ins"""
    return plugins.names(package_name=__name__)


class StatePartialProvider:
    """Partials of the positions of the link ends with respect to parameters

    All methods return a dictionary with a partial for each link end role that depends on the parameter. An empty
    dictionary means that the link does not depend on the parameter.
    """

    def state_partials_wrt_body_position(self, link_ends, body, parameter=None):
        """Partials with respect to the translational state of a body"""
        raise NotImplementedError

    def state_partials_wrt_body_rotational_state(self, link_ends, body, parameter=None):
        """Partials with respect to the rotational state of a body"""
        raise NotImplementedError

    def state_partials_wrt_parameter(self, link_ends, parameter):
        """Partials with respect to any other parameter"""
        raise NotImplementedError


class BodyStatePartialProvider(StatePartialProvider):
    """State partials of link ends on the bodies in a SystemOfBodies, created by the plug-ins in this package

    Args:
        bodies (SystemOfBodies):   Bodies taking part in the links.
    """

    def __init__(self, bodies):
        self.bodies = bodies

    def state_partials_wrt_body_position(self, link_ends, body, parameter=None):
        partial_type = enums.ParameterType.initial_body_state if parameter is None else parameter.parameter_type
        return self._state_partials(link_ends, partial_type, body, parameter)

    def state_partials_wrt_body_rotational_state(self, link_ends, body, parameter=None):
        return self._state_partials(link_ends, enums.ParameterType.initial_rotational_body_state, body, parameter)

    def state_partials_wrt_parameter(self, link_ends, parameter):
        return self._state_partials(link_ends, parameter.parameter_type, parameter.body, parameter)

    def _state_partials(self, link_ends, partial_type, target_body, parameter):
        if partial_type.name not in names():
            return dict()

        partials = dict()
        for role, link_end_id in link_ends.items():
            partial = plugins.call(
                package_name=__name__,
                plugin_name=partial_type.name,
                link_end_id=link_end_id,
                bodies=self.bodies,
                target_body=target_body,
                parameter=parameter,
            )
            if partial is not None:
                log.debug(f"Position of {role.name} {link_end_id} depends on {partial_type.name} of {target_body}")
                partials[role] = partial
        return partials
