"""Framework for partial derivatives of light-time corrections

Description:
------------

The partials of each type of light-time correction are created by a plug-in defined in a separate .py-file named
after the light-time correction type. The function inside the .py-file need to be decorated with the
:func:`~midgard.dev.plugins.register` decorator as follows::

    from midgard.dev import plugins

    @plugins.register
    def first_order_relativistic(correction):
        ...

The decorated function is called with the light-time correction, and should return a
:class:`LightTimeCorrectionPartial`. Corrections without a plug-in do not depend on any estimated parameter.

"""
# Standard library imports
from functools import lru_cache

# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.lib import log


@lru_cache()
def names():
    """List the names of the light-time correction types with partials"""
    return plugins.names(package_name=__name__)


class LightTimeCorrectionPartial:
    """Base class for partials of one light-time correction

    Args:
        correction (LightTimeCorrection):   The correction the partials are taken of.
    """

    def __init__(self, correction):
        self.correction = correction

    @property
    def correction_type(self):
        return self.correction.correction_type

    def partial_function(self, parameter_id):
        """Function computing the partial of the light time with respect to a parameter

        The returned function is called with the states and times of the link end roles, and returns the partial of
        the light time, in seconds, as a 1 x parameter size matrix.

        Args:
            parameter_id (ParameterId):   Identity of the parameter.

        Returns:
            Function: Partial function, or None if the correction does not depend on the parameter.
        """
        return None

    def __repr__(self):
        return f"{type(self).__name__}({self.correction!r})"


class LightTimeCorrectionPartialChain:
    """The additive light-time correction partials of one signal path"""

    def __init__(self, correction_partials=None):
        self.correction_partials = list(correction_partials or [])

    def partial_functions(self, parameter_id):
        """Partial functions of all corrections depending on the given parameter"""
        functions = [p.partial_function(parameter_id) for p in self.correction_partials]
        return [f for f in functions if f is not None]

    def __iter__(self):
        return iter(self.correction_partials)

    def __len__(self):
        return len(self.correction_partials)

    def __repr__(self):
        return f"{type(self).__name__}({self.correction_partials!r})"


def create_light_time_correction_partials(corrections):
    """Create the partials of a list of light-time corrections

    Args:
        corrections (List):   Light-time corrections of one signal path.

    Returns:
        List: Light-time correction partials, one for each correction with partials.
    """
    correction_partials = list()
    for correction in corrections:
        correction_name = correction.correction_type.name
        if correction_name not in names():
            log.warn(f"No partials defined for light-time correction {correction_name!r}, correction is ignored")
            continue

        correction_partial = plugins.call(package_name=__name__, plugin_name=correction_name, correction=correction)
        correction_partials.append(correction_partial)

    return correction_partials
