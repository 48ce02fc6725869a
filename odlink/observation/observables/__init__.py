"""Framework for describing observable types

Description:
------------

Each observable type should be defined in a separate .py-file named after the observable type. The functions inside
the .py-file describing the observable need to be decorated with the :func:`~midgard.dev.plugins.register` decorator
as follows::

    from midgard.dev import plugins

    @plugins.register
    def observation_size():
        return 1

    @plugins.register
    def light_time_corrections(observation_model):
        ...

    @plugins.register
    def position_scaling(link_ends):
        ...

The `observation_size` and `light_time_corrections` parts are required. The `position_scaling` part is optional, an
observable without it can not be used to create partial derivatives. Adding a new observable type means adding a new
plug-in file (and its name to the `observable_type` enumeration).

"""
# Standard library imports
from functools import lru_cache

# Midgard imports
from midgard.dev import plugins

# Odlink imports
from odlink.lib import exceptions
from odlink.lib import log


@lru_cache()
def names():
    """List the names of the available observable types

    Returns:
        List: List of strings with the names of the available observable types
    """
    return plugins.names(package_name=__name__)


def _plugin_name(observable_type):
    """Name of the plug-in describing an observable type, raise an error if it does not exist"""
    plugin_name = str(getattr(observable_type, "name", observable_type))
    if plugin_name not in names():
        raise exceptions.UnrecognizedObservableTypeError(
            f"Observable type {plugin_name!r} is not recognized. Use one of {', '.join(names())}"
        )
    return plugin_name


def observation_size(observable_type):
    """Number of elements in one observation of the given type"""
    return plugins.call(package_name=__name__, plugin_name=_plugin_name(observable_type), part="observation_size")


def light_time_corrections(observation_model):
    """Light-time corrections of each signal path of an observation model

    Returns:
        List: One list of light-time corrections for each signal path.
    """
    plugin_name = _plugin_name(observation_model.observable_type)
    return plugins.call(
        package_name=__name__,
        plugin_name=plugin_name,
        part="light_time_corrections",
        observation_model=observation_model,
    )


def has_position_scaling(observable_type):
    plugin_name = _plugin_name(observable_type)
    return "position_scaling" in plugins.parts(package_name=__name__, plugin_name=plugin_name)


def position_scaling(observable_type, link_ends):
    """Create the position partial scaling object of an observable type

    Returns:
        PositionPartialScaling: New scaling object, or None if the observable type does not define one.
    """
    plugin_name = _plugin_name(observable_type)
    if not has_position_scaling(plugin_name):
        log.debug(f"No position partial scaling defined for {plugin_name}")
        return None

    return plugins.call(package_name=__name__, plugin_name=plugin_name, part="position_scaling", link_ends=link_ends)
