"""Definition of odlink-specific enumerations

Description:
------------

Custom enumerations used by odlink for structured names. The observable types and parameter types are closed tags,
the behaviour attached to them lives in the plug-in packages :mod:`odlink.observation.observables`,
:mod:`odlink.partials.state` and :mod:`odlink.partials.light_time`.

"""

# Standard library imports
import colorama
import enum

# Make Midgard-enums functions available
from midgard.collections.enums import get_enum, get_value, register_enum  # noqa

# Odlink imports
from odlink.lib import exceptions


#
# ENUMS
#
@register_enum("log_level")
class LogLevel(int, enum.Enum):
    """Levels used when deciding how much log output to show"""

    all = enum.auto()
    debug = enum.auto()
    time = enum.auto()
    dev = enum.auto()
    info = enum.auto()
    out = enum.auto()
    warn = enum.auto()
    check = enum.auto()
    error = enum.auto()
    fatal = enum.auto()
    none = enum.auto()


@register_enum("log_color")
class LogColor(str, enum.Enum):
    """Colors used when logging"""

    dev = colorama.Fore.BLUE
    time = colorama.Fore.WHITE
    out = colorama.Style.BRIGHT
    check = colorama.Style.BRIGHT + colorama.Fore.YELLOW
    warn = colorama.Fore.YELLOW
    error = colorama.Fore.RED
    fatal = colorama.Style.BRIGHT + colorama.Fore.RED


@register_enum("link_end_type")
class LinkEndType(int, enum.Enum):
    """Roles of the participants in a tracking link, in the order a signal passes them"""

    transmitter = enum.auto()
    reflector = enum.auto()
    receiver = enum.auto()
    observed_body = enum.auto()


@register_enum("observable_type")
class ObservableType(str, enum.Enum):
    """Kinds of tracking observables

    The value is the name of the plug-in in :mod:`odlink.observation.observables` describing the observable.
    """

    one_way_range = "one_way_range"
    one_way_doppler = "one_way_doppler"
    angular_position = "angular_position"


@register_enum("parameter_type")
class ParameterType(str, enum.Enum):
    """Kinds of estimatable parameters"""

    initial_body_state = "initial_body_state"
    arc_wise_initial_body_state = "arc_wise_initial_body_state"
    initial_rotational_body_state = "initial_rotational_body_state"
    gravitational_parameter = "gravitational_parameter"
    ppn_parameter_gamma = "ppn_parameter_gamma"
    constant_rotation_rate = "constant_rotation_rate"
    ground_station_position = "ground_station_position"
    constant_additive_observation_bias = "constant_additive_observation_bias"
    constant_relative_observation_bias = "constant_relative_observation_bias"


@register_enum("light_time_correction_type")
class LightTimeCorrectionType(str, enum.Enum):
    """Kinds of corrections to the light time of a signal path"""

    first_order_relativistic = "first_order_relativistic"
    tabulated_troposphere = "tabulated_troposphere"
    tabulated_ionosphere = "tabulated_ionosphere"


def to_enum(name, value):
    """Enumeration member of a value given either by name or as an enumeration member

    Args:
        name (String):   Name of enumeration.
        value:           Name of member, or the member itself.

    Returns:
        Enum: Member of the enumeration.
    """
    member_name = str(getattr(value, "name", value))
    try:
        return get_enum(name)[member_name]
    except KeyError:
        valid_values = ", ".join(m.name for m in get_enum(name))
        raise exceptions.UnknownEnumError(
            f"Value {member_name!r} is not valid for a {name}-enumeration. Valid values are {valid_values}"
        ) from None
