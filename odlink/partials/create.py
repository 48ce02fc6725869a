"""Create the observation partials of one or more links

Description:
------------

The observation partials of a link are created for each estimated parameter the observable of the link depends on.
They are returned as a :class:`SingleLinkPartialSet`, which holds a dictionary of partials keyed by the
`(index, size)` coordinates of the parameter in the full parameter vector, and the position partial scaling shared by
all the partials.

Parameters the link does not depend on are left out of the dictionary. The coordinates are still those of the full
parameter vector, so partials of different links can be added directly into the rows of a common Jacobian.

Example:
--------

    >>> link_ends = LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS")
    >>> partial_set = create_single_link_partials(
    ...     link_ends, "one_way_range", BodyStatePartialProvider(bodies), parameter_set
    ... )
    >>> sorted(partial_set.partials)
    [(0, 6)]

"""
# Standard library imports
from collections import namedtuple
from typing import Any, Dict, List, Optional

# Odlink imports
from odlink.estimation import parameters
from odlink.estimation.parameter_set import EstimatableParameterSet
from odlink.lib import config
from odlink.lib import enums
from odlink.lib import exceptions
from odlink.lib import log
from odlink.observation import observables
from odlink.observation.link_ends import LinkEnds
from odlink.partials import light_time
from odlink.partials.observation_partial import ObservationBiasPartial
from odlink.partials.observation_partial import OneWayLinkObservationPartial
from odlink.partials.observation_partial import RelativeObservationBiasPartial
from odlink.partials.scaling import PositionPartialScaling
from odlink.partials.state import StatePartialProvider

# Partials and position partial scaling of a single link
SingleLinkPartialSet = namedtuple("SingleLinkPartialSet", ["partials", "scaling"])

# Number of elements in the full parameter vector taken by one rotational state
ROTATIONAL_STATE_SIZE = 7

_TRANSLATIONAL_STATE_TYPES = (
    enums.ParameterType.initial_body_state,
    enums.ParameterType.arc_wise_initial_body_state,
)


def light_time_corrections_list(observation_models: Dict[LinkEnds, Any]) -> Dict[LinkEnds, List[List[Any]]]:
    """Light-time corrections of a group of observation models sharing the same observable type

    Args:
        observation_models (Dict):   Observation model for each set of link ends.

    Returns:
        Dict: For each set of link ends with light-time corrections, a list of corrections for each signal path.
    """
    corrections_list = dict()
    if not observation_models:
        return corrections_list

    observable_type = next(iter(observation_models.values())).observable_type
    for link_ends, observation_model in observation_models.items():
        if observation_model.observable_type is not observable_type:
            raise exceptions.InconsistentObservableTypeError(
                f"Observable type of {link_ends} is {observation_model.observable_type.name}, expected "
                f"{observable_type.name} as for the other link ends"
            )

        path_corrections = [c for c in observables.light_time_corrections(observation_model) if c]
        if path_corrections:
            corrections_list[link_ends] = path_corrections

    return corrections_list


def create_position_scaling(
    link_ends: LinkEnds, observable_type: str, observation_size: Optional[int] = None
) -> PositionPartialScaling:
    """Create the position partial scaling object of an observable type

    Args:
        link_ends (LinkEnds):           Link ends of the observable.
        observable_type (String):       Name of observable type.
        observation_size (Int):         Size of observation, default is the size of the observable type.

    Returns:
        PositionPartialScaling: New scaling object.
    """
    observable_type = enums.to_enum("observable_type", observable_type)
    observable_size = observables.observation_size(observable_type)
    observation_size = observable_size if observation_size is None else observation_size

    scaling = observables.position_scaling(observable_type, link_ends) if observation_size == observable_size else None
    if scaling is None:
        raise exceptions.UnsupportedObservableForSizeError(
            f"No position partial scaling for observable {observable_type.name} of size {observation_size} "
            f"for {link_ends}"
        )

    return scaling


def create_observation_partial_wrt_body_position(
    link_ends, state_partial_provider, body, scaling, light_time_chain, parameter=None
):
    """Create the observation partial with respect to the translational state of a body

    Returns:
        OneWayLinkObservationPartial: Observation partial, or None if the link does not depend on the body.
    """
    position_partials = state_partial_provider.state_partials_wrt_body_position(link_ends, body, parameter)
    if not position_partials:
        return None

    if parameter is None:
        parameter_id = parameters.ParameterId(enums.ParameterType.initial_body_state, body, "")
    else:
        parameter_id = parameter.identifier
    return OneWayLinkObservationPartial(
        scaling, position_partials, parameter_id, light_time_chain.partial_functions(parameter_id)
    )


def create_observation_partial_wrt_body_rotational_state(
    link_ends, state_partial_provider, body, scaling, light_time_chain, parameter=None
):
    """Create the observation partial with respect to the rotational state of a body

    Returns:
        OneWayLinkObservationPartial: Observation partial, or None if the link does not depend on the body.
    """
    position_partials = state_partial_provider.state_partials_wrt_body_rotational_state(link_ends, body, parameter)
    if not position_partials:
        return None

    if parameter is None:
        parameter_id = parameters.ParameterId(enums.ParameterType.initial_rotational_body_state, body, "")
    else:
        parameter_id = parameter.identifier
    return OneWayLinkObservationPartial(
        scaling, position_partials, parameter_id, light_time_chain.partial_functions(parameter_id)
    )


def create_observation_partial_wrt_parameter(link_ends, state_partial_provider, parameter, scaling, light_time_chain):
    """Create the observation partial with respect to a scalar or vector parameter

    The observation depends on the parameter if the position of any link end, or any of the light-time corrections,
    depends on it.

    Returns:
        OneWayLinkObservationPartial: Observation partial, or None if the link does not depend on the parameter.
    """
    position_partials = state_partial_provider.state_partials_wrt_parameter(link_ends, parameter)
    light_time_partials = light_time_chain.partial_functions(parameter.identifier)
    if not (position_partials or light_time_partials):
        return None

    return OneWayLinkObservationPartial(scaling, position_partials, parameter.identifier, light_time_partials)


def create_observation_partial_wrt_link_property(link_ends, observable_type, parameter, use_bias_partials=True):
    """Create the observation partial with respect to a property of the observable and link ends, e.g. a bias

    Returns:
        ObservationBiasPartial: Observation partial, or None if the parameter belongs to another observable or link.
    """
    if not use_bias_partials:
        return None
    if parameter.link_ends != link_ends or parameter.observable_type is not observable_type:
        return None

    if parameter.parameter_type is enums.ParameterType.constant_additive_observation_bias:
        return ObservationBiasPartial(parameter.identifier, parameter.size)
    elif parameter.parameter_type is enums.ParameterType.constant_relative_observation_bias:
        return RelativeObservationBiasPartial(parameter.identifier, parameter.size)

    raise exceptions.UnrecognizedParameterKindError(
        f"Parameter {parameter.identifier} is not a recognized link property"
    )


def create_single_link_partials(
    link_ends: LinkEnds,
    observable_type: str,
    state_partial_provider: StatePartialProvider,
    parameter_set: EstimatableParameterSet,
    light_time_corrections: Optional[List[Any]] = None,
    use_bias_partials: Optional[bool] = None,
) -> SingleLinkPartialSet:
    """Create the observation partials of all estimated parameters for a single set of link ends

    Args:
        link_ends (LinkEnds):                        Link ends of the observable.
        observable_type (String):                    Name of observable type.
        state_partial_provider (StatePartialProvider): Partials of the link end positions.
        parameter_set (EstimatableParameterSet):     The estimated parameters.
        light_time_corrections (List):               Light-time corrections of the signal path of the link.
        use_bias_partials (Bool):                    Create partials with respect to observation biases, default
                                                     from config.

    Returns:
        SingleLinkPartialSet: Partials keyed by (index, size) in the parameter vector, and the shared scaling.
    """
    link_ends = link_ends if isinstance(link_ends, LinkEnds) else LinkEnds(link_ends)
    observable_type = enums.to_enum("observable_type", observable_type)
    if use_bias_partials is None:
        use_bias_partials = config.odlink.partials.use_bias_partials.bool

    # Light-time correction partials and position scaling are shared by all partials of the link
    light_time_chain = light_time.LightTimeCorrectionPartialChain()
    if light_time_corrections and config.odlink.partials.light_time_partials.bool:
        light_time_chain = light_time.LightTimeCorrectionPartialChain(
            light_time.create_light_time_correction_partials(light_time_corrections)
        )
    scaling = create_position_scaling(link_ends, observable_type)

    observation_partials = dict()

    # Initial states: the offset runs through the full initial state vector, also past states without partials
    offset = 0
    for parameter in parameter_set.initial_state_parameters():
        if parameter.parameter_type in _TRANSLATIONAL_STATE_TYPES:
            block_size = parameter.size
            partial = create_observation_partial_wrt_body_position(
                link_ends, state_partial_provider, parameter.body, scaling, light_time_chain, parameter
            )
        elif parameter.parameter_type is enums.ParameterType.initial_rotational_body_state:
            block_size = ROTATIONAL_STATE_SIZE
            partial = create_observation_partial_wrt_body_rotational_state(
                link_ends, state_partial_provider, parameter.body, scaling, light_time_chain, parameter
            )
        else:
            raise exceptions.UnrecognizedParameterKindError(
                f"Error when making observation partials, could not identify initial state parameter "
                f"{parameter.identifier}"
            )

        if partial is not None:
            observation_partials[(offset, block_size)] = partial
        offset += block_size

    # Scalar parameters
    for index, parameter in parameter_set.double_parameters().items():
        partial = create_observation_partial_wrt_parameter(
            link_ends, state_partial_provider, parameter, scaling, light_time_chain
        )
        if partial is not None:
            observation_partials[(index, 1)] = partial

    # Vector parameters
    for index, parameter in parameter_set.vector_parameters().items():
        if parameter.is_link_property:
            partial = create_observation_partial_wrt_link_property(
                link_ends, observable_type, parameter, use_bias_partials
            )
        else:
            partial = create_observation_partial_wrt_parameter(
                link_ends, state_partial_provider, parameter, scaling, light_time_chain
            )
        if partial is not None:
            observation_partials[(index, parameter.size)] = partial

    for (index, size), partial in sorted(observation_partials.items()):
        log.debug(f"Observation partial for {partial.parameter_id} at ({index}, {size}) for {link_ends}")
    log.info(
        f"Created {observable_type.name} partials for {len(observation_partials)} of {len(parameter_set)} "
        f"parameters for {link_ends}"
    )

    return SingleLinkPartialSet(observation_partials, scaling)


def create_single_link_partials_list(
    link_ends_list: List[LinkEnds],
    observable_type: str,
    state_partial_provider: StatePartialProvider,
    parameter_set: EstimatableParameterSet,
    light_time_corrections: Optional[Dict[LinkEnds, List[List[Any]]]] = None,
    use_bias_partials: Optional[bool] = None,
) -> Dict[LinkEnds, SingleLinkPartialSet]:
    """Create the observation partials of all estimated parameters for a list of link ends

    Args:
        link_ends_list (List):                       Link ends to create partials for.
        observable_type (String):                    Name of observable type, the same for all link ends.
        state_partial_provider (StatePartialProvider): Partials of the link end positions.
        parameter_set (EstimatableParameterSet):     The estimated parameters.
        light_time_corrections (Dict):               For each link ends, light-time corrections for each signal path.
        use_bias_partials (Bool):                    Create partials with respect to observation biases.

    Returns:
        Dict: SingleLinkPartialSet for each set of link ends.
    """
    light_time_corrections = dict() if light_time_corrections is None else light_time_corrections

    partial_sets = dict()
    for link_ends in link_ends_list:
        link_ends = link_ends if isinstance(link_ends, LinkEnds) else LinkEnds(link_ends)
        path_corrections = light_time_corrections.get(link_ends, [])
        if len(path_corrections) > 1:
            # TODO: Find out whether multiple signal paths of one link should be combined, only the first is used
            log.warn(
                f"Light-time corrections for {len(path_corrections)} signal paths found for {link_ends}, "
                f"using only the first"
            )
        single_link_corrections = path_corrections[0] if path_corrections else []

        partial_sets[link_ends] = create_single_link_partials(
            link_ends,
            observable_type,
            state_partial_provider,
            parameter_set,
            light_time_corrections=single_link_corrections,
            use_bias_partials=use_bias_partials,
        )

    return partial_sets


def create_single_link_partials_from_models(
    observation_models: Dict[LinkEnds, Any],
    state_partial_provider: StatePartialProvider,
    parameter_set: EstimatableParameterSet,
    use_bias_partials: Optional[bool] = None,
) -> Dict[LinkEnds, SingleLinkPartialSet]:
    """Create the observation partials of all estimated parameters for a group of observation models

    The link ends, observable type and light-time corrections are taken from the observation models, which must all
    be of the same observable type.

    Args:
        observation_models (Dict):                   Observation model for each set of link ends.
        state_partial_provider (StatePartialProvider): Partials of the link end positions.
        parameter_set (EstimatableParameterSet):     The estimated parameters.
        use_bias_partials (Bool):                    Create partials with respect to observation biases.

    Returns:
        Dict: SingleLinkPartialSet for each set of link ends.
    """
    if not observation_models:
        return dict()

    observable_type = None
    for link_ends, observation_model in observation_models.items():
        if observable_type is None:
            observable_type = observation_model.observable_type
        elif observation_model.observable_type is not observable_type:
            raise exceptions.InconsistentObservableTypeError(
                f"Error when creating single link observation partials, observable type of {link_ends} is "
                f"{observation_model.observable_type.name}, not {observable_type.name}"
            )

    light_time_corrections = light_time_corrections_list(observation_models)
    return create_single_link_partials_list(
        list(observation_models),
        observable_type,
        state_partial_provider,
        parameter_set,
        light_time_corrections=light_time_corrections,
        use_bias_partials=use_bias_partials,
    )
