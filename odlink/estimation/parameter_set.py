"""The set of estimated parameters

Description:
------------

The parameter set orders the estimated parameters and assigns each of them a position in the full parameter vector:

- Initial state parameters first, in the order they are given, as one contiguous block.
- Then each scalar (double) parameter.
- Then each vector parameter.

Within each group the order of the input list is kept. The index of a scalar or vector parameter is stable for the
lifetime of the set, and is the key used for its observation partials.

Example:
--------

    >>> parameter_set = EstimatableParameterSet([initial_state, gravitational_parameter, range_bias])
    >>> parameter_set.parameter_indices()
    [(0, 6), (6, 1), (7, 1)]

"""
# Standard library imports
from typing import Dict, List, Tuple

# External library imports
import numpy as np

# Odlink imports
from odlink.estimation import parameters
from odlink.lib import exceptions
from odlink.lib import log


class EstimatableParameterSet:
    """Ordered catalog of the estimated parameters

    Args:
        estimated_parameters (List):   The estimated parameters, in any order.
    """

    def __init__(self, estimated_parameters: List[parameters.EstimatableParameter]) -> None:
        self._initial_state_parameters = list()
        self._double_parameters = dict()
        self._vector_parameters = dict()

        identifiers = set()
        for parameter in estimated_parameters:
            if parameter.identifier in identifiers:
                raise exceptions.DuplicateParameterError(f"Parameter {parameter.identifier} is estimated twice")
            identifiers.add(parameter.identifier)

        initial_states = [p for p in estimated_parameters if isinstance(p, parameters.InitialStateParameter)]
        doubles = [p for p in estimated_parameters if isinstance(p, parameters.DoubleParameter)]
        vectors = [p for p in estimated_parameters if isinstance(p, parameters.VectorParameter)]
        unknown = [p for p in estimated_parameters if p not in initial_states + doubles + vectors]
        if unknown:
            raise exceptions.UnrecognizedParameterKindError(
                f"Parameters {', '.join(str(p.identifier) for p in unknown)} are not initial state, scalar or vector "
                f"parameters"
            )

        self._initial_state_parameters = initial_states
        self.initial_state_size = sum(p.size for p in initial_states)

        index = self.initial_state_size
        for parameter in doubles:
            self._double_parameters[index] = parameter
            index += 1
        for parameter in vectors:
            self._vector_parameters[index] = parameter
            index += parameter.size
        self.size = index

        log.debug(
            f"Estimating {len(initial_states)} initial states, {len(doubles)} scalar and {len(vectors)} vector "
            f"parameters, {self.size} values in total"
        )

    def initial_state_parameters(self) -> List[parameters.InitialStateParameter]:
        """Initial state parameters in catalog order"""
        return list(self._initial_state_parameters)

    def double_parameters(self) -> Dict[int, parameters.DoubleParameter]:
        """Scalar parameters keyed by their index in the full parameter vector"""
        return dict(self._double_parameters)

    def vector_parameters(self) -> Dict[int, parameters.VectorParameter]:
        """Vector parameters keyed by their start index in the full parameter vector"""
        return dict(self._vector_parameters)

    def __iter__(self):
        yield from self._initial_state_parameters
        yield from self._double_parameters.values()
        yield from self._vector_parameters.values()

    def __len__(self):
        return len(self._initial_state_parameters) + len(self._double_parameters) + len(self._vector_parameters)

    def parameter_indices(self) -> List[Tuple[int, int]]:
        """Start index and size of each parameter in the full parameter vector, in catalog order"""
        indices = list()
        index = 0
        for parameter in self._initial_state_parameters:
            indices.append((index, parameter.size))
            index += parameter.size
        indices.extend((idx, 1) for idx in self._double_parameters)
        indices.extend((idx, p.size) for idx, p in self._vector_parameters.items())
        return indices

    def index_of(self, identifier: parameters.ParameterId) -> Tuple[int, int]:
        """Start index and size of the parameter with the given identity"""
        for parameter, (index, size) in zip(self, self.parameter_indices()):
            if parameter.identifier == identifier:
                return index, size
        raise KeyError(identifier)

    @property
    def values(self) -> np.ndarray:
        """The full parameter vector"""
        values = np.zeros(self.size)
        for parameter, (index, size) in zip(self, self.parameter_indices()):
            values[index : index + size] = parameter.value
        return values

    def set_values(self, values: np.ndarray) -> None:
        """Update all parameters from the full parameter vector"""
        values = np.asarray(values, dtype=float)
        if values.size != self.size:
            raise ValueError(f"Parameter vector must have {self.size} elements, not {values.size}")

        for parameter, (index, size) in zip(self, self.parameter_indices()):
            if isinstance(parameter, parameters.DoubleParameter):
                parameter.value = values[index]
            else:
                parameter.value = values[index : index + size]

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(str(p.identifier) for p in self)})"
