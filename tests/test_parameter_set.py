"""Test :mod:`odlink.estimation.parameter_set`

"""

# Third party imports
import numpy as np
import pytest

# Odlink imports
from odlink.estimation import parameters
from odlink.estimation.parameter_set import EstimatableParameterSet
from odlink.lib import exceptions
from odlink.observation.link_ends import LinkEnds


@pytest.fixture
def parameter_list(bodies):
    link_ends = LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS")
    return [
        parameters.GroundStationPosition(bodies["Earth"], "Wettzell"),
        parameters.GravitationalParameter(bodies["Earth"]),
        parameters.InitialTranslationalState("LAGEOS", np.arange(6.0)),
        parameters.ConstantObservationBias(link_ends, "angular_position", [1e-6, 2e-6]),
        parameters.InitialRotationalState("Earth", [1, 0, 0, 0, 0, 0, 7.292115e-5]),
    ]


def test_indices(parameter_list):
    parameter_set = EstimatableParameterSet(parameter_list)

    assert parameter_set.initial_state_size == 13
    assert parameter_set.size == 19
    assert parameter_set.parameter_indices() == [(0, 6), (6, 7), (13, 1), (14, 3), (17, 2)]
    assert list(parameter_set.double_parameters()) == [13]
    assert list(parameter_set.vector_parameters()) == [14, 17]
    assert parameter_set.index_of(parameter_list[0].identifier) == (14, 3)


def test_values(parameter_list, bodies):
    parameter_set = EstimatableParameterSet(parameter_list)
    values = parameter_set.values

    assert values[13] == bodies["Earth"].gravitational_parameter
    np.testing.assert_array_equal(values[17:], [1e-6, 2e-6])

    values[13] = 4.0e14
    values[:6] = 1.0
    parameter_set.set_values(values)

    assert bodies["Earth"].gravitational_parameter == 4.0e14
    np.testing.assert_array_equal(parameter_list[2].value, np.ones(6))


def test_duplicate_parameter(bodies):
    with pytest.raises(exceptions.DuplicateParameterError):
        EstimatableParameterSet(
            [parameters.GravitationalParameter(bodies["Sun"]), parameters.GravitationalParameter(bodies["Sun"])]
        )


def test_link_properties(parameter_list):
    assert parameter_list[3].is_link_property
    assert parameter_list[3].size == 2
    assert not parameter_list[0].is_link_property
    assert parameters.is_link_property("constant_relative_observation_bias")
