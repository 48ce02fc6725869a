"""Test :mod:`odlink.observation.link_ends`

"""

# Third party imports
import pytest

# Odlink imports
from odlink.lib import enums
from odlink.lib import exceptions
from odlink.observation.link_ends import LinkEndId, LinkEnds


def test_link_ends_compare_by_content():
    link_ends = LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS")
    same_link_ends = LinkEnds({enums.LinkEndType.receiver: LinkEndId("LAGEOS"), "transmitter": ("Earth", "Wettzell")})

    assert link_ends == same_link_ends
    assert hash(link_ends) == hash(same_link_ends)
    assert {link_ends: 1}[same_link_ends] == 1


def test_link_ends_differ_by_reference_point():
    assert LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS") != LinkEnds(
        transmitter="Earth", receiver="LAGEOS"
    )


def test_link_ends_lookup():
    link_ends = LinkEnds(receiver="LAGEOS", transmitter=("Earth", "Wettzell"))

    assert list(link_ends) == [enums.LinkEndType.transmitter, enums.LinkEndType.receiver]
    assert link_ends["transmitter"] == LinkEndId("Earth", "Wettzell")
    assert link_ends[enums.LinkEndType.receiver].reference_point == ""
    assert link_ends.roles_of_body("Earth") == [enums.LinkEndType.transmitter]
    with pytest.raises(KeyError):
        link_ends["reflector"]


def test_unknown_role():
    with pytest.raises(exceptions.UnknownEnumError):
        LinkEnds(sender="Earth")
