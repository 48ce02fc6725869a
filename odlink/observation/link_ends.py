"""Identity of a tracking geometry

Description:
------------

A :class:`LinkEnds` object maps the roles in a tracking link (transmitter, receiver, ...) to the participants taking
those roles. Each participant is a :class:`LinkEndId`, a body and optionally a reference point (typically a ground
station) on that body. Link ends are immutable and compare by content, so they can be used as keys in dictionaries.

Example:
--------

    >>> link_ends = LinkEnds(transmitter=("Earth", "Wettzell"), receiver="LAGEOS")
    >>> link_ends["transmitter"]
    LinkEndId(body='Earth', reference_point='Wettzell')
    >>> list(link_ends)
    [<LinkEndType.transmitter: 1>, <LinkEndType.receiver: 3>]

"""

# Standard library imports
from collections import abc
from collections import namedtuple

# Odlink imports
from odlink.lib import enums


def link_end_type(role):
    """The link end type enumeration of a role, given either by name or as an enumeration"""
    return enums.to_enum("link_end_type", role)


def by_link_end_type(values):
    """Copy of a dictionary keyed by role, with the keys converted to link end type enumerations"""
    return {link_end_type(role): value for role, value in values.items()}


class LinkEndId(namedtuple("LinkEndId", ["body", "reference_point"])):
    """Participant in a link: a body, or a reference point (e.g. a ground station) on a body"""

    __slots__ = ()

    def __new__(cls, body, reference_point=""):
        return super().__new__(cls, body, reference_point)

    @classmethod
    def create(cls, value):
        """Create a LinkEndId from a LinkEndId, a body name or a (body, reference_point)-tuple"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        return cls(*value)

    def __str__(self):
        return f"{self.body}/{self.reference_point}" if self.reference_point else self.body


class LinkEnds(abc.Mapping):
    """Mapping from link end role to the participant taking that role"""

    def __init__(self, link_ends=None, **roles):
        all_roles = dict(link_ends or {}, **roles)
        link_end_types = [link_end_type(r) for r in all_roles]
        self._link_ends = tuple(
            sorted((t, LinkEndId.create(v)) for t, v in zip(link_end_types, all_roles.values()))
        )

    def __getitem__(self, role):
        role_type = link_end_type(role)
        for key, link_end_id in self._link_ends:
            if key is role_type:
                return link_end_id
        raise KeyError(role)

    def __iter__(self):
        return (key for key, _ in self._link_ends)

    def __len__(self):
        return len(self._link_ends)

    def __hash__(self):
        return hash(self._link_ends)

    def __eq__(self, other):
        if not isinstance(other, LinkEnds):
            return NotImplemented
        return self._link_ends == other._link_ends

    def __lt__(self, other):
        return self._link_ends < other._link_ends

    def roles_of_body(self, body):
        """List the roles taken by the given body, or a reference point on it"""
        return [key for key, link_end_id in self._link_ends if link_end_id.body == body]

    def __repr__(self):
        roles = ", ".join(f"{key.name}={link_end_id!s}" for key, link_end_id in self._link_ends)
        return f"{type(self).__name__}({roles})"
