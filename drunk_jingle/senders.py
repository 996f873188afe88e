"""
Role-aware Direction <-> Senders mapping.

Jingle describes who sends media (initiator/responder/both/none) while the
Intermediate model describes what the local side does (sendonly/recvonly/...).
The translation depends on whether we are the session initiator or responder.
"""

from typing import Optional

from .constants import Direction, Senders, SessionRole


# (role, direction) -> senders
_DIRECTION_TO_SENDERS = {
    SessionRole.INITIATOR: {
        Direction.SENDRECV: Senders.BOTH,
        Direction.SENDONLY: Senders.INITIATOR,
        Direction.RECVONLY: Senders.RESPONDER,
        Direction.INACTIVE: Senders.NONE,
    },
    SessionRole.RESPONDER: {
        Direction.SENDRECV: Senders.BOTH,
        Direction.SENDONLY: Senders.RESPONDER,
        Direction.RECVONLY: Senders.INITIATOR,
        Direction.INACTIVE: Senders.NONE,
    },
}

_SENDERS_TO_DIRECTION = {
    role: {senders: direction for direction, senders in table.items()}
    for role, table in _DIRECTION_TO_SENDERS.items()
}


def _role(role) -> SessionRole:
    normalized = SessionRole.normalize(role)
    if normalized is None:
        raise ValueError(f"Unknown session role: {role!r}")
    return normalized


def direction_to_senders(role, direction) -> Senders:
    """
    Convert a local media direction to a Jingle senders tag.

    Args:
        role: Local session role ('initiator' or 'responder')
        direction: 'sendonly', 'recvonly', 'sendrecv' or 'inactive'.
            None is treated as sendrecv.

    Returns:
        Senders tag
    """
    if direction is None:
        return Senders.BOTH
    normalized = Direction.normalize(direction)
    if normalized is None:
        raise ValueError(f"Unknown media direction: {direction!r}")
    return _DIRECTION_TO_SENDERS[_role(role)][normalized]


def senders_to_direction(role, senders: Optional[str] = None) -> Direction:
    """
    Convert a Jingle senders tag to a local media direction.

    Args:
        role: Local session role ('initiator' or 'responder')
        senders: Senders tag. Absent means 'both' (XEP-0166 default).

    Returns:
        Direction
    """
    if senders is None:
        return Direction.SENDRECV
    normalized = Senders.normalize(senders)
    if normalized is None:
        raise ValueError(f"Unknown senders value: {senders!r}")
    return _SENDERS_TO_DIRECTION[_role(role)][normalized]


class SendersMapping:
    """
    Direction/Senders strategy injected into the mappers.

    Subclass and override both methods to plug a different vocabulary mapping;
    the default delegates to the module functions.
    """

    def direction_to_senders(self, role, direction) -> str:
        return direction_to_senders(role, direction)

    def senders_to_direction(self, role, senders: Optional[str] = None) -> str:
        return senders_to_direction(role, senders)


DEFAULT_SENDERS_MAPPING = SendersMapping()
