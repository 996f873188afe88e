"""
Jingle wire constants and enums.

Centralized place for all namespace tags and enumerated values shared by the
Intermediate and Jingle models, to avoid raw strings drifting apart.
"""

from enum import Enum


# Application/transport type tags (polymorphic payload discriminators)
NS_JINGLE_RTP_1 = 'urn:xmpp:jingle:apps:rtp:1'                 # XEP-0167
NS_JINGLE_ICE_UDP_1 = 'urn:xmpp:jingle:transports:ice-udp:1'   # XEP-0176
DATACHANNEL_APPLICATION = 'datachannel'                        # Opaque SCTP data channel

# Source group semantics linking a primary stream and its retransmission stream
SOURCE_GROUP_FID = 'FID'

# Default media-line protocols recovered from Jingle (which does not carry them)
DEFAULT_RTP_PROTOCOL = 'UDP/TLS/RTP/SAVPF'
DEFAULT_SCTP_PROTOCOL = 'UDP/DTLS/SCTP'


class _WireEnum(str, Enum):
    """Base for string enums whose values appear on the wire."""

    @classmethod
    def normalize(cls, value):
        """
        Normalize a wire string to its enum member.

        Accepts any case variant. Returns None for None or unknown values.

        Examples:
            >>> SessionRole.normalize("Initiator")
            SessionRole.INITIATOR
            >>> SessionRole.normalize(None)
            None
        """
        if value is None:
            return None

        if isinstance(value, cls):
            return value

        value_lower = str(value).lower()
        for member in cls:
            if member.value.lower() == value_lower:
                return member

        return None


class SessionRole(_WireEnum):
    """Local signaling role in a Jingle session."""
    INITIATOR = 'initiator'
    RESPONDER = 'responder'


class Direction(_WireEnum):
    """Negotiated media direction (Intermediate side)."""
    SENDONLY = 'sendonly'
    RECVONLY = 'recvonly'
    SENDRECV = 'sendrecv'   # Neutral value, encoded in Jingle by omission
    INACTIVE = 'inactive'


class Senders(_WireEnum):
    """Jingle content/header-extension senders tag."""
    INITIATOR = 'initiator'
    RESPONDER = 'responder'
    BOTH = 'both'           # Neutral value, also the default when absent
    NONE = 'none'


class MediaKind(_WireEnum):
    """Media section kind."""
    AUDIO = 'audio'
    VIDEO = 'video'
    APPLICATION = 'application'

    @property
    def is_rtp(self) -> bool:
        """Audio and video sections always carry RTP application data."""
        return self in (MediaKind.AUDIO, MediaKind.VIDEO)


class SetupRole(_WireEnum):
    """DTLS handshake role attached to a fingerprint."""
    ACTIVE = 'active'
    PASSIVE = 'passive'
    ACTPASS = 'actpass'
    AUTO = 'auto'


class JingleAction(_WireEnum):
    """Jingle actions produced by this package (XEP-0166)."""
    SESSION_INITIATE = 'session-initiate'
    SESSION_ACCEPT = 'session-accept'
    TRANSPORT_INFO = 'transport-info'
