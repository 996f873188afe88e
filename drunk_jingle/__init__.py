"""
DRUNK-JINGLE - Intermediate session description <-> Jingle translator

Converts a normalized, WebRTC-shaped session description (media sections,
codecs, ICE/DTLS parameters, SSRC groups) to the XMPP Jingle model and back:
- XEP-0166: Jingle (contents, groups, senders)
- XEP-0167: Jingle RTP Sessions (codecs, header extensions, sources)
- XEP-0176: Jingle ICE-UDP Transport (candidates, trickle)
- XEP-0320: DTLS-SRTP fingerprints

All conversions are pure: no I/O, no shared state.
"""

from .config import MapperConfig, load_config
from .constants import Direction, MediaKind, Senders, SessionRole
from .errors import JingleMappingError, MalformedNumericError, MissingFieldError
from .logger import setup_logger
from .protocol import SessionMapper

__version__ = "0.1.0"
__all__ = [
    "SessionMapper",
    "MapperConfig",
    "load_config",
    "setup_logger",
    "SessionRole",
    "Direction",
    "Senders",
    "MediaKind",
    "JingleMappingError",
    "MissingFieldError",
    "MalformedNumericError",
]
