"""
Intermediate <-> Jingle session description mappers.

- candidate.py: ICE candidate field renaming
- application.py: RTP description (codecs, header extensions, SSRCs)
- transport.py: ICE-UDP transport (ufrag/pwd, DTLS fingerprints, SCTP)
- session.py: whole sessions, bundling groups and trickled candidates
"""

from .application import convert_content_to_media, convert_intermediate_to_application
from .candidate import convert_candidate_to_intermediate, convert_intermediate_to_candidate
from .session import (
    SessionMapper,
    convert_content_to_intermediate,
    convert_intermediate_to_content,
    convert_intermediate_to_request,
    convert_intermediate_to_transport_info,
    convert_request_to_intermediate,
    convert_transport_info_to_intermediate,
)
from .transport import convert_intermediate_to_transport, convert_transport_to_intermediate

__all__ = [
    "SessionMapper",
    "convert_candidate_to_intermediate",
    "convert_content_to_intermediate",
    "convert_content_to_media",
    "convert_intermediate_to_application",
    "convert_intermediate_to_candidate",
    "convert_intermediate_to_content",
    "convert_intermediate_to_request",
    "convert_intermediate_to_transport",
    "convert_intermediate_to_transport_info",
    "convert_request_to_intermediate",
    "convert_transport_info_to_intermediate",
    "convert_transport_to_intermediate",
]
