"""
Intermediate Session Description model.

A normalized, WebRTC-shaped description of a session: media sections with their
codecs, header extensions, RTCP/SSRC state, ICE and DTLS parameters, SCTP
passthrough and candidates. Pure data objects - no conversion logic lives here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .constants import Direction, MediaKind


ParametersDict = Dict[str, Union[int, str, None]]


@dataclass
class IntermediateFeedback:
    """RTCP feedback mechanism advertised for a codec (e.g. nack pli)."""
    type: str
    parameter: Optional[str] = None


@dataclass
class IntermediateCodec:
    """Negotiated codec of an RTP media section."""
    payload_type: int
    name: str
    clock_rate: int
    channels: Optional[int] = None
    parameters: ParametersDict = field(default_factory=dict)
    rtcp_feedback: List[IntermediateFeedback] = field(default_factory=list)
    maxptime: Optional[int] = None


@dataclass
class IntermediateHeaderExtension:
    """RTP header extension. direction None means sendrecv."""
    id: int
    uri: str
    direction: Optional[str] = None


@dataclass
class IntermediateRtpParameters:
    codecs: List[IntermediateCodec] = field(default_factory=list)
    header_extensions: List[IntermediateHeaderExtension] = field(default_factory=list)
    fec_mechanisms: List[str] = field(default_factory=list)


@dataclass
class IntermediateRtcpParameters:
    mux: bool = False
    reduced_size: bool = False
    ssrc: Optional[int] = None
    cname: Optional[str] = None


@dataclass
class IntermediateRtxParameters:
    ssrc: int


@dataclass
class IntermediateEncodingParameters:
    """RTP encoding. Only the primary entry of a list is ever mapped."""
    ssrc: Optional[int] = None
    rtx: Optional[IntermediateRtxParameters] = None


@dataclass
class IntermediateStream:
    """Media stream association (msid stream id + track id)."""
    stream: str
    track: Optional[str] = None


@dataclass
class IntermediateIceParameters:
    username_fragment: str
    password: str


@dataclass
class IntermediateFingerprint:
    algorithm: str
    value: str


@dataclass
class IntermediateDtlsParameters:
    fingerprints: List[IntermediateFingerprint] = field(default_factory=list)
    role: str = 'auto'


@dataclass
class IntermediateCandidate:
    """
    ICE candidate.

    username_fragment is only set for trickled candidates, where it identifies
    the ICE generation the candidate belongs to.
    """
    component: int
    foundation: str
    ip: str
    port: int
    priority: int
    protocol: str
    type: str
    related_address: Optional[str] = None
    related_port: Optional[int] = None
    tcp_type: Optional[str] = None
    username_fragment: Optional[str] = None


@dataclass
class IntermediateMediaDescription:
    """One logical media section, keyed by its mid."""
    kind: str
    mid: str
    direction: str = Direction.SENDRECV
    protocol: str = ''
    rtp_parameters: Optional[IntermediateRtpParameters] = None
    rtcp_parameters: Optional[IntermediateRtcpParameters] = None
    rtp_encoding_parameters: List[IntermediateEncodingParameters] = field(default_factory=list)
    streams: List[IntermediateStream] = field(default_factory=list)
    ice_parameters: Optional[IntermediateIceParameters] = None
    dtls_parameters: Optional[IntermediateDtlsParameters] = None
    setup: Optional[str] = None      # Single DTLS setup role for every fingerprint
    sctp: Optional[Any] = None       # Opaque passthrough
    candidates: List[IntermediateCandidate] = field(default_factory=list)

    @property
    def is_rtp(self) -> bool:
        kind = MediaKind.normalize(self.kind)
        return kind is not None and kind.is_rtp


@dataclass
class IntermediateGroup:
    """Bundling group: semantics tag (e.g. BUNDLE) plus ordered mids."""
    semantics: str
    mids: List[str] = field(default_factory=list)


@dataclass
class IntermediateSessionDescription:
    session_id: Optional[str] = None
    media: List[IntermediateMediaDescription] = field(default_factory=list)
    groups: List[IntermediateGroup] = field(default_factory=list)

    def dangling_group_mids(self) -> List[str]:
        """Return group members that do not name any media section."""
        known = {media.mid for media in self.media}
        return [mid for group in self.groups for mid in group.mids if mid not in known]


def primary_encoding(
    encodings: Optional[List[IntermediateEncodingParameters]]
) -> Optional[IntermediateEncodingParameters]:
    """
    Select the encoding that is mapped to Jingle.

    Only a single SSRC (plus its rtx) is representable on the Jingle side, so
    the first encoding is the primary one and any further entries are dropped.

    Returns:
        The first encoding, or None when the list is empty or absent
    """
    if not encodings:
        return None
    return encodings[0]
