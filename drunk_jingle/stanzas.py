"""
Jingle Session Description model.

In-memory shapes of the Jingle stanzas (XEP-0166 session/content, XEP-0167 RTP
description, XEP-0176 ICE-UDP transport, XEP-0320 DTLS fingerprints, XEP-0339
source groups). XML (de)serialization of these objects happens elsewhere.

The content application is a tagged variant: JingleRtpDescription or
JingleDataChannel, discriminated by application_type.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .constants import DATACHANNEL_APPLICATION, NS_JINGLE_ICE_UDP_1, NS_JINGLE_RTP_1


@dataclass
class JingleRtcpFeedback:
    type: str
    parameter: Optional[str] = None


@dataclass
class JingleRtpCodec:
    """<payload-type/>: id is the payload type as text."""
    id: str
    name: Optional[str] = None
    clock_rate: Optional[int] = None
    channels: Optional[int] = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    rtcp_feedback: List[JingleRtcpFeedback] = field(default_factory=list)
    maxptime: Optional[str] = None
    ptime: Optional[str] = None


@dataclass
class JingleRtpHeaderExtension:
    """<rtp-hdrext/>: senders None means both."""
    id: int
    uri: str
    senders: Optional[str] = None


@dataclass
class JingleRtpSource:
    """<source/> (XEP-0339): ssrc as text plus parameters such as cname."""
    ssrc: str
    parameters: Dict[str, str] = field(default_factory=dict)


@dataclass
class JingleRtpSourceGroup:
    """<ssrc-group/>: semantics (e.g. FID) plus ordered ssrc list."""
    semantics: str
    sources: List[str] = field(default_factory=list)


@dataclass
class JingleMediaStream:
    id: str
    track: Optional[str] = None


@dataclass
class JingleRtpDescription:
    media: str
    codecs: List[JingleRtpCodec] = field(default_factory=list)
    header_extensions: List[JingleRtpHeaderExtension] = field(default_factory=list)
    rtcp_mux: bool = False
    rtcp_reduced_size: bool = False
    sources: List[JingleRtpSource] = field(default_factory=list)
    source_groups: List[JingleRtpSourceGroup] = field(default_factory=list)
    streams: List[JingleMediaStream] = field(default_factory=list)
    ssrc: Optional[str] = None
    application_type: str = field(default=NS_JINGLE_RTP_1, init=False)


@dataclass
class JingleDataChannel:
    """Opaque data-channel application descriptor."""
    protocol: Optional[str] = None
    application_type: str = field(default=DATACHANNEL_APPLICATION, init=False)


JingleApplication = Union[JingleRtpDescription, JingleDataChannel]


@dataclass
class JingleFingerprint:
    algorithm: str
    value: str
    setup: Optional[str] = None


@dataclass
class JingleIceUdpCandidate:
    """
    ICE-UDP <candidate/>.

    generation, id and network exist only on the Jingle side and are never
    produced by the mappers.
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
    generation: Optional[int] = None
    id: Optional[str] = None
    network: Optional[int] = None


@dataclass
class JingleIceUdp:
    username_fragment: Optional[str] = None
    password: Optional[str] = None
    fingerprints: List[JingleFingerprint] = field(default_factory=list)
    sctp: Optional[Any] = None
    candidates: List[JingleIceUdpCandidate] = field(default_factory=list)
    transport_type: str = field(default=NS_JINGLE_ICE_UDP_1, init=False)


@dataclass
class JingleContent:
    creator: str
    name: str
    senders: Optional[str] = None
    application: Optional[JingleApplication] = None
    transport: Optional[JingleIceUdp] = None


@dataclass
class JingleContentGroup:
    semantics: str
    contents: List[str] = field(default_factory=list)


@dataclass
class JingleSession:
    sid: Optional[str] = None
    action: Optional[str] = None
    contents: List[JingleContent] = field(default_factory=list)
    groups: List[JingleContentGroup] = field(default_factory=list)


# Primary-value accessors: Jingle keeps lists where the Intermediate model
# only represents a single value. The first entry wins.

def primary_source(sources: Optional[List[JingleRtpSource]]) -> Optional[JingleRtpSource]:
    """Source carrying the RTCP ssrc/cname, or None."""
    return sources[0] if sources else None


def primary_source_group(
    groups: Optional[List[JingleRtpSourceGroup]]
) -> Optional[JingleRtpSourceGroup]:
    """Source group linking the primary ssrc to its rtx ssrc, or None."""
    return groups[0] if groups else None


def primary_fingerprint(
    fingerprints: Optional[List[JingleFingerprint]]
) -> Optional[JingleFingerprint]:
    """Fingerprint whose setup role becomes the media section's setup, or None."""
    return fingerprints[0] if fingerprints else None
