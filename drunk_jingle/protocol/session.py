"""
Session mapper - whole sessions and trickled candidates.

Composes the application, transport and candidate mappers over every media
section/content, and copies bundling groups verbatim (they only reference
media by mid).
"""

import logging
from typing import List, Optional, Tuple

from ..config import MapperConfig
from ..constants import JingleAction, SessionRole
from ..intermediate import (
    IntermediateCandidate,
    IntermediateGroup,
    IntermediateMediaDescription,
    IntermediateSessionDescription,
)
from ..senders import DEFAULT_SENDERS_MAPPING, SendersMapping
from ..stanzas import (
    JingleContent,
    JingleContentGroup,
    JingleDataChannel,
    JingleIceUdp,
    JingleSession,
)
from .application import convert_content_to_media, convert_intermediate_to_application
from .candidate import convert_candidate_to_intermediate, convert_intermediate_to_candidate
from .transport import convert_intermediate_to_transport, convert_transport_to_intermediate


module_logger = logging.getLogger(__name__)


def convert_intermediate_to_content(
    media: IntermediateMediaDescription,
    role,
    senders: Optional[SendersMapping] = None
) -> JingleContent:
    """Convert one media section; the application variant is chosen by kind only."""
    senders = senders or DEFAULT_SENDERS_MAPPING

    if media.is_rtp:
        application = convert_intermediate_to_application(media, role, senders)
    else:
        application = JingleDataChannel(protocol=media.protocol)

    return JingleContent(
        creator=SessionRole.INITIATOR,
        name=media.mid,
        senders=senders.direction_to_senders(role, media.direction),
        application=application,
        transport=convert_intermediate_to_transport(media),
    )


def convert_intermediate_to_request(
    session: IntermediateSessionDescription,
    role,
    senders: Optional[SendersMapping] = None
) -> JingleSession:
    """
    Convert a full Intermediate session to Jingle contents and groups.

    The caller sets the action (session-initiate, session-accept, ...).

    Args:
        session: Intermediate session description
        role: Local session role
        senders: Direction/Senders strategy (default mapping if None)

    Returns:
        JingleSession

    Raises:
        MissingFieldError: If an audio/video section has no RTP parameters
    """
    return JingleSession(
        sid=session.session_id,
        contents=[
            convert_intermediate_to_content(media, role, senders)
            for media in session.media
        ],
        groups=[
            JingleContentGroup(semantics=group.semantics, contents=list(group.mids))
            for group in session.groups
        ],
    )


def convert_content_to_intermediate(
    content: JingleContent,
    role,
    senders: Optional[SendersMapping] = None,
    config: Optional[MapperConfig] = None
) -> IntermediateMediaDescription:
    media = convert_content_to_media(content, role, senders, config)
    return convert_transport_to_intermediate(content.transport, media)


def convert_request_to_intermediate(
    jingle: JingleSession,
    role,
    senders: Optional[SendersMapping] = None,
    config: Optional[MapperConfig] = None
) -> IntermediateSessionDescription:
    """
    Convert a Jingle session to an Intermediate session.

    Args:
        jingle: Jingle session (sid, contents, groups)
        role: Local session role
        senders: Direction/Senders strategy (default mapping if None)
        config: Mapper configuration (protocol defaults)

    Returns:
        IntermediateSessionDescription

    Raises:
        MalformedNumericError: If an ssrc or payload type is not an integer
    """
    return IntermediateSessionDescription(
        session_id=jingle.sid,
        groups=[
            IntermediateGroup(semantics=group.semantics, mids=list(group.contents))
            for group in jingle.groups
        ],
        media=[
            convert_content_to_intermediate(content, role, senders, config)
            for content in jingle.contents
        ],
    )


def convert_intermediate_to_transport_info(
    mid: str,
    candidate: IntermediateCandidate
) -> JingleSession:
    """
    Wrap a single trickled candidate into a transport-info update.

    Args:
        mid: Media section the candidate belongs to (content name)
        candidate: Local ICE candidate

    Returns:
        JingleSession with one content carrying one candidate
    """
    return JingleSession(
        action=JingleAction.TRANSPORT_INFO,
        contents=[
            JingleContent(
                creator=SessionRole.INITIATOR,
                name=mid,
                transport=JingleIceUdp(
                    username_fragment=candidate.username_fragment or None,
                    candidates=[convert_intermediate_to_candidate(candidate)],
                ),
            )
        ],
    )


def convert_transport_info_to_intermediate(
    jingle: JingleSession
) -> List[Tuple[str, IntermediateCandidate]]:
    """
    Extract trickled candidates from a transport-info update.

    Each candidate gets the ufrag of its transport, so callers can discard
    candidates of a previous ICE generation.

    Returns:
        List of (mid, candidate) pairs in stanza order
    """
    candidates = []
    for content in jingle.contents:
        transport = content.transport
        if transport is None:
            module_logger.warning(f"transport-info content {content.name} has no transport")
            continue

        for jingle_candidate in transport.candidates:
            candidate = convert_candidate_to_intermediate(jingle_candidate)
            candidate.username_fragment = transport.username_fragment or None
            candidates.append((content.name, candidate))

    return candidates


class SessionMapper:
    """
    Converter bound to one local role.

    Carries the role, configuration, senders strategy and logger so callers
    handling an ongoing session do not have to pass them on every call.
    """

    def __init__(self, role=None,
                 config: Optional[MapperConfig] = None,
                 senders: Optional[SendersMapping] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize session mapper.

        Args:
            role: Local session role (defaults to config.role)
            config: Mapper configuration (defaults if None)
            senders: Direction/Senders strategy (default mapping if None)
            logger: Logger instance (optional)
        """
        self.config = config or MapperConfig()
        role = role if role is not None else self.config.role
        self.role = SessionRole.normalize(role)
        if self.role is None:
            raise ValueError(f"Unknown session role: {role!r}")
        self.senders = senders or DEFAULT_SENDERS_MAPPING
        self.logger = logger or module_logger

    def to_jingle(self, session: IntermediateSessionDescription) -> JingleSession:
        dangling = session.dangling_group_mids()
        if dangling:
            self.logger.warning(f"Session {session.session_id}: groups reference unknown mids {dangling}")

        jingle = convert_intermediate_to_request(session, self.role, self.senders)
        self.logger.debug(
            f"Converted session {session.session_id} to Jingle "
            f"({len(jingle.contents)} contents, {len(jingle.groups)} groups, role={self.role.value})"
        )
        return jingle

    def to_intermediate(self, jingle: JingleSession) -> IntermediateSessionDescription:
        session = convert_request_to_intermediate(jingle, self.role, self.senders, self.config)
        self.logger.debug(
            f"Converted Jingle session {jingle.sid} to intermediate "
            f"({len(session.media)} media sections, role={self.role.value})"
        )
        return session

    def candidate_to_jingle(self, mid: str, candidate: IntermediateCandidate) -> JingleSession:
        self.logger.debug(f"Trickling {candidate.type} candidate {candidate.ip}:{candidate.port} for {mid}")
        return convert_intermediate_to_transport_info(mid, candidate)

    def candidates_from_jingle(self, jingle: JingleSession) -> List[Tuple[str, IntermediateCandidate]]:
        candidates = convert_transport_info_to_intermediate(jingle)
        self.logger.debug(f"Received {len(candidates)} trickled candidates for {jingle.sid}")
        return candidates
