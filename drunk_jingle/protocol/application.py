"""
Application mapper - RTP state of one media section.

Intermediate -> Jingle:
- Codecs, header extensions, rtcp-mux/reduced-size, stream associations
- Primary encoding ssrc (+ FID group when it has an rtx stream)
- RTCP ssrc/cname as a single <source/>

Jingle -> Intermediate:
- Builds the media section (kind, mid, direction, protocol) from a content
- RTP state is recovered only when the application tag identifies RTP
"""

import logging
from typing import Optional

from ..config import MapperConfig
from ..constants import NS_JINGLE_RTP_1, SOURCE_GROUP_FID, Direction, MediaKind, Senders
from ..errors import MissingFieldError, parse_int
from ..intermediate import (
    IntermediateCodec,
    IntermediateEncodingParameters,
    IntermediateFeedback,
    IntermediateHeaderExtension,
    IntermediateMediaDescription,
    IntermediateRtcpParameters,
    IntermediateRtpParameters,
    IntermediateRtxParameters,
    IntermediateStream,
    primary_encoding,
)
from ..senders import DEFAULT_SENDERS_MAPPING, SendersMapping
from ..stanzas import (
    JingleContent,
    JingleDataChannel,
    JingleMediaStream,
    JingleRtcpFeedback,
    JingleRtpCodec,
    JingleRtpDescription,
    JingleRtpHeaderExtension,
    JingleRtpSource,
    JingleRtpSourceGroup,
    primary_source,
    primary_source_group,
)


logger = logging.getLogger(__name__)


def convert_intermediate_to_application(
    media: IntermediateMediaDescription,
    role,
    senders: Optional[SendersMapping] = None
) -> JingleRtpDescription:
    """
    Convert an audio/video media section to a Jingle RTP description.

    Args:
        media: Intermediate media section (kind audio or video)
        role: Local session role, used for header-extension senders
        senders: Direction/Senders strategy (default mapping if None)

    Returns:
        JingleRtpDescription

    Raises:
        MissingFieldError: If media has no RTP parameters
    """
    if media.rtp_parameters is None:
        raise MissingFieldError('rtp_parameters', media.kind)

    senders = senders or DEFAULT_SENDERS_MAPPING
    rtp = media.rtp_parameters
    rtcp = media.rtcp_parameters or IntermediateRtcpParameters()
    encoding = primary_encoding(media.rtp_encoding_parameters)
    has_ssrc = encoding is not None and encoding.ssrc is not None

    application = JingleRtpDescription(
        media=media.kind,
        rtcp_mux=rtcp.mux,
        rtcp_reduced_size=rtcp.reduced_size,
        ssrc=str(encoding.ssrc) if has_ssrc else None,
    )

    for ext in rtp.header_extensions:
        # sendrecv is encoded by leaving senders out
        ext_senders = None
        if ext.direction and Direction.normalize(ext.direction) != Direction.SENDRECV:
            ext_senders = senders.direction_to_senders(role, ext.direction)
        application.header_extensions.append(JingleRtpHeaderExtension(
            id=ext.id,
            uri=ext.uri,
            senders=ext_senders,
        ))

    if rtcp.ssrc is not None and rtcp.cname:
        application.sources = [
            JingleRtpSource(ssrc=str(rtcp.ssrc), parameters={'cname': rtcp.cname})
        ]

    # Only one FID group is representable, even with several encodings
    if has_ssrc and encoding.rtx is not None:
        application.source_groups = [
            JingleRtpSourceGroup(
                semantics=SOURCE_GROUP_FID,
                sources=[str(encoding.ssrc), str(encoding.rtx.ssrc)],
            )
        ]

    for stream in media.streams:
        application.streams.append(JingleMediaStream(id=stream.stream, track=stream.track))

    for codec in rtp.codecs:
        payload = JingleRtpCodec(
            id=str(codec.payload_type),
            name=codec.name,
            clock_rate=codec.clock_rate,
            channels=codec.channels,
            parameters=dict(codec.parameters or {}),
            rtcp_feedback=[
                JingleRtcpFeedback(type=fb.type, parameter=fb.parameter)
                for fb in codec.rtcp_feedback
            ],
            maxptime=str(codec.maxptime) if codec.maxptime is not None else None,
        )

        # ptime stays in the parameter map and is also surfaced as an attribute
        if payload.parameters.get('ptime') is not None:
            payload.ptime = str(payload.parameters['ptime'])

        application.codecs.append(payload)

    logger.debug(
        f"Mapped {media.kind} section {media.mid} to RTP description "
        f"({len(application.codecs)} codecs, ssrc={application.ssrc})"
    )
    return application


def convert_content_to_media(
    content: JingleContent,
    role,
    senders: Optional[SendersMapping] = None,
    config: Optional[MapperConfig] = None
) -> IntermediateMediaDescription:
    """
    Convert the application part of a Jingle content to a media section.

    A content without application data degrades to an 'application' section
    with no RTP state. Transport state is added by the transport mapper.

    Args:
        content: Jingle content
        role: Local session role
        senders: Direction/Senders strategy (default mapping if None)
        config: Mapper configuration (protocol defaults)

    Returns:
        IntermediateMediaDescription without transport state

    Raises:
        MalformedNumericError: If an ssrc or payload type is not an integer
    """
    senders = senders or DEFAULT_SENDERS_MAPPING
    config = config or MapperConfig()
    application = content.application
    is_rtp = application is not None and application.application_type == NS_JINGLE_RTP_1

    if is_rtp:
        kind = application.media or MediaKind.APPLICATION
        protocol = config.rtp_protocol
    else:
        kind = MediaKind.APPLICATION
        protocol = config.sctp_protocol
        if isinstance(application, JingleDataChannel) and application.protocol:
            protocol = application.protocol

    media = IntermediateMediaDescription(
        kind=kind,
        mid=content.name,
        direction=senders.senders_to_direction(role, content.senders),
        protocol=protocol,
    )

    if not is_rtp:
        return media

    rtcp = IntermediateRtcpParameters(
        mux=application.rtcp_mux,
        reduced_size=application.rtcp_reduced_size,
    )
    source = primary_source(application.sources)
    if source is not None:
        rtcp.ssrc = parse_int(source.ssrc, 'source.ssrc')
        rtcp.cname = source.parameters.get('cname')
    media.rtcp_parameters = rtcp

    media.streams = [
        IntermediateStream(stream=stream.id, track=stream.track)
        for stream in application.streams
    ]

    if application.ssrc:
        encoding = IntermediateEncodingParameters(ssrc=parse_int(application.ssrc, 'ssrc'))
        group = primary_source_group(application.source_groups)
        # The first group is taken as the FID group of the primary ssrc
        if group is not None and len(group.sources) >= 2:
            encoding.rtx = IntermediateRtxParameters(
                ssrc=parse_int(group.sources[1], 'source_group.ssrc')
            )
        media.rtp_encoding_parameters = [encoding]

    rtp = IntermediateRtpParameters()
    for payload in application.codecs:
        rtp.codecs.append(IntermediateCodec(
            payload_type=parse_int(payload.id, 'payload_type'),
            name=payload.name,
            clock_rate=payload.clock_rate,
            channels=payload.channels,
            parameters=dict(payload.parameters or {}),
            rtcp_feedback=[
                IntermediateFeedback(type=fb.type, parameter=fb.parameter)
                for fb in payload.rtcp_feedback
            ],
            maxptime=parse_int(payload.maxptime, 'maxptime') if payload.maxptime else None,
        ))

    for ext in application.header_extensions:
        direction = Direction.SENDRECV
        if ext.senders and Senders.normalize(ext.senders) != Senders.BOTH:
            direction = senders.senders_to_direction(role, ext.senders)
        rtp.header_extensions.append(IntermediateHeaderExtension(
            id=ext.id,
            uri=ext.uri,
            direction=direction,
        ))
    media.rtp_parameters = rtp

    logger.debug(
        f"Recovered {media.kind} section {media.mid} from RTP description "
        f"({len(rtp.codecs)} codecs)"
    )
    return media
