import pytest

from drunk_jingle.constants import NS_JINGLE_RTP_1
from drunk_jingle.errors import MalformedNumericError, MissingFieldError
from drunk_jingle.intermediate import (
    IntermediateCodec,
    IntermediateEncodingParameters,
    IntermediateHeaderExtension,
    IntermediateRtcpParameters,
    IntermediateRtpParameters,
    IntermediateRtxParameters,
)
from drunk_jingle.protocol.application import (
    convert_content_to_media,
    convert_intermediate_to_application,
)
from drunk_jingle.stanzas import (
    JingleContent,
    JingleDataChannel,
    JingleRtpCodec,
    JingleRtpDescription,
    JingleRtpHeaderExtension,
    JingleRtpSource,
    JingleRtpSourceGroup,
)

from conftest import make_audio


def test_missing_rtp_parameters_raises():
    media = make_audio(rtp_parameters=None)

    with pytest.raises(MissingFieldError) as excinfo:
        convert_intermediate_to_application(media, "initiator")

    assert excinfo.value.field == "rtp_parameters"


def test_only_primary_encoding_produces_fid_group():
    media = make_audio(rtp_encoding_parameters=[
        IntermediateEncodingParameters(ssrc=1000, rtx=IntermediateRtxParameters(ssrc=1001)),
        IntermediateEncodingParameters(ssrc=2000),
    ])

    application = convert_intermediate_to_application(media, "initiator")

    assert application.ssrc == "1000"
    assert len(application.source_groups) == 1
    assert application.source_groups[0].semantics == "FID"
    assert application.source_groups[0].sources == ["1000", "1001"]
    assert "2000" not in str(application)


def test_secondary_rtx_is_ignored():
    media = make_audio(rtp_encoding_parameters=[
        IntermediateEncodingParameters(ssrc=1000),
        IntermediateEncodingParameters(ssrc=2000, rtx=IntermediateRtxParameters(ssrc=2001)),
    ])

    application = convert_intermediate_to_application(media, "initiator")

    assert application.ssrc == "1000"
    assert application.source_groups == []


def test_no_encodings_means_no_ssrc():
    application = convert_intermediate_to_application(make_audio(rtp_encoding_parameters=[]), "initiator")

    assert application.ssrc is None
    assert application.source_groups == []


def test_rtcp_source_requires_ssrc_and_cname():
    with_both = make_audio(rtcp_parameters=IntermediateRtcpParameters(ssrc=42, cname="abc"))
    ssrc_only = make_audio(rtcp_parameters=IntermediateRtcpParameters(ssrc=42))
    cname_only = make_audio(rtcp_parameters=IntermediateRtcpParameters(cname="abc"))

    assert convert_intermediate_to_application(with_both, "initiator").sources == [
        JingleRtpSource(ssrc="42", parameters={"cname": "abc"})
    ]
    assert convert_intermediate_to_application(ssrc_only, "initiator").sources == []
    assert convert_intermediate_to_application(cname_only, "initiator").sources == []


def test_neutral_header_extension_direction_is_omitted_and_recovered():
    media = make_audio(rtp_parameters=IntermediateRtpParameters(
        header_extensions=[
            IntermediateHeaderExtension(id=1, uri="urn:ietf:params:rtp-hdrext:ssrc-audio-level",
                                        direction="sendrecv"),
        ],
    ))

    application = convert_intermediate_to_application(media, "initiator")
    assert application.header_extensions[0].senders is None

    content = JingleContent(creator="initiator", name="0", application=application)
    back = convert_content_to_media(content, "initiator")
    assert back.rtp_parameters.header_extensions[0].direction == "sendrecv"


@pytest.mark.parametrize("role, direction, senders", [
    ("initiator", "sendonly", "initiator"),
    ("initiator", "recvonly", "responder"),
    ("responder", "sendonly", "responder"),
    ("responder", "inactive", "none"),
])
def test_header_extension_senders_are_role_aware(role, direction, senders):
    media = make_audio(rtp_parameters=IntermediateRtpParameters(
        header_extensions=[IntermediateHeaderExtension(id=3, uri="urn:3gpp:video-orientation",
                                                       direction=direction)],
    ))

    application = convert_intermediate_to_application(media, role)
    assert application.header_extensions[0].senders == senders

    back = convert_content_to_media(JingleContent(creator="initiator", name="0", application=application), role)
    assert back.rtp_parameters.header_extensions[0].direction == direction


def test_ptime_is_surfaced_and_kept_in_parameters():
    media = make_audio(rtp_parameters=IntermediateRtpParameters(codecs=[
        IntermediateCodec(payload_type=0, name="PCMU", clock_rate=8000, parameters={"ptime": 20}, maxptime=40),
    ]))

    codec = convert_intermediate_to_application(media, "initiator").codecs[0]

    assert codec.id == "0"
    assert codec.ptime == "20"
    assert codec.parameters == {"ptime": 20}
    assert codec.maxptime == "40"


def test_absent_header_extension_direction_has_no_senders():
    media = make_audio(rtp_parameters=IntermediateRtpParameters(
        header_extensions=[IntermediateHeaderExtension(id=2, uri="urn:ietf:params:rtp-hdrext:toffset")],
    ))

    application = convert_intermediate_to_application(media, "responder")

    assert application.header_extensions[0].senders is None


def test_none_ptime_is_not_surfaced():
    media = make_audio(rtp_parameters=IntermediateRtpParameters(codecs=[
        IntermediateCodec(payload_type=0, name="PCMU", clock_rate=8000, parameters={"ptime": None}),
    ]))

    codec = convert_intermediate_to_application(media, "initiator").codecs[0]

    assert codec.ptime is None
    assert codec.parameters == {"ptime": None}


def test_codec_parameters_are_not_aliased():
    media = make_audio()
    codec = convert_intermediate_to_application(media, "initiator").codecs[0]

    codec.parameters["stereo"] = "1"

    assert "stereo" not in media.rtp_parameters.codecs[0].parameters


def test_streams_and_rtcp_flags_are_copied(video_media):
    application = convert_intermediate_to_application(video_media, "initiator")

    assert application.application_type == NS_JINGLE_RTP_1
    assert application.media == "video"
    assert application.rtcp_mux is True
    assert application.rtcp_reduced_size is True
    assert [(s.id, s.track) for s in application.streams] == [("stream-a", "track-v")]
    assert [c.name for c in application.codecs] == ["VP8", "rtx"]


def test_content_without_application_degrades_to_application_kind():
    media = convert_content_to_media(JingleContent(creator="initiator", name="x", senders="initiator"), "responder")

    assert media.kind == "application"
    assert media.direction == "recvonly"
    assert media.rtp_parameters is None
    assert media.rtcp_parameters is None
    assert media.protocol == "UDP/DTLS/SCTP"


def test_data_channel_protocol_is_kept():
    content = JingleContent(creator="initiator", name="2", application=JingleDataChannel(protocol="DTLS/SCTP"))

    media = convert_content_to_media(content, "initiator")

    assert media.kind == "application"
    assert media.protocol == "DTLS/SCTP"
    assert media.direction == "sendrecv"


def test_reverse_uses_primary_source_and_group():
    application = JingleRtpDescription(
        media="video",
        ssrc="1000",
        sources=[
            JingleRtpSource(ssrc="1000", parameters={"cname": "first"}),
            JingleRtpSource(ssrc="1001", parameters={"cname": "second"}),
        ],
        source_groups=[
            JingleRtpSourceGroup(semantics="FID", sources=["1000", "1001", "1002"]),
            JingleRtpSourceGroup(semantics="FID", sources=["3000", "3001"]),
        ],
        codecs=[JingleRtpCodec(id="96", name="VP8", clock_rate=90000, maxptime="120")],
    )

    media = convert_content_to_media(JingleContent(creator="initiator", name="1", application=application), "initiator")

    assert media.kind == "video"
    assert media.protocol == "UDP/TLS/RTP/SAVPF"
    assert media.rtcp_parameters.ssrc == 1000
    assert media.rtcp_parameters.cname == "first"
    assert len(media.rtp_encoding_parameters) == 1
    assert media.rtp_encoding_parameters[0].ssrc == 1000
    assert media.rtp_encoding_parameters[0].rtx.ssrc == 1001
    assert media.rtp_parameters.codecs[0].payload_type == 96
    assert media.rtp_parameters.codecs[0].maxptime == 120


def test_reverse_without_ssrc_has_no_encodings():
    application = JingleRtpDescription(
        media="audio",
        source_groups=[JingleRtpSourceGroup(semantics="FID", sources=["1", "2"])],
    )

    media = convert_content_to_media(JingleContent(creator="initiator", name="0", application=application), "initiator")

    assert media.rtp_encoding_parameters == []
    assert media.rtcp_parameters.ssrc is None


@pytest.mark.parametrize("application", [
    JingleRtpDescription(media="audio", ssrc="not-a-number"),
    JingleRtpDescription(media="audio", ssrc="1_000"),
    JingleRtpDescription(media="audio", ssrc="-5"),
    JingleRtpDescription(media="audio", ssrc="+5"),
    JingleRtpDescription(media="audio", ssrc="\u0661\u0662"),
    JingleRtpDescription(media="audio", codecs=[JingleRtpCodec(id="1_11")]),
    JingleRtpDescription(media="audio", codecs=[JingleRtpCodec(id="opus")]),
    JingleRtpDescription(media="audio", sources=[JingleRtpSource(ssrc="12ab")]),
    JingleRtpDescription(media="audio", ssrc="1",
                         source_groups=[JingleRtpSourceGroup(semantics="FID", sources=["1", "x"])]),
])
def test_malformed_numbers_raise(application):
    content = JingleContent(creator="initiator", name="0", application=application)

    with pytest.raises(MalformedNumericError):
        convert_content_to_media(content, "initiator")


def test_header_extension_senders_both_is_neutral():
    application = JingleRtpDescription(
        media="audio",
        header_extensions=[JingleRtpHeaderExtension(id=1, uri="urn:x", senders="both")],
    )

    media = convert_content_to_media(JingleContent(creator="initiator", name="0", application=application), "responder")

    assert media.rtp_parameters.header_extensions[0].direction == "sendrecv"
