from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from drunk_jingle.intermediate import (
    IntermediateCandidate,
    IntermediateCodec,
    IntermediateDtlsParameters,
    IntermediateEncodingParameters,
    IntermediateFeedback,
    IntermediateFingerprint,
    IntermediateGroup,
    IntermediateHeaderExtension,
    IntermediateIceParameters,
    IntermediateMediaDescription,
    IntermediateRtcpParameters,
    IntermediateRtpParameters,
    IntermediateSessionDescription,
    IntermediateStream,
)


FINGERPRINT = "AB:CD:EF:01:23:45:67:89:AB:CD:EF:01:23:45:67:89:AB:CD:EF:01:23:45:67:89:AB:CD:EF:01:23:45:67:89"


def make_candidate(**overrides):
    fields = dict(
        component=1,
        foundation="842163049",
        ip="192.0.2.10",
        port=54321,
        priority=1677729535,
        protocol="udp",
        type="srflx",
        related_address="10.0.0.5",
        related_port=54321,
        tcp_type=None,
    )
    fields.update(overrides)
    return IntermediateCandidate(**fields)


def make_audio(mid="0", **overrides):
    fields = dict(
        kind="audio",
        mid=mid,
        direction="sendrecv",
        protocol="UDP/TLS/RTP/SAVPF",
        rtp_parameters=IntermediateRtpParameters(
            codecs=[
                IntermediateCodec(
                    payload_type=111,
                    name="opus",
                    clock_rate=48000,
                    channels=2,
                    parameters={"minptime": "10", "useinbandfec": "1"},
                    rtcp_feedback=[IntermediateFeedback(type="transport-cc")],
                )
            ],
        ),
        rtp_encoding_parameters=[IntermediateEncodingParameters(ssrc=2485877649)],
        ice_parameters=IntermediateIceParameters(username_fragment="ufrag1", password="pwd1pwd1pwd1pwd1pwd1pw"),
        dtls_parameters=IntermediateDtlsParameters(
            fingerprints=[IntermediateFingerprint(algorithm="sha-256", value=FINGERPRINT)]
        ),
        setup="actpass",
    )
    fields.update(overrides)
    return IntermediateMediaDescription(**fields)


@pytest.fixture
def audio_media():
    return make_audio()


@pytest.fixture
def video_media():
    return make_audio(
        mid="1",
        kind="video",
        rtp_parameters=IntermediateRtpParameters(
            codecs=[
                IntermediateCodec(payload_type=96, name="VP8", clock_rate=90000,
                                  rtcp_feedback=[IntermediateFeedback(type="nack", parameter="pli")]),
                IntermediateCodec(payload_type=97, name="rtx", clock_rate=90000, parameters={"apt": 96}),
            ],
            header_extensions=[
                IntermediateHeaderExtension(id=3, uri="urn:3gpp:video-orientation", direction="sendonly"),
            ],
        ),
        rtcp_parameters=IntermediateRtcpParameters(mux=True, reduced_size=True, ssrc=1111, cname="pion-video"),
        rtp_encoding_parameters=[
            IntermediateEncodingParameters(ssrc=1111, rtx=None),
        ],
        streams=[IntermediateStream(stream="stream-a", track="track-v")],
    )


@pytest.fixture
def data_media():
    return IntermediateMediaDescription(
        kind="application",
        mid="2",
        protocol="UDP/DTLS/SCTP",
        ice_parameters=IntermediateIceParameters(username_fragment="ufrag1", password="pwd1pwd1pwd1pwd1pwd1pw"),
        dtls_parameters=IntermediateDtlsParameters(
            fingerprints=[IntermediateFingerprint(algorithm="sha-256", value=FINGERPRINT)]
        ),
        setup="actpass",
        sctp={"port": 5000, "maxMessageSize": 262144},
    )


@pytest.fixture
def session(audio_media, video_media, data_media):
    return IntermediateSessionDescription(
        session_id="a73sjjvkla37jfea",
        media=[audio_media, video_media, data_media],
        groups=[IntermediateGroup(semantics="BUNDLE", mids=["0", "1", "2"])],
    )
