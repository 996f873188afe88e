"""
Candidate mapper - Intermediate ICE candidate <-> Jingle ICE-UDP candidate.

Plain field renaming. generation/id/network only exist on the Jingle side and
are neither produced nor consumed, so they are lost on a round trip.
"""

from ..intermediate import IntermediateCandidate
from ..stanzas import JingleIceUdpCandidate


def convert_intermediate_to_candidate(candidate: IntermediateCandidate) -> JingleIceUdpCandidate:
    return JingleIceUdpCandidate(
        component=candidate.component,
        foundation=candidate.foundation,
        ip=candidate.ip,
        port=candidate.port,
        priority=candidate.priority,
        protocol=candidate.protocol,
        type=candidate.type,
        related_address=candidate.related_address,
        related_port=candidate.related_port,
        tcp_type=candidate.tcp_type,
    )


def convert_candidate_to_intermediate(candidate: JingleIceUdpCandidate) -> IntermediateCandidate:
    return IntermediateCandidate(
        component=candidate.component,
        foundation=candidate.foundation,
        ip=candidate.ip,
        port=candidate.port,
        priority=candidate.priority,
        protocol=candidate.protocol,
        type=candidate.type,
        related_address=candidate.related_address,
        related_port=candidate.related_port,
        tcp_type=candidate.tcp_type,
    )
