"""
Transport mapper - ICE-UDP/DTLS/SCTP state of one media section.
"""

import dataclasses
import logging
from typing import Optional

from ..constants import SetupRole
from ..intermediate import (
    IntermediateDtlsParameters,
    IntermediateFingerprint,
    IntermediateIceParameters,
    IntermediateMediaDescription,
)
from ..stanzas import JingleFingerprint, JingleIceUdp, primary_fingerprint
from .candidate import convert_candidate_to_intermediate, convert_intermediate_to_candidate


logger = logging.getLogger(__name__)


def convert_intermediate_to_transport(media: IntermediateMediaDescription) -> JingleIceUdp:
    """
    Convert the transport state of a media section to an ICE-UDP transport.

    Every fingerprint is stamped with the section's single setup role.

    Args:
        media: Intermediate media section

    Returns:
        JingleIceUdp
    """
    transport = JingleIceUdp()

    ice = media.ice_parameters
    if ice is not None:
        transport.username_fragment = ice.username_fragment
        transport.password = ice.password

    dtls = media.dtls_parameters
    if dtls is not None:
        transport.fingerprints = [
            JingleFingerprint(
                algorithm=fingerprint.algorithm,
                value=fingerprint.value,
                setup=media.setup,
            )
            for fingerprint in dtls.fingerprints
        ]

    if media.sctp is not None:
        transport.sctp = media.sctp

    transport.candidates = [
        convert_intermediate_to_candidate(candidate) for candidate in media.candidates
    ]

    return transport


def convert_transport_to_intermediate(
    transport: Optional[JingleIceUdp],
    media: IntermediateMediaDescription
) -> IntermediateMediaDescription:
    """
    Merge an ICE-UDP transport into a media section.

    - ICE parameters only when both ufrag and pwd are present
    - DTLS parameters only when at least one fingerprint exists; the
      section's setup role comes from the first fingerprint
    - SCTP passthrough only together with fingerprints

    Args:
        transport: Jingle transport (None leaves media untouched)
        media: Media section built by the application mapper

    Returns:
        New IntermediateMediaDescription with transport state filled in
    """
    if transport is None:
        return media

    changes = {}

    if transport.username_fragment and transport.password:
        changes['ice_parameters'] = IntermediateIceParameters(
            username_fragment=transport.username_fragment,
            password=transport.password,
        )

    fingerprint = primary_fingerprint(transport.fingerprints)
    if fingerprint is not None:
        changes['dtls_parameters'] = IntermediateDtlsParameters(
            fingerprints=[
                IntermediateFingerprint(algorithm=fp.algorithm, value=fp.value)
                for fp in transport.fingerprints
            ],
            role=SetupRole.AUTO,
        )
        if transport.sctp is not None:
            changes['sctp'] = transport.sctp
        changes['setup'] = fingerprint.setup
    elif transport.sctp is not None:
        logger.debug(f"Dropping SCTP parameters of {media.mid}: no DTLS fingerprint")

    changes['candidates'] = [
        convert_candidate_to_intermediate(candidate) for candidate in transport.candidates
    ]

    return dataclasses.replace(media, **changes)
