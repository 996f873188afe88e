"""
Mapper configuration.

Loaded from a YAML file:

    role: initiator
    rtp_protocol: UDP/TLS/RTP/SAVPF
    sctp_protocol: UDP/DTLS/SCTP
    logging:
      level: DEBUG
      file: logs/drunk-jingle.log
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from .constants import DEFAULT_RTP_PROTOCOL, DEFAULT_SCTP_PROTOCOL, SessionRole


@dataclass
class MapperConfig:
    """Settings shared by every conversion of a SessionMapper."""
    role: SessionRole = SessionRole.INITIATOR
    rtp_protocol: str = DEFAULT_RTP_PROTOCOL     # Protocol assigned to recovered RTP sections
    sctp_protocol: str = DEFAULT_SCTP_PROTOCOL   # Fallback for data channels without a protocol
    log_level: str = 'INFO'
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Optional[dict], base_dir: Optional[Path] = None) -> 'MapperConfig':
        """
        Build a config from a parsed YAML mapping.

        Args:
            data: Mapping (missing keys keep their defaults)
            base_dir: Directory relative log file paths are resolved against

        Raises:
            ValueError: If role is not initiator/responder
        """
        data = data or {}
        defaults = cls()

        role = defaults.role
        if 'role' in data:
            role = SessionRole.normalize(data['role'])
            if role is None:
                raise ValueError(f"Unknown session role in config: {data['role']!r}")

        logging_config = data.get('logging') or {}
        log_file = logging_config.get('file')
        if log_file:
            log_file = Path(log_file)
            if base_dir and not log_file.is_absolute():
                log_file = base_dir / log_file

        return cls(
            role=role,
            rtp_protocol=data.get('rtp_protocol', defaults.rtp_protocol),
            sctp_protocol=data.get('sctp_protocol', defaults.sctp_protocol),
            log_level=str(logging_config.get('level', defaults.log_level)).upper(),
            log_file=log_file or None,
        )


def load_config(config_path: Union[str, Path]) -> MapperConfig:
    """Load mapper configuration from a YAML file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        data = yaml.safe_load(f)

    return MapperConfig.from_dict(data, base_dir=config_file.parent.absolute())
