"""
Conversion errors.

Only two failures exist: a field that is mandatory for the media kind is absent,
or a numeric field does not parse as an integer. Everything else that is absent
is simply omitted from the output.
"""

import re
from typing import Any, Optional


_DECIMAL_RE = re.compile(r'[0-9]+')


class JingleMappingError(Exception):
    """Base class for errors raised while converting a session description."""
    pass


class MissingFieldError(JingleMappingError):
    """A field the media kind declares mandatory is absent."""

    def __init__(self, field: str, kind: Optional[str] = None):
        self.field = field
        self.kind = kind
        if kind:
            message = f"{kind} media requires '{field}'"
        else:
            message = f"missing required field '{field}'"
        super().__init__(message)


class MalformedNumericError(JingleMappingError):
    """A field expected to hold an integer (ssrc, payload type) does not."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"'{field}' is not an integer: {value!r}")


def parse_int(value: Any, field: str) -> int:
    """
    Parse a decimal integer carried as text in a Jingle field.

    Args:
        value: Raw value (usually a string such as "111" or "2485877649")
        field: Field name reported in the error

    Returns:
        Parsed integer

    Raises:
        MalformedNumericError: If value is not a base-10 integer
    """
    if isinstance(value, bool):
        raise MalformedNumericError(field, value)
    if isinstance(value, int):
        return value
    text = str(value).strip() if value is not None else ''
    # Plain ASCII digits only: no sign, no underscores, no other scripts
    if not _DECIMAL_RE.fullmatch(text):
        raise MalformedNumericError(field, value)
    return int(text, 10)
