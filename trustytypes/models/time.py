"""Timestamp codec for Trusty API payloads.

The API sends timestamps in two shapes: RFC 3339 values carrying a `Z`
(e.g. malicious package advisories) and a zone-less layout with a fixed
six-digit fraction (everything else). Both decode to a UTC `datetime`.
Encoding always produces the zone-less layout, so a `Z` value does not
round-trip to its source form.
"""
import re
from datetime import datetime
from datetime import timezone
from typing import Annotated
from typing import Any

from pydantic import BeforeValidator
from pydantic import PlainSerializer

CANONICAL_LAYOUT = '%Y-%m-%dT%H:%M:%S.%f'
RFC3339_LAYOUT = '%Y-%m-%dT%H:%M:%S%z'

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# strptime's %f accepts one to six digits, the layout requires exactly six
_CANONICAL_RE = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}')
_RFC3339_RE = re.compile(
    r'(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})'
    r'(?:\.(?P<frac>\d+))?'
    r'(?P<zone>Z|[+-]\d{2}:\d{2})',
)


class MalformedTimestampError(ValueError):
    """A timestamp string matched neither accepted layout."""

    def __init__(self, value: str, layout: str):
        self.value = value
        self.layout = layout
        super().__init__(f"cannot parse {value!r} as {layout!r}")


def _parse_rfc3339(value: str) -> datetime:
    match = _RFC3339_RE.fullmatch(value)
    if not match:
        raise MalformedTimestampError(value, RFC3339_LAYOUT)

    try:
        parsed = datetime.strptime(
            match.group('base') + match.group('zone'), RFC3339_LAYOUT,
        )
    except ValueError as e:
        raise MalformedTimestampError(value, RFC3339_LAYOUT) from e

    frac = match.group('frac')
    if frac:
        # Sub-microsecond digits are truncated
        parsed = parsed.replace(microsecond=int(frac[:6].ljust(6, '0')))
    return parsed


def parse_time(value: str) -> datetime:
    """
    Parse a timestamp string from an API payload.

    Surrounding double quotes are ignored. The literal `null` yields
    `ZERO_TIME`. Strings containing `Z` are parsed as RFC 3339, everything
    else against `CANONICAL_LAYOUT` and taken to be UTC.

    Raises:
        MalformedTimestampError: if the string does not fit the chosen layout.
    """
    text = value.strip('"')
    if text == 'null':
        return ZERO_TIME

    if 'Z' in text:
        return _parse_rfc3339(text)

    if not _CANONICAL_RE.fullmatch(text):
        raise MalformedTimestampError(text, CANONICAL_LAYOUT)
    try:
        parsed = datetime.strptime(text, CANONICAL_LAYOUT)
    except ValueError as e:
        raise MalformedTimestampError(text, CANONICAL_LAYOUT) from e
    return parsed.replace(tzinfo=timezone.utc)


def format_time(value: datetime) -> str:
    """Format an instant in the canonical layout, dropping its zone."""
    # isoformat keeps the four-digit year that strftime('%Y') loses for year < 1000
    return value.replace(tzinfo=None).isoformat(timespec='microseconds')


def decode_time(token: str | bytes) -> datetime:
    """Decode a raw JSON token (quoted string or `null`)."""
    if isinstance(token, bytes):
        token = token.decode('utf-8')
    return parse_time(token)


def encode_time(value: datetime) -> str:
    """Encode an instant as a JSON string token in the canonical layout."""
    return f'"{format_time(value)}"'


def _validate_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, (str, bytes)):
        return decode_time(value)
    raise ValueError(
        f"expected a timestamp string, got {type(value).__name__}",
    )


TrustyTime = Annotated[
    datetime,
    BeforeValidator(_validate_time),
    PlainSerializer(format_time, return_type=str, when_used='json'),
]
