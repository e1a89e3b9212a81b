"""
2D-DOC payload, header, body and date parsing
"""

from .dates import (
    DATE_REFERENCE,
    hex_date_to_calendar,
    decode_hex_date,
    decode_ascii_date,
    decode_ascii_datetime,
)
from .header import (
    GS,
    US,
    HEADER_LENGTH,
    Header,
    split_payload,
    parse_header,
)
from .body import (
    BodyField,
    tokenize_body,
    extract_body,
)

__all__ = [
    'DATE_REFERENCE',
    'hex_date_to_calendar',
    'decode_hex_date',
    'decode_ascii_date',
    'decode_ascii_datetime',
    'GS',
    'US',
    'HEADER_LENGTH',
    'Header',
    'split_payload',
    'parse_header',
    'BodyField',
    'tokenize_body',
    'extract_body',
]
