"""
2D-DOC payload splitting and header parsing

A payload is ``HEADER BODY <US> SIGNATURE``. The header is 26 fixed-width
characters (format version 04)::

    DC VV AAAA CCCC DDDD SSSS TT PP CC
    │  │  │    │    │    │    │  │  └── Document country (ISO 3166 alpha-2)
    │  │  │    │    │    │    │  └───── Document perimeter
    │  │  │    │    │    │    └──────── Document type
    │  │  │    │    │    └───────────── Signature date (hex days)
    │  │  │    │    └────────────────── Document date (hex days)
    │  │  │    └─────────────────────── Certificate ID
    │  │  └──────────────────────────── Certification authority ID
    │  └─────────────────────────────── Version
    └────────────────────────────────── Marker "DC"
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from ..exceptions import MalformedHeader, MalformedPayload
from .dates import decode_hex_date

logger = logging.getLogger(__name__)

# Control characters
GS = "\x1d"  # Group Separator, optional terminator of a body field
US = "\x1f"  # Unit Separator, end of message and start of signature

HEADER_MARKER = "DC"
HEADER_LENGTH = 26

_DIGITS = re.compile(r"[0-9]+", re.ASCII)
_ALNUM = re.compile(r"[A-Z0-9]+", re.ASCII | re.IGNORECASE)
_HEX = re.compile(r"[A-F0-9]+", re.ASCII | re.IGNORECASE)
_ALPHA = re.compile(r"[A-Z]+", re.ASCII | re.IGNORECASE)

# RFC 4648 base32 alphabet, padding is optional
SIGNATURE_PATTERN = re.compile(r"[A-Z2-7]+=*", re.ASCII | re.IGNORECASE)

# (name, width, charset) in header order
HEADER_FIELDS: List[Tuple[str, int, Pattern[str]]] = [
    ("marker", 2, re.compile(HEADER_MARKER, re.IGNORECASE)),
    ("version", 2, _DIGITS),
    ("authority_id", 4, _ALNUM),
    ("certificate_id", 4, _ALNUM),
    ("document_date", 4, _HEX),
    ("document_signature_date", 4, _HEX),
    ("document_type_id", 2, _ALNUM),
    ("document_perimeter_id", 2, _ALNUM),
    ("document_country", 2, _ALPHA),
]


@dataclass(frozen=True)
class Header:
    """
    Parsed 2D-DOC header.

    Attributes:
        raw: The header text as found in the payload
        version: 2D-DOC format version (e.g. "04")
        authority_id: Certification authority ID
        certificate_id: Signing certificate ID
        document_date: Document issue date, rendered by ``decode_hex_date``
        document_signature_date: Signature date, rendered by ``decode_hex_date``
        document_type_id: Document type ID
        document_perimeter_id: Document perimeter ID
        document_country: Document country (ISO 3166 alpha-2)
        document_date_hex: Raw hex value of the issue date
        document_signature_date_hex: Raw hex value of the signature date
    """
    raw: str
    version: str
    authority_id: str
    certificate_id: str
    document_date: str
    document_signature_date: str
    document_type_id: str
    document_perimeter_id: str
    document_country: str
    document_date_hex: str
    document_signature_date_hex: str


def split_payload(data: str) -> Tuple[str, str]:
    """
    Split a raw payload into message and base32 signature.

    Args:
        data: Raw 2D-DOC payload

    Returns:
        Tuple[str, str]: ``(message, signature)``

    Raises:
        MalformedPayload: If the payload is not ``HEADER BODY <US> SIGNATURE``
    """
    if not isinstance(data, str):
        raise MalformedPayload("Payload must be a string", details={'type': type(data).__name__})

    parts = data.split(US)
    if len(parts) != 2:
        raise MalformedPayload(
            "Malformed data, unable to split message and signature",
            details={'separator_count': len(parts) - 1}
        )

    message, signature = parts
    if len(message) <= HEADER_LENGTH:
        raise MalformedPayload(
            "Malformed data, message is too short to hold a header and a body",
            details={'message_length': len(message)}
        )

    if not SIGNATURE_PATTERN.fullmatch(signature):
        raise MalformedPayload(
            "Malformed data, signature is not a base32 string",
            details={'signature_length': len(signature)}
        )

    return message, signature


def parse_header(message: str) -> Header:
    """
    Validate and tokenize the fixed-width header at the start of a message.

    Args:
        message: Message (header followed by body)

    Returns:
        Header: Parsed header

    Raises:
        MalformedHeader: If a header field is missing or out of its charset
    """
    if len(message) < HEADER_LENGTH:
        raise MalformedHeader(
            "Malformed header, unable to parse data",
            details={'length': len(message), 'expected_length': HEADER_LENGTH}
        )

    values = {}
    offset = 0
    for name, width, charset in HEADER_FIELDS:
        value = message[offset:offset + width]
        if not charset.fullmatch(value):
            raise MalformedHeader(
                f"Malformed header, invalid {name} field",
                details={'field': name, 'offset': offset, 'value': value}
            )
        values[name] = value
        offset += width

    logger.debug("Parsed 2D-DOC header version %s, type %s", values['version'], values['document_type_id'])

    return Header(
        raw=message[:HEADER_LENGTH],
        version=values['version'],
        authority_id=values['authority_id'],
        certificate_id=values['certificate_id'],
        document_date=decode_hex_date(values['document_date']),
        document_signature_date=decode_hex_date(values['document_signature_date']),
        document_type_id=values['document_type_id'],
        document_perimeter_id=values['document_perimeter_id'],
        document_country=values['document_country'],
        document_date_hex=values['document_date'],
        document_signature_date_hex=values['document_signature_date'],
    )
