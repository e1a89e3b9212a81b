"""
2D-DOC Python SDK
Parsing and signature verification of 2D-DOC certificates
"""

from .version import __version__
from .certificate import (
    Certificate,
    parse_certificate,
    parse_sanitary,
    parse_vaccination,
)
from .documents import (
    SanitaryBody,
    VaccinationBody,
    DOCUMENT_TYPES,
    get_document_type,
    get_available_document_types,
)
from .parsing import (
    Header,
    BodyField,
    decode_hex_date,
    hex_date_to_calendar,
    decode_ascii_date,
    decode_ascii_datetime,
)
from .crypto import (
    VerificationStatus,
    SignatureVerificationResult,
    verify_signature,
    try_verify_signature,
    inspect_signature,
    load_public_key,
)
from .exceptions import (
    TwoDDocError,
    MalformedData,
    MalformedPayload,
    MalformedHeader,
    MalformedBody,
    MalformedSignatureEncoding,
    InvalidPublicKey,
    UnknownDocumentType,
    ConfigError,
)

__all__ = [
    '__version__',
    # Certificates
    'Certificate',
    'parse_certificate',
    'parse_sanitary',
    'parse_vaccination',
    # Document types
    'SanitaryBody',
    'VaccinationBody',
    'DOCUMENT_TYPES',
    'get_document_type',
    'get_available_document_types',
    # Parsing
    'Header',
    'BodyField',
    'decode_hex_date',
    'hex_date_to_calendar',
    'decode_ascii_date',
    'decode_ascii_datetime',
    # Verification
    'VerificationStatus',
    'SignatureVerificationResult',
    'verify_signature',
    'try_verify_signature',
    'inspect_signature',
    'load_public_key',
    # Exceptions
    'TwoDDocError',
    'MalformedData',
    'MalformedPayload',
    'MalformedHeader',
    'MalformedBody',
    'MalformedSignatureEncoding',
    'InvalidPublicKey',
    'UnknownDocumentType',
    'ConfigError',
]
