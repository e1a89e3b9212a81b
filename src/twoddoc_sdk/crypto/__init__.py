"""
Cryptographic operations for the 2D-DOC SDK
"""

from .signature import (
    DEFAULT_ALLOWED_CURVES,
    VerificationStatus,
    SignatureVerificationResult,
    decode_base32_signature,
    split_concatenated_signature,
    concatenated_to_der,
    load_public_key,
    verify_signature,
    try_verify_signature,
    inspect_signature,
)

__all__ = [
    'DEFAULT_ALLOWED_CURVES',
    'VerificationStatus',
    'SignatureVerificationResult',
    'decode_base32_signature',
    'split_concatenated_signature',
    'concatenated_to_der',
    'load_public_key',
    'verify_signature',
    'try_verify_signature',
    'inspect_signature',
]
