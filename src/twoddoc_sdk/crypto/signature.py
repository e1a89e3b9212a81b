"""
ECDSA signature verification for 2D-DOC payloads

2D-DOC signatures are the raw concatenation of the ECDSA integers R and S,
base32 encoded without padding. This module reshapes them into the DER
``ECDSA-Sig-Value`` structure expected by the cryptography package and
verifies them with SHA-256 over the message (header and body, without the
unit separator).
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from ..exceptions import InvalidPublicKey, MalformedSignatureEncoding, TwoDDocError

logger = logging.getLogger(__name__)

# Curves a 2D-DOC authority may sign with
DEFAULT_ALLOWED_CURVES: Tuple[str, ...] = ("secp256r1", "secp384r1", "secp521r1")

_PEM_BLOCK = re.compile(r"-----BEGIN ([A-Z0-9 ]+)-----(.*?)-----END \1-----", re.DOTALL)
_PEM_LINE_LENGTH = 64
_PUBLIC_KEY_LABEL = "PUBLIC KEY"
_CERTIFICATE_LABELS = ("CERTIFICATE", "X509 CERTIFICATE")


class VerificationStatus(str, Enum):
    """Outcome of a signature check"""
    VALID = "valid"
    MISMATCH = "mismatch"
    ERROR = "error"


@dataclass(frozen=True)
class SignatureVerificationResult:
    """Signature check outcome that keeps the failure reason"""
    status: VerificationStatus
    error_code: Optional[str] = None
    message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID


def decode_base32_signature(signature: str) -> bytes:
    """
    Decode an RFC 4648 base32 signature, restoring the missing padding.

    Raises:
        MalformedSignatureEncoding: If the text is not valid base32
    """
    if not isinstance(signature, str):
        raise MalformedSignatureEncoding("Signature must be a base32 string")

    stripped = signature.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 8)
    try:
        return base64.b32decode(padded, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedSignatureEncoding(
            f"Invalid base32 signature: {e}",
            details={'signature_length': len(signature)}
        ) from e


def split_concatenated_signature(raw: bytes) -> Tuple[int, int]:
    """
    Split an ``R || S`` signature into its two big-endian integers.

    Raises:
        MalformedSignatureEncoding: If the length is empty or odd
    """
    if not raw or len(raw) % 2 != 0:
        raise MalformedSignatureEncoding(
            f"Signature length {len(raw)} cannot be split into R and S",
            details={'signature_bytes': len(raw)}
        )

    width = len(raw) // 2
    return int.from_bytes(raw[:width], 'big'), int.from_bytes(raw[width:], 'big')


def concatenated_to_der(raw: bytes) -> bytes:
    """Re-encode an ``R || S`` signature as a DER ``ECDSA-Sig-Value``"""
    r, s = split_concatenated_signature(raw)
    return encode_dss_signature(r, s)


def _normalize_pem(pem: str) -> Tuple[str, bytes]:
    """Return the block label and a newline-wrapped PEM, whatever the input layout"""
    match = _PEM_BLOCK.search(pem)
    if match is None:
        raise InvalidPublicKey("Public key is not PEM armored")

    label = match.group(1).strip()
    payload = "".join(match.group(2).split())
    if label in _CERTIFICATE_LABELS:
        label = "CERTIFICATE"

    lines = [payload[i:i + _PEM_LINE_LENGTH] for i in range(0, len(payload), _PEM_LINE_LENGTH)]
    normalized = "\n".join([f"-----BEGIN {label}-----"] + lines + [f"-----END {label}-----", ""])
    return label, normalized.encode('ascii', errors='replace')


def load_public_key(
    public_key_pem: Union[str, bytes],
    allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
) -> ec.EllipticCurvePublicKey:
    """
    Load an EC public key from a public key or X.509 certificate PEM block.

    Args:
        public_key_pem: ``-----BEGIN PUBLIC KEY-----`` or
            ``-----BEGIN CERTIFICATE-----`` block, single-line armor accepted
        allowed_curves: Curve names the key may use

    Returns:
        ec.EllipticCurvePublicKey: The loaded key

    Raises:
        InvalidPublicKey: If the PEM cannot be parsed or is not an allowed EC key
    """
    if isinstance(public_key_pem, bytes):
        public_key_pem = public_key_pem.decode('ascii', errors='replace')
    if not isinstance(public_key_pem, str):
        raise InvalidPublicKey("Public key must be a PEM string")

    label, pem_bytes = _normalize_pem(public_key_pem)
    try:
        if label == _PUBLIC_KEY_LABEL:
            key = serialization.load_pem_public_key(pem_bytes)
        elif label == "CERTIFICATE":
            key = x509.load_pem_x509_certificate(pem_bytes).public_key()
        else:
            raise InvalidPublicKey(f"Unsupported PEM block '{label}'", details={'label': label})
    except InvalidPublicKey:
        raise
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidPublicKey(f"Failed to parse PEM public key: {e}", details={'label': label}) from e

    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise InvalidPublicKey(
            "Public key is not an elliptic curve key",
            details={'key_type': type(key).__name__}
        )

    allowed = tuple(allowed_curves)
    if key.curve.name not in allowed:
        raise InvalidPublicKey(
            f"Curve {key.curve.name} is not allowed",
            details={'curve': key.curve.name, 'allowed_curves': list(allowed)}
        )

    return key


def verify_signature(
    message: Union[str, bytes],
    signature_base32: str,
    public_key_pem: Union[str, bytes],
    allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
) -> bool:
    """
    Verify a 2D-DOC signature, raising on anything that prevents the check.

    Args:
        message: Signed message (header and body)
        signature_base32: Base32 ``R || S`` signature
        public_key_pem: PEM public key or X.509 certificate
        allowed_curves: Curve names the key may use

    Returns:
        bool: True if the signature matches the message, False otherwise

    Raises:
        MalformedSignatureEncoding: If the signature cannot be decoded or split
        InvalidPublicKey: If the public key cannot be loaded
    """
    raw_signature = decode_base32_signature(signature_base32)
    der_signature = concatenated_to_der(raw_signature)
    public_key = load_public_key(public_key_pem, allowed_curves)

    expected_width = (public_key.curve.key_size + 7) // 8
    if len(raw_signature) != 2 * expected_width:
        raise MalformedSignatureEncoding(
            f"Signature is {len(raw_signature)} bytes, {public_key.curve.name} needs {2 * expected_width}",
            details={'signature_bytes': len(raw_signature), 'curve': public_key.curve.name}
        )

    message_bytes = message.encode('utf-8') if isinstance(message, str) else message

    try:
        public_key.verify(der_signature, message_bytes, ec.ECDSA(hashes.SHA256()))
    except InvalidSignature:
        logger.debug("Signature does not match message")
        return False

    return True


def inspect_signature(
    message: Union[str, bytes],
    signature_base32: str,
    public_key_pem: Union[str, bytes],
    allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
) -> SignatureVerificationResult:
    """Verify a signature and report the outcome with its failure reason"""
    try:
        if verify_signature(message, signature_base32, public_key_pem, allowed_curves):
            return SignatureVerificationResult(VerificationStatus.VALID)
        return SignatureVerificationResult(
            VerificationStatus.MISMATCH,
            error_code="SIGNATURE_MISMATCH",
            message="Signature does not match message"
        )
    except TwoDDocError as e:
        return SignatureVerificationResult(VerificationStatus.ERROR, error_code=e.error_code, message=str(e))


def try_verify_signature(
    message: Union[str, bytes],
    signature_base32: str,
    public_key_pem: Union[str, bytes],
    allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
) -> bool:
    """
    Verify a 2D-DOC signature without ever raising.

    Returns:
        bool: True only if the signature was checked and matches
    """
    try:
        return verify_signature(message, signature_base32, public_key_pem, allowed_curves)
    except Exception as e:
        logger.debug("Signature verification failed: %s", e)
        return False
