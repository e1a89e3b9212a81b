"""
Immutable 2D-DOC certificate record

A :class:`Certificate` is built once from a complete payload string: the
payload is split, the header parsed and the body extracted with the body
type chosen by the caller. Any grammar violation raises, so a certificate
instance always holds a fully parsed document.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Type, TypeVar, Union

from .crypto.signature import (
    DEFAULT_ALLOWED_CURVES,
    SignatureVerificationResult,
    inspect_signature,
    try_verify_signature,
    verify_signature,
)
from .documents import SanitaryBody, VaccinationBody, get_document_type
from .parsing.body import extract_body
from .parsing.header import Header, parse_header, split_payload

logger = logging.getLogger(__name__)

BodyT = TypeVar('BodyT')


@dataclass(frozen=True)
class Certificate(Generic[BodyT]):
    """
    Parsed 2D-DOC certificate.

    Attributes:
        data: Raw 2D-DOC payload
        message: Signed part of the payload (header and body)
        header: Parsed header
        body: Parsed body record of the requested document type
        signature: Signature, still base32 encoded
    """
    data: str
    message: str
    header: Header
    body: BodyT
    signature: str

    @classmethod
    def parse(cls, data: str, body_type: Type[BodyT]) -> 'Certificate[BodyT]':
        """
        Parse a raw payload as a certificate of ``body_type``.

        Args:
            data: Raw 2D-DOC payload
            body_type: Body record class (e.g. ``SanitaryBody``)

        Returns:
            Certificate: The parsed certificate

        Raises:
            MalformedPayload: If message and signature cannot be split
            MalformedHeader: If the header is invalid
            MalformedBody: If the body does not match ``body_type``
        """
        message, signature = split_payload(data)
        header = parse_header(message)
        body = extract_body(body_type, message[len(header.raw):])

        logger.debug(
            "Parsed %s certificate %s/%s",
            body_type.__name__, header.authority_id, header.certificate_id
        )
        return cls(data=data, message=message, header=header, body=body, signature=signature)

    @property
    def raw_header(self) -> str:
        return self.header.raw

    @property
    def raw_body(self) -> str:
        return self.message[len(self.header.raw):]

    @property
    def dc_version(self) -> str:
        return self.header.version

    @property
    def dc_authority_id(self) -> str:
        return self.header.authority_id

    @property
    def dc_certificate_id(self) -> str:
        return self.header.certificate_id

    @property
    def dc_document_date(self) -> str:
        return self.header.document_date

    @property
    def dc_document_signature_date(self) -> str:
        return self.header.document_signature_date

    @property
    def dc_document_type_id(self) -> str:
        return self.header.document_type_id

    @property
    def dc_document_perimeter_id(self) -> str:
        return self.header.document_perimeter_id

    @property
    def dc_document_country(self) -> str:
        return self.header.document_country

    def verify_signature(
        self,
        public_key_pem: Union[str, bytes],
        allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
    ) -> bool:
        """
        Verify the certificate signature with the provided public key.

        Args:
            public_key_pem: ``-----BEGIN PUBLIC KEY-----`` or
                ``-----BEGIN CERTIFICATE-----`` PEM block
            allowed_curves: Curve names the key may use

        Returns:
            bool: True if the signature is valid for this certificate

        Raises:
            MalformedSignatureEncoding: If the signature cannot be decoded
            InvalidPublicKey: If the public key cannot be loaded
        """
        return verify_signature(self.message, self.signature, public_key_pem, allowed_curves)

    def try_verify_signature(
        self,
        public_key_pem: Union[str, bytes],
        allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
    ) -> bool:
        """Verify the certificate signature, returning False instead of raising"""
        return try_verify_signature(self.message, self.signature, public_key_pem, allowed_curves)

    def inspect_signature(
        self,
        public_key_pem: Union[str, bytes],
        allowed_curves: Iterable[str] = DEFAULT_ALLOWED_CURVES,
    ) -> SignatureVerificationResult:
        return inspect_signature(self.message, self.signature, public_key_pem, allowed_curves)


def parse_certificate(data: str, document_type: Union[str, Type[BodyT]]) -> Certificate:
    """
    Parse a payload with a document type given by name or by body class.

    Raises:
        UnknownDocumentType: If ``document_type`` is an unknown name
        MalformedData: If the payload does not match the document grammar
    """
    body_type = get_document_type(document_type) if isinstance(document_type, str) else document_type
    return Certificate.parse(data, body_type)


def parse_sanitary(data: str) -> Certificate[SanitaryBody]:
    return Certificate.parse(data, SanitaryBody)


def parse_vaccination(data: str) -> Certificate[VaccinationBody]:
    return Certificate.parse(data, VaccinationBody)
