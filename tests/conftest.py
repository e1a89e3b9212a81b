"""
Shared fixtures for the 2D-DOC SDK tests
"""

import base64

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

GS = "\x1d"
US = "\x1f"

SANITARY_HEADER = "DC04FR00000113371337B201FR"
SANITARY_BODY = "F0CORRINE" + GS + "F1BERTHIER" + GS + "F206121965F3FF4000" + GS + "F5XF6200620131200"
SANITARY_SIGNATURE = (
    "WZR5Y3AIRAFBIMKWLHSYX4BXNMELEVA3AXVL5IKZDX444F3A44VWXY2FKEWS4JUEOWLTSZ2MSMVW3NZ3LWO5FZKNLKVOMQT37LHV4II"
)
SANITARY_PAYLOAD = SANITARY_HEADER + SANITARY_BODY + US + SANITARY_SIGNATURE

VACCINATION_HEADER = "DC04FR0000011E6D1E6DL101FR"
VACCINATION_BODY = (
    "L0THEOULE SUR MER" + GS + "L1JEAN PAUL" + GS + "L231051962L3COVID-19" + GS + "L4J07BX03" + GS
    + "L5COMIRNATY PFIZER/BIONTECH" + GS + "L6COMIRNATY PFIZER/BIONTECH" + GS + "L71L82L901032021LACO"
)
VACCINATION_SIGNATURE = (
    "32T2SI2RUMPDLBHAFSBDF2CUE7GI4NR5WC3NSBEU6AZ7QZJZCPMCTXTVIDZAKEYO7237SQ2ZPOCMZKG7U3Q2LIMPPVJMA7TQAAKC5DY"
)
VACCINATION_PAYLOAD = VACCINATION_HEADER + VACCINATION_BODY + US + VACCINATION_SIGNATURE

# Authority key used to sign both fixture payloads, armor on a single line
FIXTURE_PUBLIC_KEY_BASE64 = (
    "MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAEqY8NfM1igIiTvsTUNuedGDSh1uAB1w8cTNzNnZ4v4in3JAUU6N3AypjQx0QMnMSShJoPvac/w5L02grgf4TCPA=="
)
FIXTURE_PUBLIC_KEY = "-----BEGIN PUBLIC KEY-----" + FIXTURE_PUBLIC_KEY_BASE64 + "-----END PUBLIC KEY-----"


def sign_message(private_key: ec.EllipticCurvePrivateKey, message: str) -> str:
    """Sign a message the way a 2D-DOC authority does: base32 of R || S without padding"""
    der_signature = private_key.sign(message.encode('utf-8'), ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der_signature)
    width = (private_key.curve.key_size + 7) // 8
    raw = r.to_bytes(width, 'big') + s.to_bytes(width, 'big')
    return base64.b32encode(raw).decode('ascii').rstrip('=')


def public_key_pem(private_key: ec.EllipticCurvePrivateKey) -> str:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode('ascii')


@pytest.fixture
def sanitary_payload():
    return SANITARY_PAYLOAD


@pytest.fixture
def vaccination_payload():
    return VACCINATION_PAYLOAD


@pytest.fixture
def fixture_public_key():
    return FIXTURE_PUBLIC_KEY


@pytest.fixture(scope="session")
def p256_private_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def p384_private_key():
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture
def signed_sanitary_payload(p256_private_key):
    """Sanitary payload signed with a freshly generated P-256 key"""
    message = SANITARY_HEADER + SANITARY_BODY
    return message + US + sign_message(p256_private_key, message)
