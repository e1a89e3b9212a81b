"""
Example usage of the 2D-DOC Python SDK

This example parses the sample sanitary and vaccination certificates and
verifies their signatures with the sample authority key.
"""

from twoddoc_sdk import (
    InvalidPublicKey,
    parse_sanitary,
    parse_vaccination,
    hex_date_to_calendar,
)

GS = "\x1d"
US = "\x1f"

AUTHORITY_KEY = (
    "-----BEGIN PUBLIC KEY-----"
    "MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAEqY8NfM1igIiTvsTUNuedGDSh1uAB1w8cTNzNnZ4v4in3JAUU6N3AypjQx0QMnMSShJoPvac/w5L02grgf4TCPA=="
    "-----END PUBLIC KEY-----"
)

SANITARY_PAYLOAD = (
    "DC04FR00000113371337B201FR"
    "F0CORRINE" + GS + "F1BERTHIER" + GS + "F206121965F3FF4000" + GS + "F5XF6200620131200"
    + US + "WZR5Y3AIRAFBIMKWLHSYX4BXNMELEVA3AXVL5IKZDX444F3A44VWXY2FKEWS4JUEOWLTSZ2MSMVW3NZ3LWO5FZKNLKVOMQT37LHV4II"
)

VACCINATION_PAYLOAD = (
    "DC04FR0000011E6D1E6DL101FR"
    "L0THEOULE SUR MER" + GS + "L1JEAN PAUL" + GS + "L231051962L3COVID-19" + GS + "L4J07BX03" + GS
    + "L5COMIRNATY PFIZER/BIONTECH" + GS + "L6COMIRNATY PFIZER/BIONTECH" + GS + "L71L82L901032021LACO"
    + US + "32T2SI2RUMPDLBHAFSBDF2CUE7GI4NR5WC3NSBEU6AZ7QZJZCPMCTXTVIDZAKEYO7237SQ2ZPOCMZKG7U3Q2LIMPPVJMA7TQAAKC5DY"
)


def sanitary_example():
    """Parse and verify a sanitary certificate"""
    print("Sanitary certificate")
    print("-" * 40)

    certificate = parse_sanitary(SANITARY_PAYLOAD)
    body = certificate.body
    print(f"Authority: {certificate.dc_authority_id}/{certificate.dc_certificate_id}")
    print(f"Issued: {hex_date_to_calendar(certificate.header.document_date_hex)}")
    print(f"Patient: {body.firstname} {body.lastname}, born {body.birthdate}")
    print(f"Result: {body.analysis_result_label} ({body.analysis_datetime})")
    print(f"Signature valid: {certificate.verify_signature(AUTHORITY_KEY)}")

    tampered = parse_sanitary(SANITARY_PAYLOAD.replace("BERTHIER", "DUPOND"))
    print(f"Tampered signature valid: {tampered.verify_signature(AUTHORITY_KEY)}")
    print()


def vaccination_example():
    """Parse and verify a vaccination certificate"""
    print("Vaccination certificate")
    print("-" * 40)

    certificate = parse_vaccination(VACCINATION_PAYLOAD)
    body = certificate.body
    print(f"Vaccine: {body.vaccine} by {body.vaccine_maker}")
    print(f"Doses: {body.doses_taken}/{body.doses_expected}, last on {body.last_dose_date}")

    result = certificate.inspect_signature(AUTHORITY_KEY)
    print(f"Signature status: {result.status.value}")
    print()


def error_handling_example():
    """Compare strict and defensive verification"""
    print("Strict and defensive verification")
    print("-" * 40)

    certificate = parse_sanitary(SANITARY_PAYLOAD)
    bare_key = AUTHORITY_KEY.replace("-----BEGIN PUBLIC KEY-----", "").replace("-----END PUBLIC KEY-----", "")

    try:
        certificate.verify_signature(bare_key)
    except InvalidPublicKey as e:
        print(f"Strict: {e.error_code}: {e}")

    print(f"Defensive: {certificate.try_verify_signature(bare_key)}")
    print()


def main():
    """Run all examples"""
    print("2D-DOC Python SDK Examples")
    print("=" * 60)
    print()

    sanitary_example()
    vaccination_example()
    error_handling_example()

    print("All examples completed!")


if __name__ == '__main__':
    main()
