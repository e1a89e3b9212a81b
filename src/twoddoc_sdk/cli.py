"""
Command-line interface for the 2D-DOC Python SDK
Parses 2D-DOC payloads and verifies their signatures
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from . import __version__
from .certificate import Certificate, parse_certificate
from .config import SDKConfig, configure_logging, load_config
from .documents import get_available_document_types
from .exceptions import TwoDDocError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_SIGNATURE_MISMATCH = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='twoddoc',
        description='Parse 2D-DOC certificates and verify their signatures'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'2D-DOC Python SDK {__version__}'
    )

    parser.add_argument(
        '--config',
        help='JSON configuration file (default: $TWODDOC_CONFIG)'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Override the configured logging level'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    setup_parse_parser(subparsers)
    setup_verify_parser(subparsers)
    subparsers.add_parser('types', help='List supported document types')

    return parser


def _add_payload_arguments(subparser) -> None:
    subparser.add_argument(
        'payload',
        nargs='?',
        help='Raw 2D-DOC payload (read from --file or stdin when omitted)'
    )
    subparser.add_argument('--file', help='Read the payload from a file')
    subparser.add_argument(
        '--type',
        dest='document_type',
        choices=get_available_document_types(),
        help='Document type of the payload (default: from configuration)'
    )


def setup_parse_parser(subparsers):
    """Setup parse subcommand."""
    parse_parser = subparsers.add_parser('parse', help='Parse a 2D-DOC payload')
    _add_payload_arguments(parse_parser)
    parse_parser.add_argument(
        '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )


def setup_verify_parser(subparsers):
    """Setup verify subcommand."""
    verify_parser = subparsers.add_parser('verify', help='Verify the signature of a 2D-DOC payload')
    _add_payload_arguments(verify_parser)
    verify_parser.add_argument(
        '--public-key',
        required=True,
        help='PEM file holding the public key or X.509 certificate'
    )
    mode_group = verify_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '--defensive',
        dest='mode',
        action='store_const',
        const='defensive',
        help='Report any failure as an invalid signature'
    )
    mode_group.add_argument(
        '--strict',
        dest='mode',
        action='store_const',
        const='strict',
        help='Report decoding and key errors separately (default)'
    )


def read_payload(args) -> str:
    """Read the payload from the positional argument, a file, or stdin."""
    if args.payload is not None:
        return args.payload
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read().rstrip('\r\n')
    return sys.stdin.read().rstrip('\r\n')


def _parse_from_args(args, config: SDKConfig) -> Certificate:
    document_type = args.document_type or config.parsing.default_document_type
    return parse_certificate(read_payload(args), document_type)


def certificate_to_dict(certificate: Certificate) -> dict:
    header = asdict(certificate.header)
    header.pop('raw')
    return {
        'document_type': type(certificate.body).DOCUMENT_KIND,
        'header': header,
        'body': asdict(certificate.body),
        'signature': certificate.signature,
    }


def handle_parse_command(args, config: SDKConfig) -> int:
    """Handle payload parsing."""
    certificate = _parse_from_args(args, config)
    result = certificate_to_dict(certificate)

    if args.format == 'json':
        print(json.dumps(result, indent=2))
        return EXIT_OK

    print(f"Document type: {result['document_type']}")
    print("Header:")
    for name, value in result['header'].items():
        print(f"  {name}: {value}")
    print("Body:")
    for name, value in result['body'].items():
        print(f"  {name}: {value}")

    return EXIT_OK


def handle_verify_command(args, config: SDKConfig) -> int:
    """Handle signature verification."""
    certificate = _parse_from_args(args, config)

    with open(args.public_key, 'r', encoding='utf-8') as f:
        public_key_pem = f.read()

    mode = args.mode or config.verification.mode
    allowed_curves = config.verification.allowed_curves

    if mode == 'defensive':
        valid = certificate.try_verify_signature(public_key_pem, allowed_curves)
    else:
        valid = certificate.verify_signature(public_key_pem, allowed_curves)

    if valid:
        print("valid")
        return EXIT_OK

    print("invalid")
    return EXIT_SIGNATURE_MISMATCH


def handle_types_command() -> int:
    """Handle listing document types."""
    for name in get_available_document_types():
        print(name)
    return EXIT_OK


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, 2 for an invalid signature, 1 for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(config.logging, args.log_level)

        if args.command == 'parse':
            return handle_parse_command(args, config)
        elif args.command == 'verify':
            return handle_verify_command(args, config)
        elif args.command == 'types':
            return handle_types_command()
        else:
            parser.print_help()
            return EXIT_ERROR

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except TwoDDocError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error [{e.error_code}]: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
