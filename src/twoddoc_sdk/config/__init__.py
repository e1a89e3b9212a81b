"""
Configuration management for the 2D-DOC SDK
"""

from .sdk_config import (
    SDKConfig,
    LoggingConfig,
    ParsingConfig,
    VerificationConfig,
    CONFIG_ENV_VAR,
    VERIFICATION_MODES,
    StructuredFormatter,
    configure_logging,
    load_config,
    load_config_from_json,
    load_config_from_file,
)

__all__ = [
    'SDKConfig',
    'LoggingConfig',
    'ParsingConfig',
    'VerificationConfig',
    'CONFIG_ENV_VAR',
    'VERIFICATION_MODES',
    'StructuredFormatter',
    'configure_logging',
    'load_config',
    'load_config_from_json',
    'load_config_from_file',
]
