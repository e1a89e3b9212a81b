"""
Configuration management for the 2D-DOC SDK

Configuration is a small JSON document::

    {
        "logging": {"level": "INFO", "structured": false},
        "parsing": {"default_document_type": "sanitary"},
        "verification": {"mode": "strict", "allowed_curves": ["secp256r1"]}
    }

Every section and key is optional; missing values fall back to defaults.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..crypto.signature import DEFAULT_ALLOWED_CURVES
from ..documents import DOCUMENT_TYPES
from ..exceptions import ConfigError

CONFIG_ENV_VAR = "TWODDOC_CONFIG"

VERIFICATION_MODES = ("strict", "defensive")

PLAIN_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """Format log records as one JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"
    structured: bool = False


@dataclass
class ParsingConfig:
    """Parsing configuration"""
    default_document_type: str = "sanitary"


@dataclass
class VerificationConfig:
    """Verification configuration"""
    mode: str = "strict"
    allowed_curves: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_CURVES))


@dataclass
class SDKConfig:
    """Top-level SDK configuration"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    parsing: ParsingConfig = field(default_factory=ParsingConfig)
    verification: VerificationConfig = field(default_factory=VerificationConfig)

    def __post_init__(self):
        self._validate()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SDKConfig':
        """Build configuration from a parsed JSON dictionary"""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object", "INVALID_FORMAT")
        try:
            return cls(
                logging=LoggingConfig(**data.get('logging', {})),
                parsing=ParsingConfig(**data.get('parsing', {})),
                verification=VerificationConfig(**data.get('verification', {})),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration format: {e}", "INVALID_FORMAT") from e

    @classmethod
    def from_json(cls, json_string: str) -> 'SDKConfig':
        """Load configuration from JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'SDKConfig':
        """Load configuration from file"""
        try:
            with open(Path(file_path), 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file: {e}", "FILE_ERROR") from e
        return cls.from_json(json_string)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'SDKConfig':
        """Load configuration from the file named by ``TWODDOC_CONFIG``, or defaults"""
        environ = os.environ if environ is None else environ
        path = environ.get(CONFIG_ENV_VAR)
        if not path:
            return cls()
        return cls.from_file(path)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def _validate(self) -> None:
        """Validate the configuration"""
        level = self.logging.level.upper() if isinstance(self.logging.level, str) else None
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown logging level '{self.logging.level}'", "INVALID_LOGGING_CONFIG")

        document_type = self.parsing.default_document_type
        if not isinstance(document_type, str) or document_type.lower() not in DOCUMENT_TYPES:
            raise ConfigError(
                f"Unknown default document type '{self.parsing.default_document_type}'",
                "INVALID_PARSING_CONFIG"
            )

        if self.verification.mode not in VERIFICATION_MODES:
            raise ConfigError(
                f"Verification mode must be one of {', '.join(VERIFICATION_MODES)}",
                "INVALID_VERIFICATION_CONFIG"
            )

        curves = self.verification.allowed_curves
        if not isinstance(curves, list) or not all(isinstance(curve, str) for curve in curves):
            raise ConfigError("Allowed curves must be a list of curve names", "INVALID_VERIFICATION_CONFIG")

        if not self.verification.allowed_curves:
            raise ConfigError("At least one curve must be allowed", "INVALID_VERIFICATION_CONFIG")


def load_config_from_json(json_string: str) -> SDKConfig:
    return SDKConfig.from_json(json_string)


def load_config_from_file(file_path: Union[str, Path]) -> SDKConfig:
    return SDKConfig.from_file(file_path)


def load_config(file_path: Optional[Union[str, Path]] = None) -> SDKConfig:
    """Load configuration from ``file_path`` when given, else from the environment"""
    if file_path is not None:
        return SDKConfig.from_file(file_path)
    return SDKConfig.from_env()


def configure_logging(config: LoggingConfig, level_override: Optional[str] = None) -> None:
    """Configure the root logger from a logging configuration"""
    level = (level_override or config.level).upper()
    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
