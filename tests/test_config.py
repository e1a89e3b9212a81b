"""
Unit tests for SDK configuration loading
"""

import json
import logging
import sys

import pytest

from twoddoc_sdk.config import (
    CONFIG_ENV_VAR,
    SDKConfig,
    LoggingConfig,
    StructuredFormatter,
    VerificationConfig,
    configure_logging,
    load_config,
    load_config_from_file,
    load_config_from_json,
)
from twoddoc_sdk.crypto.signature import DEFAULT_ALLOWED_CURVES
from twoddoc_sdk.exceptions import ConfigError


class TestSDKConfig:
    """Test cases for configuration objects"""

    def test_defaults(self):
        """Test default configuration values"""
        config = SDKConfig()

        assert config.logging.level == "WARNING"
        assert config.logging.structured is False
        assert config.parsing.default_document_type == "sanitary"
        assert config.verification.mode == "strict"
        assert config.verification.allowed_curves == list(DEFAULT_ALLOWED_CURVES)

    def test_invalid_mode(self):
        """Test that unknown verification modes are rejected"""
        with pytest.raises(ConfigError) as excinfo:
            SDKConfig(verification=VerificationConfig(mode="lenient"))

        assert excinfo.value.error_code == "INVALID_VERIFICATION_CONFIG"

    def test_no_allowed_curves(self):
        """Test that an empty curve list is rejected"""
        with pytest.raises(ConfigError):
            SDKConfig(verification=VerificationConfig(allowed_curves=[]))

    def test_invalid_logging_level(self):
        """Test that unknown logging levels are rejected"""
        with pytest.raises(ConfigError) as excinfo:
            SDKConfig(logging=LoggingConfig(level="LOUD"))

        assert excinfo.value.error_code == "INVALID_LOGGING_CONFIG"

    def test_to_dict(self):
        """Test exporting configuration as a dictionary"""
        data = SDKConfig().to_dict()

        assert data['verification']['mode'] == "strict"
        assert data['logging']['level'] == "WARNING"


class TestConfigLoading:
    """Test cases for loading configuration from JSON, files and environment"""

    def test_from_json(self):
        """Test loading a partial JSON configuration"""
        config = load_config_from_json(json.dumps({
            "logging": {"level": "debug"},
            "parsing": {"default_document_type": "vaccination"},
            "verification": {"mode": "defensive", "allowed_curves": ["secp256r1"]},
        }))

        assert config.logging.level == "debug"
        assert config.logging.structured is False
        assert config.parsing.default_document_type == "vaccination"
        assert config.verification.mode == "defensive"
        assert config.verification.allowed_curves == ["secp256r1"]

    def test_from_json_empty_object(self):
        """Test that an empty object yields defaults"""
        assert load_config_from_json("{}") == SDKConfig()

    def test_invalid_json(self):
        """Test that invalid JSON is rejected"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json("{not json")

        assert excinfo.value.error_code == "PARSE_ERROR"

    def test_unknown_key(self):
        """Test that unknown keys are rejected"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json('{"logging": {"colour": true}}')

        assert excinfo.value.error_code == "INVALID_FORMAT"

    def test_not_an_object(self):
        """Test that a JSON array is rejected"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json("[]")

        assert excinfo.value.error_code == "INVALID_FORMAT"

    def test_unknown_document_type(self):
        """Test that the default document type must be registered"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json('{"parsing": {"default_document_type": "passport"}}')

        assert excinfo.value.error_code == "INVALID_PARSING_CONFIG"

    def test_document_type_not_a_string(self):
        """Test that a non-string default document type is a configuration error"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json('{"parsing": {"default_document_type": 5}}')

        assert excinfo.value.error_code == "INVALID_PARSING_CONFIG"

    @pytest.mark.parametrize("curves", ["\"secp256r1\"", "[256]", "{\"secp256r1\": true}"])
    def test_allowed_curves_not_a_list_of_names(self, curves):
        """Test that allowed curves must be a list of curve names"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_json('{"verification": {"allowed_curves": ' + curves + '}}')

        assert excinfo.value.error_code == "INVALID_VERIFICATION_CONFIG"

    def test_from_file(self, tmp_path):
        """Test loading configuration from a file"""
        path = tmp_path / "twoddoc.json"
        path.write_text('{"verification": {"mode": "defensive"}}', encoding='utf-8')

        assert load_config_from_file(path).verification.mode == "defensive"
        assert load_config(path).verification.mode == "defensive"

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported"""
        with pytest.raises(ConfigError) as excinfo:
            load_config_from_file(tmp_path / "missing.json")

        assert excinfo.value.error_code == "FILE_ERROR"

    def test_from_env(self, tmp_path):
        """Test loading configuration named by the environment"""
        path = tmp_path / "twoddoc.json"
        path.write_text('{"logging": {"structured": true}}', encoding='utf-8')

        config = SDKConfig.from_env({CONFIG_ENV_VAR: str(path)})

        assert config.logging.structured is True

    def test_from_env_unset(self):
        """Test that defaults are used when the variable is unset"""
        assert SDKConfig.from_env({}) == SDKConfig()

    def test_load_config_uses_environment(self, tmp_path, monkeypatch):
        """Test that load_config falls back to the environment"""
        path = tmp_path / "twoddoc.json"
        path.write_text('{"parsing": {"default_document_type": "vaccination"}}', encoding='utf-8')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().parsing.default_document_type == "vaccination"


class TestConfigureLogging:
    """Test cases for logging setup"""

    def test_configure_logging(self, monkeypatch):
        """Test that the configured level and formatter reach basicConfig"""
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(LoggingConfig(level="info", structured=True))

        assert calls[0]['level'] == "INFO"
        assert isinstance(calls[0]['handlers'][0].formatter, StructuredFormatter)
        assert calls[0]['force'] is True

    def test_plain_format(self, monkeypatch):
        """Test that plain logging does not use the JSON formatter"""
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(LoggingConfig())

        assert not isinstance(calls[0]['handlers'][0].formatter, StructuredFormatter)

    def test_level_override(self, monkeypatch):
        """Test that an explicit level overrides the configuration"""
        calls = []
        monkeypatch.setattr("logging.basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(LoggingConfig(), level_override="DEBUG")

        assert calls[0]['level'] == "DEBUG"


class TestStructuredFormatter:
    """Test cases for JSON log lines"""

    def test_message_with_quotes(self):
        """Test that quotes and newlines in messages still produce valid JSON"""
        record = logging.LogRecord(
            "twoddoc_sdk.parsing", logging.WARNING, __file__, 1,
            'Malformed body near "F1"\nat offset %d', (12,), None
        )

        entry = json.loads(StructuredFormatter().format(record))

        assert entry['message'] == 'Malformed body near "F1"\nat offset 12'
        assert entry['level'] == "WARNING"
        assert entry['logger'] == "twoddoc_sdk.parsing"

    def test_exception_included(self):
        """Test that exception tracebacks are kept inside the JSON object"""
        try:
            raise ValueError("bad \"value\"")
        except ValueError:
            record = logging.LogRecord(
                "twoddoc_sdk", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        entry = json.loads(StructuredFormatter().format(record))

        assert 'ValueError: bad "value"' in entry['exception']
