"""Tests for storage configuration schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from obs_adapter.core.exceptions import ConfigurationError, ValidationError
from obs_adapter.schemas import ObsSettings, ObsStorageConfig, validate_obs_config

COMPLETE = {
    "endpoint": "obs.ap-southeast-2.myhuaweicloud.com",
    "bucket": "thanos-obs-test",
    "access_key": "accesskey",
    "secret_key": "secretkey",
}


class TestValidateObsConfig:
    """Test configuration validation."""

    def test_normal_configuration(self):
        """Test that a complete configuration passes."""
        assert validate_obs_config(ObsStorageConfig(**COMPLETE)) is None

    @pytest.mark.parametrize(
        "missing", ["endpoint", "bucket", "access_key", "secret_key"]
    )
    def test_missing_field(self, missing):
        """Test that each required field is enforced."""
        config = ObsStorageConfig(**{**COMPLETE, missing: ""})

        with pytest.raises(ConfigurationError) as exc_info:
            validate_obs_config(config)

        assert exc_info.value.missing_fields == (missing,)
        assert missing in str(exc_info.value)

    def test_all_missing_fields_reported(self):
        """Test that every missing field is named, in declaration order."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_obs_config(ObsStorageConfig(bucket="thanos-obs-test"))

        assert exc_info.value.missing_fields == (
            "endpoint",
            "access_key",
            "secret_key",
        )

    def test_whitespace_counts_as_missing(self):
        """Test that blank values are rejected."""
        config = ObsStorageConfig(**{**COMPLETE, "secret_key": "   "})

        with pytest.raises(ConfigurationError, match="secret_key"):
            validate_obs_config(config)

    def test_configuration_error_is_validation_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ConfigurationError, ValidationError)


class TestObsStorageConfig:
    """Test the configuration model itself."""

    def test_defaults(self):
        """Test transport defaults."""
        config = ObsStorageConfig(**COMPLETE)
        assert config.region_name == "us-east-1"
        assert config.addressing_style == "path"
        assert config.connect_timeout == 60.0
        assert config.read_timeout == 60.0

    def test_config_is_immutable(self):
        """Test that the configuration cannot be changed after creation."""
        config = ObsStorageConfig(**COMPLETE)
        with pytest.raises(PydanticValidationError):
            config.bucket = "other"

    def test_extra_fields_forbidden(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(PydanticValidationError):
            ObsStorageConfig(**COMPLETE, buckets="a,b")

    def test_invalid_addressing_style(self):
        """Test addressing style validation."""
        with pytest.raises(PydanticValidationError):
            ObsStorageConfig(**COMPLETE, addressing_style="sideways")

    def test_secret_key_hidden_from_repr(self):
        """Test that the secret does not leak through repr."""
        assert "secretkey" not in repr(ObsStorageConfig(**COMPLETE))


class TestObsSettings:
    """Test environment-backed settings."""

    def test_settings_from_environment(self, monkeypatch):
        """Test that OBS_* variables are picked up."""
        monkeypatch.setenv("OBS_ENDPOINT", COMPLETE["endpoint"])
        monkeypatch.setenv("OBS_BUCKET", COMPLETE["bucket"])
        monkeypatch.setenv("OBS_ACCESS_KEY", COMPLETE["access_key"])
        monkeypatch.setenv("OBS_SECRET_KEY", COMPLETE["secret_key"])
        monkeypatch.setenv("OBS_REGION_NAME", "ap-southeast-2")

        config = ObsSettings().to_config()

        assert config.endpoint == COMPLETE["endpoint"]
        assert config.bucket == COMPLETE["bucket"]
        assert config.region_name == "ap-southeast-2"
        validate_obs_config(config)

    def test_settings_default_to_incomplete(self):
        """Test that an empty environment yields a configuration that fails."""
        with pytest.raises(ConfigurationError):
            validate_obs_config(ObsSettings().to_config())
