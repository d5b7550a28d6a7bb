"""Storage configuration schemas for obs-adapter."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

from obs_adapter.core.exceptions import ConfigurationError

REQUIRED_FIELDS = ("endpoint", "bucket", "access_key", "secret_key")


class ObsStorageConfig(BaseModel):
    """Connection settings for an OBS bucket.

    The four required fields default to empty strings so that an incomplete
    configuration can still be constructed and then rejected by
    ``validate_obs_config`` with every missing field named at once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoint: str = Field("", description="OBS endpoint host or URL")
    bucket: str = Field("", description="Target bucket name")
    access_key: str = Field("", description="OBS access key")
    secret_key: str = Field("", description="OBS secret key", repr=False)
    region_name: str = Field("us-east-1", description="Region used for signing")
    addressing_style: Literal["path", "virtual", "auto"] = Field(
        "path", description="Bucket addressing style for request URLs"
    )
    connect_timeout: float = Field(60.0, gt=0, description="Connect timeout (s)")
    read_timeout: float = Field(60.0, gt=0, description="Read timeout (s)")


def validate_obs_config(config: ObsStorageConfig) -> None:
    """Check that endpoint, bucket, access key and secret key are all set.

    Args:
        config: Configuration to check

    Raises:
        ConfigurationError: Naming every missing field
    """
    missing = [name for name in REQUIRED_FIELDS if not getattr(config, name).strip()]
    if missing:
        raise ConfigurationError(missing)


class ObsSettings(BaseSettings):
    """OBS connection settings read from ``OBS_*`` environment variables."""

    endpoint: str = ""
    bucket: str = ""
    access_key: str = ""
    secret_key: str = ""
    region_name: str = "us-east-1"

    model_config = {
        "env_prefix": "OBS_",
        "case_sensitive": False,
    }

    def to_config(self) -> ObsStorageConfig:
        """Build an (unvalidated) storage configuration from these settings."""
        return ObsStorageConfig(
            endpoint=self.endpoint,
            bucket=self.bucket,
            access_key=self.access_key,
            secret_key=self.secret_key,
            region_name=self.region_name,
        )
