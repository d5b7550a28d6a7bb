"""Configuration management for obs-adapter."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support.

    ``sdk_log_level`` applies to the boto3/botocore/urllib3 loggers, which are
    far noisier than the adapter's own events at DEBUG.
    """

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    sdk_log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "obs-adapter"

    model_config = {
        "env_prefix": "OBS_ADAPTER_",
        "case_sensitive": False,
    }


settings = Settings()
