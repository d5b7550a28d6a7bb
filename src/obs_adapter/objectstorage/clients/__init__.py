"""OBS client management and configuration."""

from .obs_client import ObjectStoreClient, ObsClientManager, S3ObjectStoreClient

__all__ = ["ObjectStoreClient", "ObsClientManager", "S3ObjectStoreClient"]
