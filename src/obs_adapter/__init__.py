"""An object-storage backend adapter for OBS (S3-compatible) buckets.

This package maps generic put/get/delete/list operations onto an S3-compatible
SDK client, translates vendor errors into a small exception vocabulary, and
drains paginated, delimiter-aware listings into a single result.

Key Features:
    - Validated, immutable connection configuration
    - Typed not-found errors distinguishable from other failures
    - Marker-following listing with common-prefix grouping
    - CLI interface

Recommended Usage:

    >>> from obs_adapter import ObsStorage, ObsStorageConfig
    >>> config = ObsStorageConfig(
    ...     endpoint="obs.ap-southeast-2.myhuaweicloud.com",
    ...     bucket="metrics",
    ...     access_key="...",
    ...     secret_key="...",
    ... )
    >>> storage = ObsStorage(config)
    >>> objects, prefixes = storage.list_objects("blocks/", "/")
"""

__version__ = "0.1.0"

from .core.exceptions import (
    ConfigurationError,
    ListingProtocolError,
    ObjectNotFoundError,
    ObsAdapterError,
    OperationCancelledError,
    StorageOperationError,
    ValidationError,
)
from .objectstorage import (
    ListingPage,
    ListingResult,
    ObjectEntry,
    ObjectStoreClient,
    ObsStorage,
    S3ObjectStoreClient,
    list_all_pages,
)
from .schemas import ObsSettings, ObsStorageConfig, validate_obs_config

__all__ = [
    # Configuration
    "ObsSettings",
    "ObsStorageConfig",
    "validate_obs_config",
    # Adapter
    "ObsStorage",
    "ObjectStoreClient",
    "S3ObjectStoreClient",
    # Listing
    "ListingPage",
    "ListingResult",
    "ObjectEntry",
    "list_all_pages",
    # Errors
    "ConfigurationError",
    "ListingProtocolError",
    "ObjectNotFoundError",
    "ObsAdapterError",
    "OperationCancelledError",
    "StorageOperationError",
    "ValidationError",
]
