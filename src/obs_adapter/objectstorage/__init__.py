"""Object storage operations for OBS (S3-compatible) buckets."""

from .models import ListingPage, ListingResult, ObjectEntry
from .clients import ObjectStoreClient, ObsClientManager, S3ObjectStoreClient
from .listing import list_all_pages
from .obs_storage import ObsStorage, translate_client_error

__all__ = [
    "ListingPage",
    "ListingResult",
    "ObjectEntry",
    "ObjectStoreClient",
    "ObsClientManager",
    "ObsStorage",
    "S3ObjectStoreClient",
    "list_all_pages",
    "translate_client_error",
]
