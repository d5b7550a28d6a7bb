"""OBS client configuration and management.

This module wraps a boto3 S3 client pointed at an OBS endpoint behind the small
``ObjectStoreClient`` protocol the adapter is written against. OBS speaks the
S3 wire protocol, so the wrapper only has to pick the right boto3 calls and
turn their response dictionaries into ``ListingPage`` values.

Errors raised by boto3/botocore are deliberately left untouched here; the
adapter in ``obs_adapter.objectstorage.obs_storage`` owns error translation.

Any object implementing the protocol can stand in for the real client, which
is how the pagination loop is exercised without a network.
"""

from typing import Any, BinaryIO, Dict, Optional, Protocol, Union

import boto3
from botocore.config import Config

from obs_adapter.core import get_logger
from obs_adapter.objectstorage.models import ListingPage, ObjectEntry
from obs_adapter.schemas import ObsStorageConfig

logger = get_logger(__name__)


class ObjectStoreClient(Protocol):
    """Capabilities the adapter needs from a vendor SDK client."""

    def upload(self, key: str, body: Union[bytes, BinaryIO]) -> None:
        """Create or overwrite the object at ``key``."""
        ...

    def download(self, key: str) -> BinaryIO:
        """Return a lazy readable stream over the object's content."""
        ...

    def delete(self, key: str) -> None:
        """Delete the object at ``key``."""
        ...

    def list_page(
        self, prefix: str, delimiter: str, marker: Optional[str] = None
    ) -> ListingPage:
        """Fetch a single listing page starting after ``marker``."""
        ...


class ObsClientManager:
    """Manages the boto3 client used to reach an OBS endpoint."""

    def __init__(self, config: ObsStorageConfig):
        """Initialize OBS client manager.

        Args:
            config: Storage configuration (assumed already validated)
        """
        self.config = config
        self._client = None
        logger.info(
            "OBS client manager initialized",
            endpoint=config.endpoint,
            bucket=config.bucket,
        )

    @property
    def client(self):
        """Get or create the boto3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    @property
    def endpoint_url(self) -> str:
        """Endpoint as a URL; bare host names are reached over HTTPS."""
        endpoint = self.config.endpoint
        if "://" not in endpoint:
            endpoint = f"https://{endpoint}"
        return endpoint

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
            "endpoint_url": self.endpoint_url,
            "aws_access_key_id": self.config.access_key,
            "aws_secret_access_key": self.config.secret_key,
            "config": Config(
                connect_timeout=self.config.connect_timeout,
                read_timeout=self.config.read_timeout,
                s3={"addressing_style": self.config.addressing_style},
            ),
        }

        client = boto3.client("s3", **kwargs)  # type: ignore
        logger.info("OBS client created", endpoint_url=self.endpoint_url)
        return client


class S3ObjectStoreClient:
    """``ObjectStoreClient`` backed by a boto3 S3 client bound to one bucket."""

    def __init__(self, client: Any, bucket: str, max_keys: Optional[int] = None):
        self.client = client
        self.bucket = bucket
        self.max_keys = max_keys

    @classmethod
    def from_config(cls, config: ObsStorageConfig) -> "S3ObjectStoreClient":
        """Build a wrapper around a freshly configured boto3 client."""
        return cls(ObsClientManager(config).client, config.bucket)

    def upload(self, key: str, body: Union[bytes, BinaryIO]) -> None:
        self.client.put_object(Bucket=self.bucket, Key=key, Body=body)

    def download(self, key: str) -> BinaryIO:
        response = self.client.get_object(Bucket=self.bucket, Key=key)
        return response["Body"]

    def delete(self, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)

    def list_page(
        self, prefix: str, delimiter: str, marker: Optional[str] = None
    ) -> ListingPage:
        """Fetch one marker-based ``ListObjects`` page.

        Stores only return ``NextMarker`` when a delimiter was sent. Without
        one, the last key of a truncated page is the marker for the next
        request, as the S3 API specifies.
        """
        kwargs: Dict[str, Any] = {"Bucket": self.bucket, "Prefix": prefix}
        if delimiter:
            kwargs["Delimiter"] = delimiter
        if marker:
            kwargs["Marker"] = marker
        if self.max_keys:
            kwargs["MaxKeys"] = self.max_keys

        response = self.client.list_objects(**kwargs)

        contents = tuple(
            ObjectEntry(
                key=obj["Key"],
                size=obj.get("Size", 0),
                last_modified=obj.get("LastModified"),
            )
            for obj in response.get("Contents", [])
        )
        common_prefixes = tuple(
            info["Prefix"] for info in response.get("CommonPrefixes", [])
        )
        is_truncated = bool(response.get("IsTruncated", False))
        next_marker = response.get("NextMarker") or None
        if is_truncated and next_marker is None and not delimiter and contents:
            next_marker = contents[-1].key

        return ListingPage(
            contents=contents,
            common_prefixes=common_prefixes,
            is_truncated=is_truncated,
            next_marker=next_marker,
        )
