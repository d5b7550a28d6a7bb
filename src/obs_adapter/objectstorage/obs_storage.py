"""OBS storage adapter.

``ObsStorage`` maps the generic put/get/delete/list operations onto an
``ObjectStoreClient`` and turns vendor failures into the obs-adapter exception
vocabulary:

    - a 404 / ``NoSuchKey`` / ``NotFound`` response becomes ObjectNotFoundError
    - any other store or transport failure becomes StorageOperationError

Listing drains every page before returning. A failure on any page discards
whatever was accumulated so far.

Example:
    config = ObsStorageConfig(
        endpoint="obs.ap-southeast-2.myhuaweicloud.com",
        bucket="metrics",
        access_key="...",
        secret_key="...",
    )
    storage = ObsStorage(config)
    storage.put_object("blocks/meta.json", b"{}")
    objects, prefixes = storage.list_objects("blocks/", "/")
"""

from typing import BinaryIO, Callable, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from obs_adapter.core import get_logger, get_tracer
from obs_adapter.core.exceptions import (
    ObjectNotFoundError,
    ObsAdapterError,
    StorageOperationError,
    ValidationError,
)
from obs_adapter.objectstorage.clients import ObjectStoreClient, S3ObjectStoreClient
from obs_adapter.objectstorage.listing import list_all_pages
from obs_adapter.objectstorage.models import ListingResult
from obs_adapter.schemas import ObsSettings, ObsStorageConfig, validate_obs_config

logger = get_logger(__name__)
tracer = get_tracer(__name__)

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NotFound", "404"})


def translate_client_error(
    error: Exception, operation: str, key: Optional[str] = None
) -> ObsAdapterError:
    """Map an SDK exception onto the adapter's exception types.

    Args:
        error: Exception raised by the underlying client
        operation: Adapter operation that failed
        key: Object key (or listing prefix) involved

    Returns:
        ObjectNotFoundError for absent objects, StorageOperationError otherwise
    """
    status_code = None
    if isinstance(error, ClientError):
        metadata = error.response.get("ResponseMetadata", {})
        status_code = metadata.get("HTTPStatusCode")
        code = error.response.get("Error", {}).get("Code")
        absent = status_code == 404 or code in _NOT_FOUND_CODES
        # A missing bucket is a configuration problem, not an absent object
        if absent and code != "NoSuchBucket":
            return ObjectNotFoundError(key or "", status_code=status_code)
    elif not isinstance(error, BotoCoreError):
        status_code = getattr(error, "status_code", None)

    target = f" '{key}'" if key else ""
    return StorageOperationError(
        f"OBS {operation}{target} failed: {error}",
        operation=operation,
        key=key,
        status_code=status_code,
    )


class ObsStorage:
    """Generic object storage operations against a single OBS bucket."""

    def __init__(
        self,
        config: ObsStorageConfig,
        client: Optional[ObjectStoreClient] = None,
    ):
        """Initialize the adapter.

        Args:
            config: Storage configuration; validated before any client is built
            client: Pre-built client, mainly for tests; defaults to a boto3 one

        Raises:
            ConfigurationError: If endpoint, bucket or credentials are missing
        """
        validate_obs_config(config)
        self.bucket = config.bucket
        self.client = client or S3ObjectStoreClient.from_config(config)
        logger.info("OBS storage initialized", bucket=self.bucket)

    @classmethod
    def from_settings(
        cls, obs_settings: Optional[ObsSettings] = None
    ) -> "ObsStorage":
        """Build an adapter from ``OBS_*`` environment settings."""
        return cls((obs_settings or ObsSettings()).to_config())

    def put_object(self, key: str, data: Union[bytes, BinaryIO]) -> None:
        """Create or overwrite the object at ``key``."""
        _require_key(key)
        with tracer.start_as_current_span("obs.put_object") as span:
            span.set_attribute("obs.bucket", self.bucket)
            span.set_attribute("obs.key", key)
            try:
                self.client.upload(key, data)
            except Exception as e:
                raise self._failure(e, "put_object", key) from e
        logger.info("Object uploaded", bucket=self.bucket, key=key)

    def get_object(self, key: str) -> BinaryIO:
        """Open the object at ``key`` for streaming reads.

        Returns:
            Readable stream positioned at the start of the object

        Raises:
            ObjectNotFoundError: If the object does not exist
            StorageOperationError: For any other failure
        """
        _require_key(key)
        with tracer.start_as_current_span("obs.get_object") as span:
            span.set_attribute("obs.bucket", self.bucket)
            span.set_attribute("obs.key", key)
            try:
                stream = self.client.download(key)
            except Exception as e:
                raise self._failure(e, "get_object", key) from e
        logger.debug("Object opened", bucket=self.bucket, key=key)
        return stream

    def delete_object(self, key: str, missing_ok: bool = False) -> None:
        """Delete the object at ``key``.

        Deletion is strict: when the store reports the object as absent,
        ObjectNotFoundError is raised unless ``missing_ok`` is set.
        """
        _require_key(key)
        with tracer.start_as_current_span("obs.delete_object") as span:
            span.set_attribute("obs.bucket", self.bucket)
            span.set_attribute("obs.key", key)
            try:
                self.client.delete(key)
            except Exception as e:
                error = self._failure(e, "delete_object", key)
                if missing_ok and isinstance(error, ObjectNotFoundError):
                    logger.info(
                        "Object already absent", bucket=self.bucket, key=key
                    )
                    return
                raise error from e
        logger.info("Object deleted", bucket=self.bucket, key=key)

    def list_objects(
        self,
        prefix: str = "",
        delimiter: str = "/",
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> ListingResult:
        """List every object key and common prefix under ``prefix``.

        Args:
            prefix: Key prefix to list under
            delimiter: Grouping character for common prefixes
            should_cancel: Polled before each page request

        Returns:
            ListingResult with all keys and common prefixes, in page order

        Raises:
            StorageOperationError: If any page request fails
            ListingProtocolError: If a truncated page carries no marker
            OperationCancelledError: If the caller cancels the listing
        """
        logger.info("Listing OBS objects", bucket=self.bucket, prefix=prefix)
        with tracer.start_as_current_span("obs.list_objects") as span:
            span.set_attribute("obs.bucket", self.bucket)
            span.set_attribute("obs.prefix", prefix)
            try:
                result = list_all_pages(
                    self.client, prefix, delimiter, should_cancel
                )
            except ObsAdapterError:
                raise
            except Exception as e:
                raise self._failure(e, "list_objects", prefix) from e
            span.set_attribute("obs.pages", result.pages)

        logger.info(
            "OBS objects listed",
            bucket=self.bucket,
            prefix=prefix,
            object_count=len(result.objects),
            prefix_count=len(result.common_prefixes),
            pages=result.pages,
        )
        return result

    def _failure(self, error: Exception, operation: str, key: str) -> ObsAdapterError:
        translated = translate_client_error(error, operation, key)
        if isinstance(translated, ObjectNotFoundError):
            logger.info(
                "Object not found", bucket=self.bucket, key=key, operation=operation
            )
        else:
            logger.error(str(translated), bucket=self.bucket, error=str(error))
        return translated


def _require_key(key: str) -> None:
    if not key:
        raise ValidationError("Object key must not be empty")
