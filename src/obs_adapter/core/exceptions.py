"""Exception hierarchy for obs-adapter."""

from typing import Optional, Sequence


class ObsAdapterError(Exception):
    """Base exception for all obs-adapter errors."""

    pass


class ValidationError(ObsAdapterError):
    """Raised when validation fails."""

    pass


class ConfigurationError(ValidationError):
    """Raised when the storage configuration is incomplete."""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Invalid OBS configuration, missing: " + ", ".join(self.missing_fields)
        )


class ObjectNotFoundError(ObsAdapterError):
    """Raised when the store reports that an object does not exist."""

    def __init__(self, key: str, status_code: Optional[int] = 404):
        self.key = key
        self.status_code = status_code
        super().__init__(f"Object not found: {key}")


class StorageOperationError(ObsAdapterError):
    """Raised when a store operation fails for any reason other than absence."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.operation = operation
        self.key = key
        self.status_code = status_code
        super().__init__(message)


class ListingProtocolError(StorageOperationError):
    """Raised when a truncated listing page carries no usable continuation marker."""

    pass


class OperationCancelledError(ObsAdapterError):
    """Raised when the caller cancels a listing in progress."""

    pass
