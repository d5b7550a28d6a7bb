"""Delimiter-aware listing that drains every page into a single result."""

from typing import Callable, Optional

from obs_adapter.core import get_logger
from obs_adapter.core.exceptions import ListingProtocolError, OperationCancelledError
from obs_adapter.objectstorage.clients import ObjectStoreClient
from obs_adapter.objectstorage.models import ListingResult

logger = get_logger(__name__)


def list_all_pages(
    client: ObjectStoreClient,
    prefix: str,
    delimiter: str = "/",
    should_cancel: Optional[Callable[[], bool]] = None,
) -> ListingResult:
    """Follow continuation markers until the store reports no more data.

    Object keys and common prefixes are appended in page order, then in
    within-page order, without deduplication. Pages are requested strictly
    one after another since each marker comes from the previous response.

    Args:
        client: Client used to fetch individual pages
        prefix: Key prefix to list under
        delimiter: Grouping character for common prefixes
        should_cancel: Polled before every page request

    Returns:
        ListingResult holding every key and common prefix

    Raises:
        ListingProtocolError: If a truncated page has no usable marker
        OperationCancelledError: If ``should_cancel`` returns true
        Exception: Whatever ``client.list_page`` raises, unchanged
    """
    objects: list[str] = []
    common_prefixes: list[str] = []
    marker: Optional[str] = None
    has_more = True
    pages = 0

    while has_more:
        if should_cancel is not None and should_cancel():
            logger.info("Listing cancelled", prefix=prefix, pages=pages)
            raise OperationCancelledError(
                f"Listing of '{prefix}' cancelled after {pages} page(s)"
            )

        page = client.list_page(prefix, delimiter, marker)
        pages += 1

        objects.extend(entry.key for entry in page.contents)
        common_prefixes.extend(page.common_prefixes)
        logger.debug(
            "Listing page received",
            prefix=prefix,
            page=pages,
            object_count=len(page.contents),
            prefix_count=len(page.common_prefixes),
            is_truncated=page.is_truncated,
        )

        if not page.is_truncated:
            has_more = False
        elif not page.next_marker or page.next_marker == marker:
            raise ListingProtocolError(
                f"Truncated listing page {pages} for '{prefix}' has no usable "
                f"continuation marker: {page.next_marker!r}",
                operation="list_objects",
                key=prefix,
            )
        else:
            marker = page.next_marker

    return ListingResult(
        objects=tuple(objects),
        common_prefixes=tuple(common_prefixes),
        pages=pages,
    )
