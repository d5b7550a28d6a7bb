"""Tests for the marker-following listing loop."""

import pytest

from fakes import FakeObjectStoreClient, make_page
from obs_adapter.core.exceptions import ListingProtocolError, OperationCancelledError
from obs_adapter.objectstorage.listing import list_all_pages

FIRST_PAGE_KEYS = ["thanos/file1", "thanos/file2", "thanos/"]
FIRST_PAGE_PREFIXES = ["thanos/folder1", "thanos/folder2", "thanos/folder3"]


class TestListAllPages:
    """Test draining paginated listings."""

    def test_single_page(self):
        """Test that a non-truncated page ends the listing after one request."""
        client = FakeObjectStoreClient(
            pages={None: make_page(FIRST_PAGE_KEYS, FIRST_PAGE_PREFIXES)}
        )

        result = list_all_pages(client, "thanos", "/")

        assert result.objects == tuple(FIRST_PAGE_KEYS)
        assert result.common_prefixes == tuple(FIRST_PAGE_PREFIXES)
        assert result.pages == 1
        assert client.list_calls == [("thanos", "/", None)]

    def test_two_pages_merged_in_order(self):
        """Test that a truncated page is followed by its marker."""
        client = FakeObjectStoreClient(
            pages={
                None: make_page(
                    FIRST_PAGE_KEYS, FIRST_PAGE_PREFIXES, next_marker="nextMarker"
                ),
                "nextMarker": make_page(
                    ["thanos/file3", "thanos/file4"],
                    ["thanos/folder4", "thanos/folder5", "thanos/folder6"],
                ),
            }
        )

        objects, common_prefixes = list_all_pages(client, "thanos", "/")

        assert len(objects) == 5
        assert len(common_prefixes) == 6
        assert objects == (
            "thanos/file1",
            "thanos/file2",
            "thanos/",
            "thanos/file3",
            "thanos/file4",
        )
        assert common_prefixes[:3] == tuple(FIRST_PAGE_PREFIXES)
        assert common_prefixes[3:] == (
            "thanos/folder4",
            "thanos/folder5",
            "thanos/folder6",
        )
        assert client.list_calls == [
            ("thanos", "/", None),
            ("thanos", "/", "nextMarker"),
        ]

    def test_duplicates_are_kept(self):
        """Test that no deduplication happens across pages."""
        client = FakeObjectStoreClient(
            pages={
                None: make_page(["a"], ["p/"], next_marker="m1"),
                "m1": make_page(["a"], ["p/"]),
            }
        )

        result = list_all_pages(client, "", "/")

        assert result.objects == ("a", "a")
        assert result.common_prefixes == ("p/", "p/")

    def test_empty_listing(self):
        """Test an empty prefix."""
        client = FakeObjectStoreClient(pages={None: make_page()})

        result = list_all_pages(client, "nothing/", "/")

        assert result.objects == ()
        assert result.common_prefixes == ()
        assert len(client.list_calls) == 1

    def test_error_on_later_page_propagates(self):
        """Test that a failing page aborts the listing."""
        client = FakeObjectStoreClient(
            pages={
                None: make_page(FIRST_PAGE_KEYS, next_marker="m1"),
                "m1": ConnectionError("connection reset"),
            }
        )

        with pytest.raises(ConnectionError):
            list_all_pages(client, "thanos", "/")

        assert len(client.list_calls) == 2

    @pytest.mark.parametrize("marker", [None, ""])
    def test_truncated_without_marker(self, marker):
        """Test that a truncated page without a marker stops the loop."""
        client = FakeObjectStoreClient(
            pages={None: make_page(["a"], next_marker=marker, truncated=True)}
        )

        with pytest.raises(ListingProtocolError) as exc_info:
            list_all_pages(client, "thanos", "/")

        assert exc_info.value.operation == "list_objects"
        assert len(client.list_calls) == 1

    def test_repeated_marker(self):
        """Test that a store returning the same marker again does not loop."""
        client = FakeObjectStoreClient(
            pages={
                None: make_page(["a"], next_marker="m1"),
                "m1": make_page(["b"], next_marker="m1"),
            }
        )

        with pytest.raises(ListingProtocolError):
            list_all_pages(client, "thanos", "/")

        assert len(client.list_calls) == 2

    def test_cancel_before_first_page(self):
        """Test that a cancelled listing issues no requests."""
        client = FakeObjectStoreClient(pages={None: make_page(["a"])})

        with pytest.raises(OperationCancelledError):
            list_all_pages(client, "thanos", "/", should_cancel=lambda: True)

        assert client.list_calls == []

    def test_cancel_between_pages(self):
        """Test that cancellation stops further page requests."""
        client = FakeObjectStoreClient(
            pages={
                None: make_page(["a"], next_marker="m1"),
                "m1": make_page(["b"], next_marker="m2"),
                "m2": make_page(["c"]),
            }
        )
        checks = iter([False, True])

        with pytest.raises(OperationCancelledError):
            list_all_pages(client, "thanos", "/", should_cancel=lambda: next(checks))

        assert client.list_calls == [("thanos", "/", None)]
