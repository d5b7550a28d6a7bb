"""Object storage listing operations."""

from .pagination import list_all_pages

__all__ = ["list_all_pages"]
