"""Readers for CMS export feeds."""

from .content_store import FEED_LOCALE, ContentStore

__all__ = ["ContentStore", "FEED_LOCALE"]
