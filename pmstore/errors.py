from __future__ import annotations


class StoreError(Exception):
    """Base class for document store failures. ``str(err)`` is caller-facing."""


class DocumentIOError(StoreError):
    """Directory creation, read, write, sync, rename or OS-open failure."""


class DocumentParseError(StoreError):
    """An existing document is not well-formed JSON."""
