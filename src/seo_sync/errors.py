"""Exceptions raised by the live analysis layer."""

from __future__ import annotations


class SeoSyncError(Exception):
    """Base class for all errors raised by this package."""


class InactiveDimensionError(SeoSyncError):
    """An operation addressed an analysis dimension that is not enabled."""


class MissingTargetError(SeoSyncError):
    """An enabled dimension has no output target to render into."""


class PreviewIsolatedError(SeoSyncError):
    """The snippet preview was edited after it had been isolated."""
