"""
Exceptions raised while mirroring a page.

Only InvalidURL (for the base URL), FatalFetchError and filesystem errors
during setup end a run. Everything raised while handling a single asset is
reported and the run moves on.
"""

from typing import Optional


class MirrorError(Exception):
    """Base exception class for page mirror errors."""
    pass


class InvalidURL(MirrorError):
    """A URL could not be parsed or resolved to an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class NetworkError(MirrorError):
    """The HTTP request failed (connection, timeout or error status)."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"{url}: {reason}")


class FatalFetchError(MirrorError):
    """The page being mirrored could not be retrieved."""

    def __init__(self, url: str, cause: Optional[Exception] = None):
        self.url = url
        self.cause = cause
        message = f"Failed to fetch page {url}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)


class AssetFetchError(MirrorError):
    """A single asset could not be downloaded or written to disk."""

    def __init__(self, reference: str, cause: Optional[Exception] = None):
        self.reference = reference
        self.cause = cause
        message = f"Failed to download {reference}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class RewriteError(MirrorError):
    """A matched reference has no usable filename."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"No filename in reference {reference!r}")
