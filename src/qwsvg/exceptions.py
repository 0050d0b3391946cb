"""qwsvg exceptions

Custom exceptions raised by the markup engine and its outer surfaces.
"""

from __future__ import annotations


class QwsvgError(Exception):
    """Base exception for all qwsvg errors."""

    pass


class LocationError(QwsvgError):
    """Raised when content is appended to an unknown location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Unknown content location: {location!r}")


class DeferredContentError(QwsvgError):
    """Raised when a nested-content callback defers its work.

    Nesting relies on the callback appending its fragments before it
    returns, so a callback returning a coroutine or other awaitable
    cannot be honoured.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Nested content for <{tag}> must be built synchronously")


class SceneError(QwsvgError):
    """Raised when a scene file cannot be loaded or built."""

    pass


class ExportError(QwsvgError):
    """Raised when markup cannot be written out."""

    pass


class UnbalancedContentError(QwsvgError):
    """Raised when a nested tag cannot be closed.

    Happens when the nested callback resets the store (or otherwise
    discards the open tag) before returning.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"<{tag}> was discarded while its nested content was built")
