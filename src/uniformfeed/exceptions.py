from __future__ import annotations

from typing import Any, Optional


class FeedError(Exception):
    """Base class for every error raised by uniformfeed."""


class UnsupportedSourceError(FeedError, TypeError):
    """The source (or url) is not of a kind this library knows how to read."""

    def __init__(self, source: Any, kind: Optional[str] = None) -> None:
        self.source = source
        self.kind = kind if kind is not None else type(source).__name__
        super().__init__(f"Unsupported source of type {self.kind}: {source!r}")


class ParseError(FeedError, ValueError):
    """The document is not well-formed XML, declares a DOCTYPE, or is not a feed."""


class EncodingError(FeedError, ValueError):
    """The resolved character encoding cannot decode the feed bytes."""

    def __init__(self, message: str, encoding: Optional[str] = None) -> None:
        self.encoding = encoding
        super().__init__(message)
