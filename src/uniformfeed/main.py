from __future__ import annotations

import gzip
import io
import logging
import os
import zlib
from typing import Any, Literal, Mapping, Optional, Union
from urllib.error import URLError
from urllib.parse import ParseResult, SplitResult
from urllib.request import (
    HTTPErrorProcessor,
    HTTPRedirectHandler,
    Request,
    build_opener,
)

try:
    import brotli

    HAS_BROTLI = True
except ImportError:
    HAS_BROTLI = False

from .exceptions import UnsupportedSourceError
from .mappers import make_feed
from .model import Feed
from .reader import XmlReader
from .wire import build_generic_feed

logger = logging.getLogger(__name__)

_SourceKind = Literal["url", "stream", "file", "connection"]

DEFAULT_USER_AGENT = "uniformfeed/0.1"


def _source_kind(source: Any) -> Optional[_SourceKind]:
    """Classify a source; None means it is not something we can read from."""
    if isinstance(source, str):
        return "url"
    if isinstance(source, Request):
        return "connection"
    if isinstance(source, (bytes, bytearray, memoryview)):
        return "stream"
    if isinstance(source, os.PathLike):
        return "file"
    if isinstance(source, io.TextIOBase):
        return None
    if callable(getattr(source, "read", None)):
        return "stream"
    return None


def _decode_content_encoding(content: bytes, content_encoding: Optional[str]) -> bytes:
    if content_encoding == "gzip":
        return gzip.decompress(content)
    if content_encoding == "deflate":
        try:
            return zlib.decompress(content, -zlib.MAX_WBITS)
        except zlib.error as e:
            raise OSError(f"Failed to inflate deflate response body: {e}") from e
    if content_encoding == "br":
        if not HAS_BROTLI:
            raise OSError(
                "Received brotli-compressed response but 'brotli' is not installed"
            )
        return brotli.decompress(content)
    return content


def _build_request(url: str, user_agent: str = DEFAULT_USER_AGENT) -> Request:
    accept_encoding = "gzip, deflate, br" if HAS_BROTLI else "gzip, deflate"
    try:
        return Request(
            url,
            method="GET",
            headers={
                "Accept-Encoding": accept_encoding,
                "User-Agent": user_agent,
            },
        )
    except ValueError as e:
        raise URLError(f"Malformed feed URL {url!r}: {e}") from e


def _fetch(request: Request) -> tuple[bytes, Optional[str]]:
    """Open ``request`` and return the body and the response Content-Type.

    No timeout is imposed here; a ``timeout`` attribute the caller set on the
    request is passed through to the opener.
    """
    opener = build_opener(HTTPRedirectHandler(), HTTPErrorProcessor())
    timeout = getattr(request, "timeout", None)
    open_kwargs = {} if timeout is None else {"timeout": timeout}
    with opener.open(request, **open_kwargs) as response:
        content: bytes = response.read()
        content = _decode_content_encoding(
            content, response.headers.get("Content-Encoding")
        )
        return content, response.headers.get("Content-Type")


def _read_stream(stream: Any) -> tuple[bytes, Optional[str]]:
    if isinstance(stream, (bytes, bytearray, memoryview)):
        return bytes(stream), None
    # Responses from urlopen and friends carry the server's headers
    headers = getattr(stream, "headers", None)
    http_content_type = headers.get("Content-Type") if headers is not None else None
    return stream.read(), http_content_type


def _read_file(path: Union[str, os.PathLike]) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _parse_bytes(
    raw: bytes,
    content_type: Optional[str] = None,
    http_content_type: Optional[str] = None,
) -> Feed:
    reader = XmlReader(raw, content_type=content_type, http_content_type=http_content_type)
    generic_feed = build_generic_feed(reader.read(), encoding=reader.encoding)
    return make_feed(generic_feed)


def parse_feed(
    source: Any,
    content_type: Optional[str] = None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Feed:
    """Parse an RSS or Atom feed into a ``Feed``.

    Args:
        source: One of
            - a URL string, fetched over HTTP(S);
            - a binary stream (anything with a ``read()`` returning bytes),
              or raw ``bytes``;
            - a file path (``os.PathLike``, e.g. ``pathlib.Path``);
            - an unopened ``urllib.request.Request``.
        content_type: Content type the caller vouches for. Its charset wins
            over any encoding information found in the document.
        user_agent: User-Agent sent when ``source`` is a URL string

    Returns:
        The fully built Feed

    Raises:
        UnsupportedSourceError: If ``source`` is none of the kinds above
        ParseError: If the document is not well-formed XML, declares a
            DOCTYPE, or is not an RSS/Atom feed
        EncodingError: If the document cannot be decoded
        OSError: If reading the source fails or the URL is malformed
    """
    kind = _source_kind(source)
    logger.debug("Reading feed from %s source", kind)

    http_content_type: Optional[str] = None
    if kind == "url":
        raw, http_content_type = _fetch(_build_request(source, user_agent))
    elif kind == "connection":
        raw, http_content_type = _fetch(source)
    elif kind == "file":
        raw = _read_file(source)
    elif kind == "stream":
        raw, http_content_type = _read_stream(source)
    else:
        raise UnsupportedSourceError(source)

    return _parse_bytes(raw, content_type, http_content_type)


def parse_feed_with_request_properties(
    url: Union[str, ParseResult, SplitResult],
    headers: Mapping[str, str],
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Feed:
    """Fetch and parse a feed, sending extra request headers.

    Every header in ``headers`` is set on the request before it is opened,
    replacing any default of the same name (header names are compared
    case-insensitively, the last one set wins).

    Raises:
        UnsupportedSourceError: If ``url`` is neither a string nor a parsed URL
    """
    if isinstance(url, str):
        target = url
    elif isinstance(url, (ParseResult, SplitResult)):
        target = url.geturl()
    else:
        raise UnsupportedSourceError(url)

    request = _build_request(target, user_agent)
    for name, value in headers.items():
        request.add_header(name, value)
    return parse_feed(request)
