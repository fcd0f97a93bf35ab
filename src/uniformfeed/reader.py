"""Character decoding of raw feed bytes.

The encoding is picked, in order of precedence, from:

1. the charset of a content type the caller declared explicitly,
2. a byte order mark,
3. the ``encoding`` of the XML declaration,
4. the charset of the HTTP ``Content-Type`` a connection answered with,
5. UTF-8.
"""

from __future__ import annotations

import codecs
import logging
import re
from typing import Optional

from .exceptions import EncodingError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "UTF-8"

_RE_XML_DECL_ENCODING_BYTES = re.compile(
    rb'<\?xml[^>]*encoding=["\']([^"\']+)["\'][^>]*\?>', re.IGNORECASE
)
_RE_CHARSET = re.compile(r"charset\s*=\s*[\"']?([^\"';\s]+)", re.IGNORECASE)

# UTF-32 first: the UTF-32LE BOM starts with the UTF-16LE one
_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_BE, "UTF-32BE"),
    (codecs.BOM_UTF32_LE, "UTF-32LE"),
    (codecs.BOM_UTF8, "UTF-8"),
    (codecs.BOM_UTF16_BE, "UTF-16BE"),
    (codecs.BOM_UTF16_LE, "UTF-16LE"),
)


def charset_from_content_type(content_type: Optional[str]) -> Optional[str]:
    """Return the upper-cased ``charset`` parameter of a content type, if any."""
    if not content_type:
        return None
    match = _RE_CHARSET.search(content_type)
    if match is None:
        return None
    return match.group(1).upper()


def bom_encoding(raw: bytes) -> Optional[str]:
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return encoding
    return None


def prolog_encoding(raw: bytes) -> Optional[str]:
    """Detect the encoding from the XML declaration.

    UTF-16 documents without a BOM are recognized by the null bytes around
    ``<?``. A declaration claiming UTF-16 on a document that contains no
    null bytes was transcoded along the way and is really UTF-8.
    """
    if raw.startswith(b"\x00<\x00?"):
        return "UTF-16BE"
    if raw.startswith(b"<\x00?\x00"):
        return "UTF-16LE"

    head = raw[:2000]
    if head.startswith(codecs.BOM_UTF8):
        head = head[3:]
    encoding_match = _RE_XML_DECL_ENCODING_BYTES.search(head)
    if encoding_match is None:
        return None
    encoding = encoding_match.group(1).decode("ascii", errors="replace").upper()
    if encoding.startswith("UTF-16") and b"\x00" not in raw[:200]:
        return DEFAULT_ENCODING
    return encoding


def resolve_encoding(
    raw: bytes,
    content_type: Optional[str] = None,
    http_content_type: Optional[str] = None,
) -> str:
    """Pick the encoding of ``raw`` following the module's precedence order."""
    return (
        charset_from_content_type(content_type)
        or bom_encoding(raw)
        or prolog_encoding(raw)
        or charset_from_content_type(http_content_type)
        or DEFAULT_ENCODING
    )


class XmlReader:
    """Decodes feed bytes with the best available encoding.

    The encoding is resolved on construction and exposed as ``encoding``;
    ``read()`` decodes and raises ``EncodingError`` when that fails.
    """

    def __init__(
        self,
        raw: bytes,
        content_type: Optional[str] = None,
        http_content_type: Optional[str] = None,
    ) -> None:
        self.raw = raw
        self.encoding = resolve_encoding(raw, content_type, http_content_type)
        logger.debug("Resolved feed encoding %s", self.encoding)

    def read(self) -> str:
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise EncodingError(f"Unknown encoding: {self.encoding}", self.encoding)
        try:
            text = self.raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise EncodingError(
                f"Failed to decode feed as {self.encoding}: {e}", self.encoding
            ) from e
        except LookupError as e:
            # base64, hex, rot13 and friends are codecs but not text encodings
            raise EncodingError(f"Not a text encoding: {self.encoding}", self.encoding) from e
        if text.startswith("\ufeff"):
            text = text[1:]
        return text
