from __future__ import annotations

import datetime
import logging
import re
from typing import Any, Optional, TYPE_CHECKING

from lxml import etree

from .dates import parse_date
from .exceptions import ParseError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger(__name__)

_ATOM_10_NS = "http://www.w3.org/2005/Atom"
_ATOM_03_NS = "http://purl.org/atom/ns#"
_RSS_10_NS = "http://purl.org/rss/1.0/"
_RSS_090_NS = "http://my.netscape.com/rdf/simple/0.9/"
_RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
_DC_NS = "http://purl.org/dc/elements/1.1/"
_DCTERMS_NS = "http://purl.org/dc/terms/"
_ENC_NS = "http://purl.oclc.org/net/rss_2.0/enc#"

_RDF_ROOT_TAG = f"{{{_RDF_NS}}}RDF"
_RDF_ABOUT_ATTR = f"{{{_RDF_NS}}}about"
_RDF_RESOURCE_ATTR = f"{{{_RDF_NS}}}resource"
_XML_LANG_ATTR = "{http://www.w3.org/XML/1998/namespace}lang"
_RSS_CONTENT_ENCODED_TAG = "{http://purl.org/rss/1.0/modules/content/}encoded"
_ADMIN_GENERATOR_TAG = "{http://webns.net/mvcb/}generatorAgent"
_DC_CREATOR_TAG = f"{{{_DC_NS}}}creator"
_DC_CONTRIBUTOR_TAG = f"{{{_DC_NS}}}contributor"
_DC_SUBJECT_TAG = f"{{{_DC_NS}}}subject"
_DC_DATE_TAG = f"{{{_DC_NS}}}date"
_DC_RIGHTS_TAG = f"{{{_DC_NS}}}rights"
_DC_LANGUAGE_TAG = f"{{{_DC_NS}}}language"
_DCTERMS_MODIFIED_TAG = f"{{{_DCTERMS_NS}}}modified"

_RSS_VERSIONS = {
    "0.91": "rss_0.91",
    "0.92": "rss_0.92",
    "0.93": "rss_0.93",
    "0.94": "rss_0.94",
    "2.0": "rss_2.0",
}
_RDF_VERSIONS = {
    _RSS_10_NS: "rss_1.0",
    _RSS_090_NS: "rss_0.9",
}
_ATOM_VERSIONS = {
    _ATOM_10_NS: "atom_1.0",
    "https://www.w3.org/2005/Atom": "atom_1.0",
    _ATOM_03_NS: "atom_0.3",
}
_XHTML_TYPES = {"xhtml", "application/xhtml+xml"}

_RE_XML_DECL_ENCODING = re.compile(
    r'(<\?xml[^>]*encoding=["\'])([^"\']+)(["\'][^>]*\?>)', re.IGNORECASE
)
_RE_PROLOG_MISC = re.compile(r"\s*(?:<\?.*?\?>|<!--.*?-->)", re.DOTALL)
_RE_LEADING_WHITESPACE = re.compile(r"\s*")
_RE_EMAIL_NAME = re.compile(r"^\s*([^\s()<>]+@[^\s()<>]+)\s*\(([^)]*)\)\s*$")
_RE_NAME_EMAIL = re.compile(r"^\s*(.*?)\s*<([^<>\s]+@[^<>\s]+)>\s*$")


class GenericFeedDict(dict):
    """A dictionary that allows access to its keys as attributes.

    This is the dialect-independent shape every RSS and Atom version is
    brought into before being mapped onto the public records.
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"'GenericFeedDict' object has no attribute '{name}'"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value


# ---------------------------------------------------------------------------
# Secure ingestion
# ---------------------------------------------------------------------------


def _secure_xml_parser() -> etree.XMLParser:
    # One parser per document; lxml parsers must not be shared across threads.
    return etree.XMLParser(
        ns_clean=True,
        recover=False,
        collect_ids=False,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
        huge_tree=False,
    )


def _clean_feed_text(content: str) -> str:
    """Cut the XML document out of whatever junk precedes it."""
    stripped_content = content.lstrip()
    preview_lower = stripped_content[:2000].lower()

    if preview_lower.startswith(("<?xml", "<rss", "<feed", "<rdf")):
        return stripped_content

    if preview_lower.startswith(("<!doctype html", "<html")):
        raise ParseError("Content appears to be HTML, not a valid RSS/Atom feed")

    search_chunk = content[:8192].lower()
    earliest = -1
    for pattern in ("<?xml", "<rss", "<feed", "<rdf:rdf"):
        idx = search_chunk.find(pattern)
        if idx != -1 and (earliest == -1 or idx < earliest):
            earliest = idx
    if earliest != -1:
        return content[earliest:]

    # Anything else is left to the root element checks after parsing
    return stripped_content


def _reject_doctype(content: str) -> None:
    """Refuse documents with a DOCTYPE before the parser ever sees them.

    Entity declarations can only live in a DOCTYPE, so this rules out
    entity expansion bombs and external entity injection.
    """
    pos = 0
    while True:
        match = _RE_PROLOG_MISC.match(content, pos)
        if match is None:
            break
        pos = match.end()
    pos = _RE_LEADING_WHITESPACE.match(content, pos).end()
    if content[pos : pos + 9].upper() == "<!DOCTYPE":
        if content[pos + 9 : pos + 15].strip().lower().startswith("html"):
            raise ParseError("Content appears to be HTML, not a valid RSS/Atom feed")
        raise ParseError("DOCTYPE declarations are not allowed in feeds")


def _ensure_utf8_xml_declaration(content: str) -> str:
    """Make the XML declaration agree with the UTF-8 bytes we hand to lxml."""
    if not content.startswith("<?xml"):
        return content
    return _RE_XML_DECL_ENCODING.sub(r"\1utf-8\3", content, count=1)


def parse_xml(content: str) -> _Element:
    """Parse decoded feed text into an element tree with DTDs disabled.

    Raises:
        ParseError: If the text is empty, declares a DOCTYPE or is not
            well-formed XML.
    """
    _reject_doctype(content)
    cleaned = _clean_feed_text(content)
    if not cleaned.strip():
        raise ParseError("Empty content")

    # LINE SEPARATOR and PARAGRAPH SEPARATOR are invalid in XML 1.0
    if "\u2028" in cleaned or "\u2029" in cleaned:
        cleaned = cleaned.replace("\u2028", "\n").replace("\u2029", "\n")

    _reject_doctype(cleaned)
    xml_bytes = _ensure_utf8_xml_declaration(cleaned).encode("utf-8", errors="replace")
    try:
        root = etree.fromstring(xml_bytes, parser=_secure_xml_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Failed to parse XML content: {e}") from e

    if root is None:
        raise ParseError("Failed to parse XML: received empty content")

    docinfo = root.getroottree().docinfo
    if docinfo.doctype or docinfo.internalDTD is not None:
        raise ParseError("DOCTYPE declarations are not allowed in feeds")

    return root


# ---------------------------------------------------------------------------
# Dialect detection
# ---------------------------------------------------------------------------


def _local_name(tag: Any) -> str:
    if not isinstance(tag, str):
        return ""
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    elif ":" in tag:
        tag = tag.split(":", 1)[1]
    return tag.lower()


def _find_local(parent: _Element, local: str) -> list[_Element]:
    return [child for child in parent if _local_name(child.tag) == local]


_NON_FEED_MESSAGES: dict[str, str] = {
    "html": "Received HTML page instead of feed",
    "div": "Received HTML fragment instead of feed",
    "body": "Received HTML fragment instead of feed",
    "status": "Feed server returned status message",
    "error": "Feed server returned error",
    "opml": "Received OPML document instead of feed (OPML is an outline format, not a feed)",
    "urlset": "Received XML sitemap instead of feed (sitemap is for search engines, not a feed)",
    "sitemapindex": "Received XML sitemap instead of feed (sitemap is for search engines, not a feed)",
}


def _extract_error_message(root: _Element) -> str:
    if root.text and root.text.strip():
        return root.text.strip()
    for tag in ("message", "title", "h1", "h2", "p", "code"):
        for elem in root.iter():
            if _local_name(elem.tag) == tag and elem.text and elem.text.strip():
                return elem.text.strip()
    return " ".join(" ".join(t.strip() for t in root.itertext() if t.strip()).split())


def _raise_for_non_feed_root(root: _Element) -> None:
    base_msg = _NON_FEED_MESSAGES.get(_local_name(root.tag))
    if base_msg is None:
        return
    error_msg = _extract_error_message(root)
    if len(error_msg) > 10:
        raise ParseError(f"{base_msg}: {error_msg[:150]}")
    raise ParseError(base_msg)


def _detect_feed_structure(
    root: _Element,
) -> tuple[str, _Element, list[_Element], str]:
    """Work out the dialect of a parsed document.

    Returns:
        (feed_type, channel, items, namespace) where ``namespace`` is the
        namespace the dialect's own elements live in ("" for RSS 0.9x/2.0).
    """
    if root.tag == "rss":
        feed_type = _RSS_VERSIONS.get((root.get("version") or "").strip(), "rss_2.0")
        channel = root.find("channel")
        if channel is None:
            candidates = _find_local(root, "channel")
            if not candidates:
                raise ParseError("Invalid RSS feed: missing channel element")
            channel = candidates[0]
        items = channel.findall("item") or root.findall("item")
        return feed_type, channel, items, ""

    if root.tag == _RDF_ROOT_TAG:
        for namespace, feed_type in _RDF_VERSIONS.items():
            channel = root.find(f"{{{namespace}}}channel")
            if channel is not None:
                items = root.findall(f"{{{namespace}}}item")
                return feed_type, channel, items, namespace
        raise ParseError("Invalid RDF feed: missing RSS channel element")

    if _local_name(root.tag) == "feed" and "}" in root.tag:
        namespace = root.tag[1:].split("}", 1)[0]
        feed_type = _ATOM_VERSIONS.get(namespace)
        if feed_type is None:
            raise ParseError(f"Unknown Atom namespace in feed type: {root.tag}")
        return feed_type, root, root.findall(f"{{{namespace}}}entry"), namespace

    raise ParseError(f"Unknown feed type: {root.tag}")


# ---------------------------------------------------------------------------
# Element helpers
# ---------------------------------------------------------------------------


def _q(namespace: str, local: str) -> str:
    return f"{{{namespace}}}{local}" if namespace else local


def _text(el: Optional[_Element]) -> Optional[str]:
    if el is None:
        return None
    return (el.text or "").strip()


def _first_text(el: _Element, *paths: str) -> Optional[str]:
    """Text of the first non-empty match, "" if only empty ones exist, else None."""
    found: Optional[str] = None
    for path in paths:
        value = _text(el.find(path))
        if value:
            return value
        if value is not None and found is None:
            found = value
    return found


def _find_first(el: _Element, *paths: str) -> Optional[_Element]:
    for path in paths:
        found = el.find(path)
        if found is not None:
            return found
    return None


def _first_date(el: _Element, *paths: str) -> Optional[datetime.datetime]:
    for path in paths:
        value = _text(el.find(path))
        if value:
            parsed = parse_date(value)
            if parsed is not None:
                return parsed
    return None


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except (ValueError, TypeError):
        return None


def _inner_xml(el: _Element) -> str:
    parts = [el.text or ""]
    for child in el:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts).strip()


def _atom_text(el: Optional[_Element]) -> Optional[str]:
    if el is None:
        return None
    if el.get("type") in _XHTML_TYPES:
        return "".join(el.itertext()).strip()
    return (el.text or "").strip()


def _person(
    name: Optional[str] = None, email: Optional[str] = None, uri: Optional[str] = None
) -> GenericFeedDict:
    return GenericFeedDict(name=name, email=email, uri=uri)


def _rss_person(value: str) -> GenericFeedDict:
    """Split RSS style person strings such as ``jo@example.com (Jo Doe)``."""
    match = _RE_EMAIL_NAME.match(value)
    if match:
        return _person(name=match.group(2).strip() or None, email=match.group(1))
    match = _RE_NAME_EMAIL.match(value)
    if match:
        return _person(name=match.group(1) or None, email=match.group(2))
    if "@" in value and " " not in value:
        return _person(email=value)
    return _person(name=value)


def _rss_people(el: _Element, *paths: str) -> list[GenericFeedDict]:
    people: list[GenericFeedDict] = []
    for path in paths:
        for person_el in el.findall(path):
            value = _text(person_el)
            if value:
                people.append(_rss_person(value))
    return people


def _atom_people(el: _Element, ns: str, local: str) -> list[GenericFeedDict]:
    return [
        _person(
            name=_text(person_el.find(_q(ns, "name"))),
            email=_text(person_el.find(_q(ns, "email"))),
            uri=_first_text(person_el, _q(ns, "uri"), _q(ns, "url")),
        )
        for person_el in el.findall(_q(ns, local))
    ]


def _parse_categories(element: _Element, feed_type: str, ns: str) -> list[GenericFeedDict]:
    categories: list[GenericFeedDict] = []
    if feed_type.startswith("atom"):
        for cat in element.findall(_q(ns, "category")):
            term = cat.get("term")
            if term:
                categories.append(
                    GenericFeedDict(name=term.strip(), taxonomy_uri=cat.get("scheme"))
                )
        return categories

    for cat in element.findall(_q(ns, "category")):
        term = _text(cat)
        if term:
            categories.append(GenericFeedDict(name=term, taxonomy_uri=cat.get("domain")))
    for subject in element.findall(_DC_SUBJECT_TAG):
        term = _text(subject)
        if term:
            categories.append(GenericFeedDict(name=term, taxonomy_uri=None))
    for topic in element.findall("{http://purl.org/rss/1.0/modules/taxonomy/}topic"):
        resource = topic.get(_RDF_RESOURCE_ATTR)
        term = _text(topic) or resource
        if term:
            categories.append(GenericFeedDict(name=term, taxonomy_uri=resource))
    return categories


def _parse_link(link: _Element) -> GenericFeedDict:
    return GenericFeedDict(
        href=(link.get("href") or "").strip() or None,
        hreflang=link.get("hreflang"),
        length=_to_int(link.get("length")),
        rel=link.get("rel"),
        title=link.get("title"),
        type=link.get("type"),
    )


def _is_alternate(link: GenericFeedDict) -> bool:
    return link["rel"] in (None, "alternate")


def _parse_links(element: _Element, ns: str) -> list[GenericFeedDict]:
    return [
        parsed
        for parsed in map(_parse_link, element.findall(_q(ns, "link")))
        if parsed["href"]
    ]


def _alternate_href(links: list[GenericFeedDict]) -> Optional[str]:
    for link in links:
        if _is_alternate(link):
            return link["href"]
    return None


# ---------------------------------------------------------------------------
# RSS family (0.9x, 1.0, 2.0)
# ---------------------------------------------------------------------------


def _parse_rss_image(channel: _Element, root: _Element, ns: str) -> Optional[GenericFeedDict]:
    image = channel.find(_q(ns, "image"))
    if image is not None and len(image) == 0 and ns:
        # RSS 1.0 channels only reference the image; it lives under rdf:RDF
        image = root.find(_q(ns, "image"))
    if image is None:
        return None
    return GenericFeedDict(
        description=_text(image.find(_q(ns, "description"))),
        link=_text(image.find(_q(ns, "link"))),
        title=_text(image.find(_q(ns, "title"))),
        url=_text(image.find(_q(ns, "url"))),
    )


def _parse_rss_enclosures(item: _Element) -> list[GenericFeedDict]:
    enclosures: list[GenericFeedDict] = []
    for enclosure in item.findall("enclosure"):
        url = (enclosure.get("url") or "").strip()
        if url:
            enclosures.append(
                GenericFeedDict(
                    url=url,
                    type=enclosure.get("type"),
                    length=_to_int(enclosure.get("length")),
                )
            )
    for enclosure in item.findall(f"{{{_ENC_NS}}}enclosure"):
        url = (enclosure.get(_RDF_RESOURCE_ATTR) or enclosure.get(f"{{{_ENC_NS}}}url") or "").strip()
        if url:
            enclosures.append(
                GenericFeedDict(
                    url=url,
                    type=enclosure.get(f"{{{_ENC_NS}}}type"),
                    length=_to_int(enclosure.get(f"{{{_ENC_NS}}}length")),
                )
            )
    return enclosures


def _parse_rss_contents(item: _Element) -> list[GenericFeedDict]:
    contents: list[GenericFeedDict] = []
    for content_el in item.findall(_RSS_CONTENT_ENCODED_TAG) or item.findall("content"):
        contents.append(GenericFeedDict(type="html", value=content_el.text or ""))
    return contents


def _parse_rss_entry(item: _Element, feed_type: str, ns: str) -> GenericFeedDict:
    atom_links = _parse_links(item, _ATOM_10_NS)

    link = _first_text(item, _q(ns, "link"))
    guid = item.find("guid")
    guid_text = _text(guid)
    if not link and guid_text:
        is_permalink = guid.get("isPermaLink")
        if is_permalink == "true" or (
            is_permalink is None and guid_text.startswith(("http://", "https://"))
        ):
            link = guid_text
    if not link:
        link = _alternate_href(atom_links) or link

    uri = guid_text or item.get(_RDF_ABOUT_ATTR) or _text(item.find(f"{{{_ATOM_10_NS}}}id")) or link

    description_text = _text(item.find(_q(ns, "description")))
    description = (
        GenericFeedDict(type="text/html", value=description_text)
        if description_text is not None
        else None
    )

    return GenericFeedDict(
        authors=_rss_people(item, "author", _DC_CREATOR_TAG),
        categories=_parse_categories(item, feed_type, ns),
        contents=_parse_rss_contents(item),
        contributors=_rss_people(item, _DC_CONTRIBUTOR_TAG),
        description=description,
        enclosures=_parse_rss_enclosures(item),
        link=link,
        published_date=_first_date(item, "pubDate", "pubdate", _DC_DATE_TAG),
        title=_first_text(item, _q(ns, "title")),
        updated_date=_first_date(item, _DCTERMS_MODIFIED_TAG, f"{{{_ATOM_10_NS}}}updated"),
        uri=uri,
    )


def _parse_rss_feed(
    root: _Element, channel: _Element, items: list[_Element], feed_type: str, ns: str
) -> GenericFeedDict:
    links = _parse_links(channel, _ATOM_10_NS)
    link = _first_text(channel, _q(ns, "link"))

    generator = _first_text(channel, "generator")
    if generator is None:
        generator_agent = channel.find(_ADMIN_GENERATOR_TAG)
        if generator_agent is not None:
            generator = generator_agent.get(_RDF_RESOURCE_ATTR) or _text(generator_agent)

    return GenericFeedDict(
        authors=_rss_people(channel, "managingEditor", _DC_CREATOR_TAG),
        categories=_parse_categories(channel, feed_type, ns),
        contributors=_rss_people(channel, _DC_CONTRIBUTOR_TAG),
        copyright=_first_text(channel, "copyright", _DC_RIGHTS_TAG),
        description=_first_text(channel, _q(ns, "description")),
        entries=[_parse_rss_entry(item, feed_type, ns) for item in items],
        generator=generator,
        image=_parse_rss_image(channel, root, ns),
        language=_first_text(channel, "language", _DC_LANGUAGE_TAG),
        link=link,
        links=links,
        published_date=_first_date(channel, "pubDate", _DC_DATE_TAG, "lastBuildDate"),
        title=_first_text(channel, _q(ns, "title")),
        uri=channel.get(_RDF_ABOUT_ATTR),
    )


# ---------------------------------------------------------------------------
# Atom family (0.3, 1.0)
# ---------------------------------------------------------------------------


def _atom_date_tags(ns: str) -> tuple[str, str, str, str]:
    """(published, updated, published fallback, updated fallback) tags."""
    if ns == _ATOM_03_NS:
        return _q(ns, "issued"), _q(ns, "modified"), _q(ns, "published"), _q(ns, "updated")
    return _q(ns, "published"), _q(ns, "updated"), _q(ns, "issued"), _q(ns, "modified")


def _parse_atom_content(content_el: _Element, default_type: str) -> GenericFeedDict:
    content_type = content_el.get("type") or default_type
    if content_type in _XHTML_TYPES or content_el.get("mode") == "xml":
        value: Optional[str] = _inner_xml(content_el)
    elif content_el.get("src") is not None:
        value = content_el.text
    else:
        value = content_el.text or ""
    return GenericFeedDict(type=content_type, value=value)


def _parse_atom_entry(entry: _Element, ns: str) -> GenericFeedDict:
    default_type = "text/plain" if ns == _ATOM_03_NS else "text"
    published_tag, updated_tag, published_fallback, updated_fallback = _atom_date_tags(ns)

    links = _parse_links(entry, ns)
    link = _alternate_href(links) or (links[0]["href"] if links else None)

    summary = entry.find(_q(ns, "summary"))
    description = _parse_atom_content(summary, default_type) if summary is not None else None

    enclosures = [
        GenericFeedDict(url=parsed["href"], type=parsed["type"], length=parsed["length"])
        for parsed in links
        if parsed["rel"] == "enclosure"
    ]

    return GenericFeedDict(
        authors=_atom_people(entry, ns, "author"),
        categories=_parse_categories(entry, "atom", ns),
        contents=[
            _parse_atom_content(content_el, default_type)
            for content_el in entry.findall(_q(ns, "content"))
        ],
        contributors=_atom_people(entry, ns, "contributor"),
        description=description,
        enclosures=enclosures,
        link=link,
        published_date=_first_date(entry, published_tag, published_fallback),
        title=_atom_text(entry.find(_q(ns, "title"))),
        updated_date=_first_date(entry, updated_tag, updated_fallback),
        uri=_text(entry.find(_q(ns, "id"))) or link,
    )


def _parse_atom_image(root: _Element, ns: str) -> Optional[GenericFeedDict]:
    url = _first_text(root, _q(ns, "logo"), _q(ns, "icon"))
    if url is None:
        return None
    return GenericFeedDict(description=None, link=None, title=None, url=url)


def _parse_atom_feed(
    root: _Element, entries: list[_Element], feed_type: str, ns: str
) -> GenericFeedDict:
    _, updated_tag, _, updated_fallback = _atom_date_tags(ns)
    links = _parse_links(root, ns)
    generator = root.find(_q(ns, "generator"))

    return GenericFeedDict(
        authors=_atom_people(root, ns, "author"),
        categories=_parse_categories(root, feed_type, ns),
        contributors=_atom_people(root, ns, "contributor"),
        # Atom 0.3 calls these copyright and tagline
        copyright=_atom_text(_find_first(root, _q(ns, "rights"), _q(ns, "copyright"))),
        description=_atom_text(_find_first(root, _q(ns, "subtitle"), _q(ns, "tagline"))),
        entries=[_parse_atom_entry(entry, ns) for entry in entries],
        generator=_text(generator),
        image=_parse_atom_image(root, ns),
        language=root.get(_XML_LANG_ATTR),
        link=_alternate_href(links),
        links=links,
        published_date=_first_date(root, updated_tag, updated_fallback),
        title=_atom_text(root.find(_q(ns, "title"))),
        uri=_text(root.find(_q(ns, "id"))),
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_generic_feed(content: str, encoding: Optional[str] = None) -> GenericFeedDict:
    """Parse decoded feed text into a dialect-independent ``GenericFeedDict``.

    Args:
        content: The feed document, already decoded to text
        encoding: Name of the encoding the text was decoded with

    Returns:
        GenericFeedDict with the same keys whatever the source dialect

    Raises:
        ParseError: If the text is not well-formed XML, declares a DOCTYPE,
            or is not a recognized RSS/Atom document
    """
    root = parse_xml(content)
    _raise_for_non_feed_root(root)
    feed_type, channel, items, ns = _detect_feed_structure(root)

    if feed_type.startswith("atom"):
        feed = _parse_atom_feed(root, items, feed_type, ns)
    else:
        feed = _parse_rss_feed(root, channel, items, feed_type, ns)

    if feed.link and all(link["href"] != feed.link for link in feed.links):
        feed.links.insert(
            0,
            GenericFeedDict(
                href=feed.link, hreflang=None, length=None, rel="alternate", title=None, type=None
            ),
        )

    feed.feed_type = feed_type
    feed.encoding = encoding
    logger.debug("Parsed %s feed with %d entries", feed_type, len(feed.entries))
    return feed
