"""Map the generic feed dict produced by ``uniformfeed.wire`` onto records.

Each function handles one kind of node and only reads from it. Missing
keys and ``None`` values come out as ``None`` (or an empty tuple for
sequences); nothing is filled in.
"""

from __future__ import annotations

from typing import Any, Mapping

from .model import Category, Content, Enclosure, Entry, Feed, Image, Link, Person


def _seq(node: Mapping[str, Any], key: str) -> list[Any]:
    return node.get(key) or []


def make_person(person: Mapping[str, Any]) -> Person:
    return Person(
        email=person.get("email"),
        name=person.get("name"),
        uri=person.get("uri"),
    )


def make_category(category: Mapping[str, Any]) -> Category:
    return Category(
        name=category.get("name"),
        taxonomy_uri=category.get("taxonomy_uri"),
    )


def make_content(content: Mapping[str, Any]) -> Content:
    return Content(type=content.get("type"), value=content.get("value"))


def make_link(link: Mapping[str, Any]) -> Link:
    return Link(
        href=link.get("href"),
        hreflang=link.get("hreflang"),
        length=link.get("length"),
        rel=link.get("rel"),
        title=link.get("title"),
        type=link.get("type"),
    )


def make_enclosure(enclosure: Mapping[str, Any]) -> Enclosure:
    return Enclosure(
        length=enclosure.get("length"),
        type=enclosure.get("type"),
        uri=enclosure.get("url"),
    )


def make_image(image: Mapping[str, Any]) -> Image:
    return Image(
        description=image.get("description"),
        link=image.get("link"),
        title=image.get("title"),
        url=image.get("url"),
    )


def make_entry(entry: Mapping[str, Any]) -> Entry:
    description = entry.get("description")
    return Entry(
        authors=tuple(map(make_person, _seq(entry, "authors"))),
        categories=tuple(map(make_category, _seq(entry, "categories"))),
        contents=tuple(map(make_content, _seq(entry, "contents"))),
        contributors=tuple(map(make_person, _seq(entry, "contributors"))),
        description=make_content(description) if description is not None else None,
        enclosures=tuple(map(make_enclosure, _seq(entry, "enclosures"))),
        link=entry.get("link"),
        published_date=entry.get("published_date"),
        title=entry.get("title"),
        updated_date=entry.get("updated_date"),
        uri=entry.get("uri"),
    )


def make_feed(feed: Mapping[str, Any]) -> Feed:
    """Build the ``Feed`` record, and everything below it, in one pass."""
    image = feed.get("image")
    return Feed(
        authors=tuple(map(make_person, _seq(feed, "authors"))),
        categories=tuple(map(make_category, _seq(feed, "categories"))),
        contributors=tuple(map(make_person, _seq(feed, "contributors"))),
        copyright=feed.get("copyright"),
        description=feed.get("description"),
        encoding=feed.get("encoding"),
        entries=tuple(map(make_entry, _seq(feed, "entries"))),
        feed_type=feed.get("feed_type"),
        generator=feed.get("generator"),
        image=make_image(image) if image is not None else None,
        language=feed.get("language"),
        link=feed.get("link"),
        entry_links=tuple(map(make_link, _seq(feed, "links"))),
        published_date=feed.get("published_date"),
        title=feed.get("title"),
        uri=feed.get("uri"),
    )
