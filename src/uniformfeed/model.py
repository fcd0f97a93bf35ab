"""Immutable records every feed dialect is normalized into.

Sequences are tuples and are empty when the source has nothing to offer.
Optional scalars are ``None`` when the source omits them; an empty string
means the element was present but empty.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Person:
    email: Optional[str] = None
    name: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Category:
    name: Optional[str] = None
    taxonomy_uri: Optional[str] = None


@dataclass(frozen=True)
class Content:
    type: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class Link:
    href: Optional[str] = None
    hreflang: Optional[str] = None
    length: Optional[int] = None
    rel: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class Enclosure:
    length: Optional[int] = None
    type: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Image:
    description: Optional[str] = None
    link: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Entry:
    """A single item (RSS) or entry (Atom)."""

    authors: tuple[Person, ...] = ()
    categories: tuple[Category, ...] = ()
    contents: tuple[Content, ...] = ()
    contributors: tuple[Person, ...] = ()
    description: Optional[Content] = None
    enclosures: tuple[Enclosure, ...] = ()
    link: Optional[str] = None
    published_date: Optional[datetime.datetime] = None
    title: Optional[str] = None
    updated_date: Optional[datetime.datetime] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Feed:
    """A parsed feed.

    ``feed_type`` names the detected dialect and version, e.g. ``"rss_2.0"``
    or ``"atom_1.0"``. ``encoding`` is the character encoding the bytes were
    decoded with. ``uri`` is the feed's identifier, which is not necessarily
    the same thing as its human-facing ``link``.
    """

    authors: tuple[Person, ...] = ()
    categories: tuple[Category, ...] = ()
    contributors: tuple[Person, ...] = ()
    copyright: Optional[str] = None
    description: Optional[str] = None
    encoding: Optional[str] = None
    entries: tuple[Entry, ...] = ()
    feed_type: Optional[str] = None
    generator: Optional[str] = None
    image: Optional[Image] = None
    language: Optional[str] = None
    link: Optional[str] = None
    entry_links: tuple[Link, ...] = ()
    published_date: Optional[datetime.datetime] = None
    title: Optional[str] = None
    uri: Optional[str] = None
