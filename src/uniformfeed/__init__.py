from .exceptions import EncodingError, FeedError, ParseError, UnsupportedSourceError
from .main import parse_feed, parse_feed_with_request_properties
from .mappers import (
    make_category,
    make_content,
    make_enclosure,
    make_entry,
    make_feed,
    make_image,
    make_link,
    make_person,
)
from .model import Category, Content, Enclosure, Entry, Feed, Image, Link, Person
from .reader import XmlReader

__version__ = "0.1.0"

__all__ = [
    "Category",
    "Content",
    "EncodingError",
    "Enclosure",
    "Entry",
    "Feed",
    "FeedError",
    "Image",
    "Link",
    "ParseError",
    "Person",
    "UnsupportedSourceError",
    "XmlReader",
    "make_category",
    "make_content",
    "make_enclosure",
    "make_entry",
    "make_feed",
    "make_image",
    "make_link",
    "make_person",
    "parse_feed",
    "parse_feed_with_request_properties",
]
