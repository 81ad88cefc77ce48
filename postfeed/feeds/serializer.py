"""
Atom Serializer
===============
Renders AtomFeed documents to XML bytes and reads them back.

Element order follows the Atom documents produced by the feed handler:
    feed:  title, subtitle, id, updated, link*, author?, entry*
    entry: title, id, published, updated?, link*, author?, summary?, content?

Responsibility: XML wire format for feed documents
"""

from typing import Optional, List
import logging

from lxml import etree

from ..config import settings
from ..exceptions import FeedParseError, SerializationError
from ..models.atom import AtomFeed, Author, Content, Entry, Link

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>\n'

# Attribute order on link elements
LINK_ATTRIBUTES = ("rel", "href", "type", "hreflang", "title", "length")


def _tag(name: str) -> str:
    return f"{{{ATOM_NS}}}{name}"


def _text_element(parent: etree._Element, name: str, text: str) -> etree._Element:
    element = etree.SubElement(parent, _tag(name))
    element.text = text
    return element


def _content_element(parent: etree._Element, name: str, content: Content) -> etree._Element:
    element = etree.SubElement(parent, _tag(name))
    element.set("type", content.type)
    element.text = content.body
    return element


def _link_element(parent: etree._Element, link: Link) -> etree._Element:
    element = etree.SubElement(parent, _tag("link"))
    for attr in LINK_ATTRIBUTES:
        value = getattr(link, attr)
        # href is always written, everything else only when set
        if attr != "href" and not value:
            continue
        element.set(attr, str(value))
    return element


def _author_element(parent: etree._Element, author: Author) -> etree._Element:
    element = etree.SubElement(parent, _tag("author"))
    _text_element(element, "name", author.name)
    if author.uri is not None:
        _text_element(element, "uri", author.uri)
    if author.email is not None:
        _text_element(element, "email", author.email)
    return element


def _entry_element(parent: etree._Element, entry: Entry) -> etree._Element:
    element = etree.SubElement(parent, _tag("entry"))
    _text_element(element, "title", entry.title)
    _text_element(element, "id", entry.id)
    _text_element(element, "published", entry.published)
    if entry.updated is not None:
        _text_element(element, "updated", entry.updated)
    for link in entry.links:
        _link_element(element, link)
    if entry.author is not None:
        _author_element(element, entry.author)
    if entry.summary is not None:
        _content_element(element, "summary", entry.summary)
    if entry.content is not None:
        _content_element(element, "content", entry.content)
    return element


def build_tree(feed: AtomFeed) -> etree._Element:
    """
    Build the lxml element tree for a feed.

    Args:
        feed: Feed document

    Returns:
        Root <feed> element bound to the Atom namespace
    """
    root = etree.Element(_tag("feed"), nsmap={None: ATOM_NS})
    _text_element(root, "title", feed.title)
    _content_element(root, "subtitle", feed.subtitle)
    _text_element(root, "id", feed.id)
    _text_element(root, "updated", feed.updated)
    for link in feed.links:
        _link_element(root, link)
    if feed.author is not None:
        _author_element(root, feed.author)
    for entry in feed.entries:
        _entry_element(root, entry)
    return root


def serialize_feed(
    feed: AtomFeed,
    pretty: Optional[bool] = None,
    indent: Optional[str] = None
) -> bytes:
    """
    Render a feed document as UTF-8 XML.

    Args:
        feed: Feed document
        pretty: Indent the output (defaults to settings.feed.pretty)
        indent: Indentation unit (defaults to settings.feed.indent)

    Returns:
        XML declaration line followed by the serialized <feed> element

    Raises:
        SerializationError: If a value cannot be represented in XML
    """
    if pretty is None:
        pretty = settings.feed.pretty
    if indent is None:
        indent = settings.feed.indent

    try:
        root = build_tree(feed)
        if pretty:
            etree.indent(root, space=indent)
        body = etree.tostring(root, encoding="unicode")
        return (XML_HEADER + body).encode("utf-8")
    except (ValueError, TypeError, etree.LxmlError) as e:
        logger.error(f"Failed to serialize feed {feed.id}: {e}")
        raise SerializationError(f"Failed to serialize feed: {e}", cause=e) from e


def _child(parent: etree._Element, name: str) -> Optional[etree._Element]:
    return parent.find(_tag(name))


def _child_text(parent: etree._Element, name: str) -> Optional[str]:
    element = _child(parent, name)
    if element is None:
        return None
    return element.text or ""


def _parse_content(element: Optional[etree._Element]) -> Optional[Content]:
    if element is None:
        return None
    return Content(type=element.get("type", ""), body=element.text or "")


def _parse_links(parent: etree._Element) -> List[Link]:
    links = []
    for element in parent.findall(_tag("link")):
        links.append(Link(
            rel=element.get("rel", ""),
            href=element.get("href", ""),
            type=element.get("type", ""),
            hreflang=element.get("hreflang", ""),
            title=element.get("title", ""),
            length=int(element.get("length", "0")),
        ))
    return links


def _parse_author(element: Optional[etree._Element]) -> Optional[Author]:
    if element is None:
        return None
    return Author(
        name=_child_text(element, "name") or "",
        uri=_child_text(element, "uri"),
        email=_child_text(element, "email"),
    )


def _parse_entry(element: etree._Element) -> Entry:
    return Entry(
        title=_child_text(element, "title") or "",
        id=_child_text(element, "id") or "",
        published=_child_text(element, "published") or "",
        updated=_child_text(element, "updated"),
        links=_parse_links(element),
        author=_parse_author(_child(element, "author")),
        summary=_parse_content(_child(element, "summary")),
        content=_parse_content(_child(element, "content")),
    )


def parse_feed(data: bytes) -> AtomFeed:
    """
    Parse an Atom document produced by serialize_feed.

    Args:
        data: XML bytes

    Returns:
        Structurally equivalent AtomFeed

    Raises:
        FeedParseError: If the input is not well-formed XML or not an Atom feed
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise FeedParseError(f"Invalid feed XML: {e}", cause=e) from e

    if root.tag != _tag("feed"):
        raise FeedParseError(f"Not an Atom feed: root element is {root.tag}")

    try:
        return AtomFeed(
            title=_child_text(root, "title") or "",
            subtitle=_parse_content(_child(root, "subtitle")) or Content(),
            id=_child_text(root, "id") or "",
            updated=_child_text(root, "updated") or "",
            links=_parse_links(root),
            author=_parse_author(_child(root, "author")),
            entries=[_parse_entry(element) for element in root.findall(_tag("entry"))],
        )
    except ValueError as e:
        raise FeedParseError(f"Invalid feed content: {e}", cause=e) from e
