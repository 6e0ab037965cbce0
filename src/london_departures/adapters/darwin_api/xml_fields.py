"""Namespace-tolerant field extraction for Darwin XML.

Darwin moves fields between schema namespaces across API versions, so the
same element may arrive as ``lt4:locationName`` in one response and
``lt5:locationName`` in the next. Lookups here compare local names only.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterable

# Prefixes Darwin has used for its type namespaces; declared on the wrapper
# element so bare fragments copied out of a response still parse.
KNOWN_PREFIXES = ("soap", "ldb", "lt", "lt2", "lt3", "lt4", "lt5", "lt6", "lt7", "lt8")

_FRAGMENT_WRAPPER = "<fragment {declarations}>{body}</fragment>"


def local_name(tag: object) -> str:
    """Strip a ``{namespace}`` or ``prefix:`` qualifier from a tag."""
    if not isinstance(tag, str):
        # Comments and processing instructions carry factory functions as tags
        return ""
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    if ":" in tag:
        tag = tag.rsplit(":", 1)[1]
    return tag


def parse_fragment(xml_text: str) -> ET.Element | None:
    """Parse a document or fragment, returning None if it is not parseable.

    Fragments with several top-level elements or undeclared ``ltN:`` prefixes
    are wrapped in a synthetic root element.
    """
    text = xml_text.strip() if xml_text else ""
    if not text:
        return None
    try:
        return ET.fromstring(text)
    except ET.ParseError:
        pass
    declarations = " ".join(
        f'xmlns:{prefix}="urn:fragment:{prefix}"' for prefix in KNOWN_PREFIXES
    )
    try:
        return ET.fromstring(_FRAGMENT_WRAPPER.format(declarations=declarations, body=text))
    except ET.ParseError:
        return None


def find_all(element: ET.Element, name: str) -> list[ET.Element]:
    """Return descendants with the given local name, in document order."""
    return [
        child for child in element.iter() if child is not element and local_name(child.tag) == name
    ]


def find_first(element: ET.Element, name: str) -> ET.Element | None:
    """Return the first descendant with the given local name, or None."""
    for child in element.iter():
        if child is not element and local_name(child.tag) == name:
            return child
    return None


def find_children(element: ET.Element, name: str) -> list[ET.Element]:
    """Return direct children with the given local name."""
    return [child for child in element if local_name(child.tag) == name]


def find_first_outside(
    element: ET.Element, name: str, excluded: Iterable[str]
) -> ET.Element | None:
    """Return the first descendant named ``name`` that is not inside an excluded element."""
    excluded_names = set(excluded)
    for child in element:
        tag = local_name(child.tag)
        if tag == name:
            return child
        if tag in excluded_names:
            continue
        found = find_first_outside(child, name, excluded_names)
        if found is not None:
            return found
    return None


def element_text(element: ET.Element) -> str:
    return "".join(element.itertext()).strip()


def extract_value(fragment: ET.Element | str, name: str) -> str | None:
    """Return the text of the first element named ``name`` in a fragment.

    Args:
        fragment: Parsed element or raw XML text.
        name: Bare tag name, without namespace prefix.

    Returns:
        The element text ("" if the element is present but empty), or None if
        no such element exists or the fragment cannot be parsed.
    """
    if isinstance(fragment, str):
        root = parse_fragment(fragment)
        if root is None:
            return None
        if local_name(root.tag) == name:
            return element_text(root)
    else:
        root = fragment

    match = find_first(root, name)
    if match is None:
        return None
    return element_text(match)
