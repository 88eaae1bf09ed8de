from .element import Document, Element, Node, Text, TextKind, canonical_form
from .xml_codec import (
    DocumentError,
    parse_document,
    read_document,
    to_xml_bytes,
    write_document,
)

__all__ = [
    "Document",
    "Element",
    "Node",
    "Text",
    "TextKind",
    "canonical_form",
    "DocumentError",
    "parse_document",
    "read_document",
    "to_xml_bytes",
    "write_document",
]
