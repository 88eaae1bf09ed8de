"""Immutable in-memory representation of an XML document.

Every transform in :mod:`sortcheckstyle.normalize` builds new tuples and
returns a new tree, so a tree can always be compared against its
pre-transform counterpart.
"""
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

XML_WHITESPACE = " \t\r\n"


class TextKind(str, Enum):
    TEXT = "text"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "pi"
    ENTITY = "entity"


class Text(BaseModel):
    """Opaque non-element node, carried verbatim.

    For processing instructions ``content`` holds the target, a space and the
    data; for unresolved entity references it holds the entity name.
    """
    content: str = ""
    kind: TextKind = TextKind.TEXT

    model_config = {
        "frozen": True,
    }

    @property
    def is_whitespace(self) -> bool:
        """True for character data made only of XML whitespace (or nothing)."""
        return self.kind == TextKind.TEXT and not self.content.strip(XML_WHITESPACE)


def _pairs(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, dict):
        return value.items()
    return value


class Element(BaseModel):
    tag: str = Field(min_length=1)
    attributes: Tuple[Tuple[str, str], ...] = ()
    namespaces: Tuple[Tuple[Optional[str], str], ...] = ()
    children: Tuple[Union["Element", Text], ...] = ()

    model_config = {
        "frozen": True,
    }

    @field_validator("attributes", mode="before")
    @classmethod
    def _last_write_wins(cls, value: Any) -> Any:
        # Duplicate names keep the position of the first occurrence.
        if value is None:
            return ()
        merged: Dict[Any, Any] = {}
        for name, attribute_value in _pairs(value):
            merged[name] = attribute_value
        return tuple(merged.items())

    @field_validator("namespaces", mode="before")
    @classmethod
    def _namespace_pairs(cls, value: Any) -> Any:
        if value is None:
            return ()
        return tuple(_pairs(value))

    @field_validator("children", mode="before")
    @classmethod
    def _children_tuple(cls, value: Any) -> Any:
        if value is None:
            return ()
        return tuple(value)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of attribute ``name``, or ``default``."""
        for attribute_name, value in self.attributes:
            if attribute_name == name:
                return value
        return default

    @property
    def element_children(self) -> Tuple["Element", ...]:
        return tuple(child for child in self.children if isinstance(child, Element))

    def iter(self, tag: Optional[str] = None) -> Iterator["Element"]:
        """Yield this element and its descendant elements in document order."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.element_children:
            yield from child.iter(tag)

    def with_attributes(self, attributes: Iterable[Tuple[str, str]]) -> "Element":
        """Return a copy with the attribute sequence replaced."""
        return self.model_copy(update={"attributes": tuple(attributes)})

    def with_children(self, children: Iterable[Union["Element", Text]]) -> "Element":
        """Return a copy with the child sequence replaced."""
        return self.model_copy(update={"children": tuple(children)})


Element.model_rebuild()

Node = Union[Element, Text]


class Document(BaseModel):
    """A root element plus the parts of an XML document that live outside it."""
    root: Element
    doctype: Optional[str] = None
    prolog: Tuple[Text, ...] = ()
    epilog: Tuple[Text, ...] = ()
    encoding: str = "UTF-8"

    model_config = {
        "frozen": True,
    }

    def with_root(self, root: Element) -> "Document":
        return self.model_copy(update={"root": root})


def _escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attribute(value: str) -> str:
    return _escape_text(value).replace('"', "&quot;")


def _write_text(node: Text, parts: List[str]) -> None:
    if node.kind == TextKind.COMMENT:
        parts.append(f"<!--{node.content}-->")
    elif node.kind == TextKind.PROCESSING_INSTRUCTION:
        parts.append(f"<?{node.content}?>")
    elif node.kind == TextKind.ENTITY:
        parts.append(f"&{node.content};")
    else:
        parts.append(_escape_text(node.content))


def _write_element(element: Element, parts: List[str]) -> None:
    parts.append("<")
    parts.append(element.tag)
    for prefix, uri in element.namespaces:
        name = f"xmlns:{prefix}" if prefix else "xmlns"
        parts.append(f' {name}="{_escape_attribute(uri)}"')
    for name, value in element.attributes:
        parts.append(f' {name}="{_escape_attribute(value)}"')
    parts.append(">")
    for child in element.children:
        if isinstance(child, Element):
            _write_element(child, parts)
        else:
            _write_text(child, parts)
    parts.append(f"</{element.tag}>")


def canonical_form(node: Union[Node, Document]) -> str:
    """Render a node (or document) as a deterministic string, in its current order.

    Distinct trees always render differently, so the result serves both as the
    final sorting tie-break and as the basis for change detection.
    """
    parts: List[str] = []
    if isinstance(node, Document):
        if node.doctype:
            parts.append(node.doctype)
        for text in node.prolog:
            _write_text(text, parts)
        _write_element(node.root, parts)
        for text in node.epilog:
            _write_text(text, parts)
    elif isinstance(node, Element):
        _write_element(node, parts)
    else:
        _write_text(node, parts)
    return "".join(parts)
