import logging
import re
from typing import Iterable

from ..config.models import DEFAULT_VALUE_ATTRIBUTES
from ..model.element import Element

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


def compress(tree: Element) -> Element:
    """Remove whitespace-only character data at every level of the tree.

    Comments, processing instructions, entity references and character data
    with any non-whitespace content are kept, so compressing twice is the same
    as compressing once.
    """
    children = tuple(
        compress(child) if isinstance(child, Element) else child
        for child in tree.children
        if isinstance(child, Element) or not child.is_whitespace
    )
    return tree.with_children(children)


def _collapse(value: str) -> str:
    return WHITESPACE_RUN.sub(" ", value)


def compress_values(tree: Element, attribute_names: Iterable[str] = DEFAULT_VALUE_ATTRIBUTES) -> Element:
    """Collapse each whitespace run inside the named attributes' values to one space.

    Typical use is multi-line ``<property name="format" value="..."/>`` regular
    expressions in Checkstyle configurations.
    """
    names = frozenset(attribute_names)
    return _compress_values(tree, names)


def _compress_values(element: Element, names: frozenset) -> Element:
    attributes = tuple(
        (name, _collapse(value) if name in names else value)
        for name, value in element.attributes
    )
    if attributes != element.attributes:
        logger.debug("Collapsed whitespace in attribute values of <%s>", element.tag)
    children = tuple(
        _compress_values(child, names) if isinstance(child, Element) else child
        for child in element.children
    )
    return element.model_copy(update={"attributes": attributes, "children": children})
