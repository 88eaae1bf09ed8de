"""Entry points of the normalization engine.

The engine is a pure in-memory transformation: it receives a parsed tree and
returns a new one, keeping no state between calls.
"""
import logging
from typing import Optional

from ..config.models import NormalizeOptions, Ordering
from ..model.element import Document, Element
from .change_detector import was_changed
from .comparators import CheckstyleChildKey, ChildKey, LexicalChildKey
from .compressor import compress, compress_values
from .sorter import TreeSorter

logger = logging.getLogger(__name__)


def build_child_key(tree: Element, options: NormalizeOptions) -> ChildKey:
    """Select the child key for ``options.ordering``; the checkstyle key indexes module ids of ``tree``."""
    if options.ordering == Ordering.CHECKSTYLE:
        return CheckstyleChildKey.for_tree(tree, options.name_attributes)
    return LexicalChildKey(options.name_attributes)


def normalize(tree: Element, options: Optional[NormalizeOptions] = None) -> Element:
    """Return the canonical form of ``tree`` under ``options``.

    Compression runs before sorting so that the final tie-break never depends
    on indentation; with every option disabled the tree is returned unchanged.

    Args:
        tree: The root element to normalize
        options: Normalization flags, defaults to sorting attributes and children

    Returns:
        A new tree (or ``tree`` itself when nothing is enabled)
    """
    if options is None:
        options = NormalizeOptions()

    result = tree
    if options.compress_values:
        result = compress_values(result, options.value_attributes)
    if options.compress:
        result = compress(result)
    if options.sorts_anything:
        sorter = TreeSorter(
            sort_attributes=options.sort_attributes,
            sort_children=options.sort_children,
            child_key=build_child_key(result, options),
        )
        result = sorter.sort(result)
    return result


def normalize_document(document: Document, options: Optional[NormalizeOptions] = None) -> Document:
    """Normalize the root element; doctype, prolog and epilog are kept as they are."""
    return document.with_root(normalize(document.root, options))


def describe_processing(options: NormalizeOptions) -> str:
    """Describe in English how a document was (or will be) processed."""
    if options.sort_attributes and options.sort_children:
        sorting = "sorted"
    elif options.sorts_anything:
        sorting = "partly sorted"
    else:
        sorting = None

    if options.compresses_anything:
        return f"compressed and {sorting}" if sorting else "compressed"
    return sorting or "unsorted"


__all__ = [
    "build_child_key",
    "normalize",
    "normalize_document",
    "describe_processing",
    "was_changed",
]
