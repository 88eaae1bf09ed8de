"""Tree-normalization engine: comparators, sorter, compressor and change detection."""

from .change_detector import changed, was_changed
from .comparators import (
    CheckstyleChildKey,
    LexicalChildKey,
    attribute_key,
    compare_attributes,
    compare_children,
    name_value,
)
from .compressor import compress, compress_values
from .engine import build_child_key, describe_processing, normalize, normalize_document
from .sorter import TreeSorter, sort_tree

__all__ = [
    "changed",
    "was_changed",
    "CheckstyleChildKey",
    "LexicalChildKey",
    "attribute_key",
    "compare_attributes",
    "compare_children",
    "name_value",
    "compress",
    "compress_values",
    "build_child_key",
    "describe_processing",
    "normalize",
    "normalize_document",
    "TreeSorter",
    "sort_tree",
]
