"""Sorts and compresses Checkstyle configuration files."""
from .config.models import NormalizeOptions, Ordering
from .model import Document, Element, Text, TextKind, canonical_form
from .normalize import describe_processing, normalize, normalize_document, was_changed

__version__ = "1.0.0"

__all__ = [
    "NormalizeOptions",
    "Ordering",
    "Document",
    "Element",
    "Text",
    "TextKind",
    "canonical_form",
    "describe_processing",
    "normalize",
    "normalize_document",
    "was_changed",
]
