from typing import Union

from ..model.element import Document, Element, canonical_form


def changed(before: str, after: str) -> bool:
    """True iff two canonical serializations differ."""
    return before != after


def was_changed(original: Union[Element, Document], result: Union[Element, Document]) -> bool:
    """Report whether normalization rewrote anything. Used only for reporting."""
    return changed(canonical_form(original), canonical_form(result))
