"""Ordering rules for attributes and child elements.

Orderings are expressed as key functions so they can drive Python's stable
``sorted``; ``compare_attributes``/``compare_children`` give the equivalent
three-way comparison. All string comparisons are case-sensitive and by code
point, independent of locale.
"""
import logging
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from ..config.models import DEFAULT_NAME_ATTRIBUTES
from ..model.element import Element, canonical_form
from .module_groups import is_in_suppression_group, module_group

logger = logging.getLogger(__name__)

ChildKey = Callable[[Element], Tuple[Any, ...]]

TAG_RANKS: Dict[str, int] = {"property": 0, "module": 1, "message": 2}
OTHER_TAG_RANK = 3


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def attribute_key(attribute: Tuple[str, str]) -> str:
    return attribute[0]


def compare_attributes(a: Tuple[str, str], b: Tuple[str, str]) -> int:
    """Compare two ``(name, value)`` pairs by name; returns -1, 0 or +1."""
    return _three_way(attribute_key(a), attribute_key(b))


def name_value(element: Element, name_attributes: Sequence[str] = DEFAULT_NAME_ATTRIBUTES) -> Optional[str]:
    """Return the value of the first attribute in ``name_attributes`` the element defines."""
    for attribute_name in name_attributes:
        value = element.get(attribute_name)
        if value is not None:
            return value
    return None


def _presence_key(value: Optional[str]) -> Tuple[int, str]:
    # Absent values sort after every present value
    if value is None:
        return (1, "")
    return (0, value)


class LexicalChildKey:
    """Key of a child element: tag, then name-bearing attribute, then full subtree.

    The subtree is rendered in its current order, so children must already be
    normalized when the key is taken.
    """

    def __init__(self, name_attributes: Iterable[str] = DEFAULT_NAME_ATTRIBUTES):
        self.name_attributes = tuple(name_attributes)

    def name_key(self, element: Element) -> Tuple[int, str]:
        return _presence_key(name_value(element, self.name_attributes))

    def __call__(self, element: Element) -> Tuple[Any, ...]:
        return (element.tag,) + self.name_key(element) + (canonical_form(element),)


def module_id(module: Element) -> Optional[str]:
    """Return the value of a module's ``<property name="id">`` child, if any."""
    for child in module.element_children:
        if child.tag == "property" and child.get("name") == "id":
            return child.get("value")
    return None


def collect_module_ids(root: Element) -> Dict[str, str]:
    """Map each module id to the name of the (non-suppression) module carrying it.

    When several modules share an id the one that sorts first by group and name
    wins, so the map does not depend on document order.
    """
    ids: Dict[str, str] = {}
    for module in root.iter("module"):
        name = module.get("name")
        if name is None or is_in_suppression_group(name):
            continue
        identifier = module_id(module)
        if identifier is None:
            continue
        previous = ids.get(identifier)
        if previous is not None and previous != name:
            logger.warning("Duplicate module id '%s' on %s and %s", identifier, previous, name)
            if (module_group(previous), previous) <= (module_group(name), name):
                continue
        ids[identifier] = name
    return ids


class CheckstyleChildKey(LexicalChildKey):
    """Checkstyle house ordering: properties, then modules, then messages.

    Modules order by module group, name and id. A suppression filter with an
    id sorts as if it were the module it refers to, right after that module.
    The lexical key is appended so that the order stays total.
    """

    def __init__(self,
                 module_ids: Optional[Dict[str, str]] = None,
                 name_attributes: Iterable[str] = DEFAULT_NAME_ATTRIBUTES):
        super().__init__(name_attributes)
        self.module_ids = dict(module_ids or {})

    @classmethod
    def for_tree(cls, root: Element, name_attributes: Iterable[str] = DEFAULT_NAME_ATTRIBUTES) -> "CheckstyleChildKey":
        return cls(collect_module_ids(root), name_attributes)

    def __call__(self, element: Element) -> Tuple[Any, ...]:
        rank = TAG_RANKS.get(element.tag, OTHER_TAG_RANK)
        other_tag = element.tag if rank == OTHER_TAG_RANK else ""
        group = 0
        primary: Optional[str] = None
        identifier = ""
        redirected = 0

        if element.tag == "module":
            primary = element.get("name")
            identifier = module_id(element) or ""
            if identifier and is_in_suppression_group(primary) and identifier in self.module_ids:
                primary = self.module_ids[identifier]
                redirected = 1
            group = module_group(primary)
        elif element.tag == "message":
            primary = element.get("key")
        elif element.tag == "property":
            primary = element.get("name")

        return (
            (rank, other_tag, group)
            + _presence_key(primary)
            + (identifier, redirected)
            + super().__call__(element)
        )


def compare_children(a: Element, b: Element, key: Optional[ChildKey] = None) -> int:
    """Compare two sibling elements under ``key`` (lexical by default); returns -1, 0 or +1."""
    if key is None:
        key = LexicalChildKey()
    return _three_way(key(a), key(b))
