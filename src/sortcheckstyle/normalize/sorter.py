import logging
from typing import List, Optional

from ..model.element import Element, Node
from .comparators import ChildKey, LexicalChildKey, attribute_key

logger = logging.getLogger(__name__)


class TreeSorter:
    """Reorders attributes and child elements of a tree, bottom-up.

    Non-element children (character data, comments, processing instructions)
    are anchors: they keep their absolute positions. Element children are
    sorted among themselves and written back into the slots elements
    occupied, starting at the position of the first element child.
    """

    def __init__(self,
                 sort_attributes: bool = True,
                 sort_children: bool = True,
                 child_key: Optional[ChildKey] = None):
        self.sort_attributes = sort_attributes
        self.sort_children = sort_children
        self.child_key: ChildKey = child_key or LexicalChildKey()
        self.reordered_elements = 0

    def sort(self, tree: Element) -> Element:
        """Return a new tree with attributes and children in canonical order."""
        self.reordered_elements = 0
        result = self._sort_element(tree)
        logger.debug("Reordered attributes or children of %d element(s)", self.reordered_elements)
        return result

    def _sort_element(self, element: Element) -> Element:
        # Post-order: the child key renders whole subtrees, so they go first
        normalized: List[Node] = [
            self._sort_element(child) if isinstance(child, Element) else child
            for child in element.children
        ]
        attributes = element.attributes
        children = normalized

        if self.sort_attributes:
            attributes = tuple(sorted(attributes, key=attribute_key))
        if self.sort_children:
            children = self._sort_child_elements(normalized)

        if attributes != element.attributes or children != normalized:
            self.reordered_elements += 1
        return element.model_copy(update={"attributes": attributes, "children": tuple(children)})

    def _sort_child_elements(self, children: List[Node]) -> List[Node]:
        slots = [index for index, child in enumerate(children) if isinstance(child, Element)]
        if len(slots) < 2:
            return children
        ordered = sorted((children[index] for index in slots), key=self.child_key)
        result = list(children)
        for index, child in zip(slots, ordered):
            result[index] = child
        return result


def sort_tree(tree: Element,
              sort_attributes: bool = True,
              sort_children: bool = True,
              child_key: Optional[ChildKey] = None) -> Element:
    """Functional form of :meth:`TreeSorter.sort`."""
    return TreeSorter(sort_attributes, sort_children, child_key).sort(tree)
