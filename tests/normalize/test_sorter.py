from conftest import child_names

from sortcheckstyle.model import Element, Text, TextKind
from sortcheckstyle.normalize.comparators import CheckstyleChildKey
from sortcheckstyle.normalize.sorter import TreeSorter, sort_tree


def test_sorts_children_by_name(parse_root):
    tree = parse_root(
        '<module name="TreeWalker"><module name="JavadocMethod"/><module name="ConstantName"/></module>'
    )
    assert child_names(sort_tree(tree)) == ["ConstantName", "JavadocMethod"]


def test_sorts_attributes_by_name(parse_root):
    tree = parse_root('<module severity="warning" name="Indentation"/>')
    assert sort_tree(tree).attributes == (("name", "Indentation"), ("severity", "warning"))


def test_sorting_is_recursive(parse_root):
    tree = parse_root('<r><a><c/><b/></a></r>')
    inner = sort_tree(tree).element_children[0]
    assert [child.tag for child in inner.element_children] == ["b", "c"]


def test_text_anchors_keep_their_positions(parse_root):
    tree = parse_root("<r>\n  <b/>\n  <!-- note -->\n  <a/>\n</r>")
    result = sort_tree(tree)

    assert len(result.children) == len(tree.children)
    for before, after in zip(tree.children, result.children):
        assert isinstance(before, Element) == isinstance(after, Element)
        if not isinstance(before, Element):
            assert before == after
    assert [child.tag for child in result.element_children] == ["a", "b"]


def test_comment_between_elements_stays_between(parse_root):
    tree = parse_root("<r><b/><!--x--><a/></r>")
    first, middle, last = sort_tree(tree).children
    assert first.tag == "a"
    assert middle == Text(content="x", kind=TextKind.COMMENT)
    assert last.tag == "b"


def test_flags_select_what_is_sorted(parse_root):
    tree = parse_root('<r z="1" a="2"><b/><a/></r>')

    attributes_only = sort_tree(tree, sort_children=False)
    assert attributes_only.attributes == (("a", "2"), ("z", "1"))
    assert [c.tag for c in attributes_only.element_children] == ["b", "a"]

    children_only = sort_tree(tree, sort_attributes=False)
    assert children_only.attributes == (("z", "1"), ("a", "2"))
    assert [c.tag for c in children_only.element_children] == ["a", "b"]


def test_children_are_sorted_by_their_normalized_form(parse_root):
    # The second <p> renders as <p><z/><a/></p> before sorting and as <p><a/><z/></p> after
    tree = parse_root("<r><p><y/></p><p><z/><a/></p></r>")
    result = sort_tree(tree)
    assert [c.element_children[0].tag for c in result.element_children] == ["a", "y"]


def test_duplicates_are_stable(parse_root):
    tree = parse_root('<r><p name="x" value="1"/><p name="x" value="1"/></r>')
    assert sort_tree(tree) == tree


def test_reordered_elements_counter(parse_root):
    sorter = TreeSorter()
    sorter.sort(parse_root("<r><b/><a/></r>"))
    assert sorter.reordered_elements == 1
    sorter.sort(parse_root("<r><a/><b/></r>"))
    assert sorter.reordered_elements == 0


def test_custom_child_key(parse_root):
    tree = parse_root('<module name="Checker"><module name="TreeWalker"/><property name="p"/></module>')
    result = TreeSorter(child_key=CheckstyleChildKey()).sort(tree)
    assert [c.tag for c in result.element_children] == ["property", "module"]
