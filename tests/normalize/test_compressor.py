from sortcheckstyle.model import Element, Text, TextKind
from sortcheckstyle.normalize.compressor import compress, compress_values


def _texts(tree):
    for element in tree.iter():
        for child in element.children:
            if isinstance(child, Text):
                yield child


def _shape(tree):
    return [(e.tag, e.attributes) for e in tree.iter()]


INDENTED = """<module name="Checker">
  <property name="charset" value="UTF-8"/>
  <module name="TreeWalker">
    <module name="ConstantName"/>
  </module>
</module>
"""


def test_compress_removes_all_whitespace_text(parse_root):
    tree = parse_root(INDENTED)
    result = compress(tree)
    assert list(_texts(result)) == []
    assert _shape(result) == _shape(tree)


def test_compress_keeps_comments_and_content(parse_root):
    tree = parse_root("<r>\n  <!-- keep -->\n  <a> value </a>\n  <?pi data?>\n</r>")
    result = compress(tree)
    assert list(_texts(result)) == [
        Text(content=" keep ", kind=TextKind.COMMENT),
        Text(content="pi data", kind=TextKind.PROCESSING_INSTRUCTION),
        Text(content=" value "),
    ]


def test_compress_is_idempotent(parse_root):
    once = compress(parse_root(INDENTED))
    assert compress(once) == once


def test_compress_leaves_tree_without_whitespace_unchanged():
    tree = Element(tag="r", children=[Element(tag="a"), Text(content="x")])
    assert compress(tree) == tree


def test_compress_values_collapses_whitespace_runs(parse_root):
    tree = parse_root(
        '<module name="MemberName"><property name="format  name" value="^[a-z]\n      [a-zA-Z0-9]*$"/></module>'
    )
    prop = compress_values(tree).element_children[0]
    assert prop.get("value") == "^[a-z] [a-zA-Z0-9]*$"
    assert prop.get("name") == "format  name"


def test_compress_values_with_custom_attributes():
    tree = Element(tag="p", attributes={"value": "a  b", "message": "c \t d"})
    result = compress_values(tree, ("message",))
    assert result.attributes == (("value", "a  b"), ("message", "c d"))


def test_compress_values_keeps_non_ascii_whitespace():
    tree = Element(tag="property", attributes={"value": "a\u00a0b\u2028c  d"})
    assert compress_values(tree).get("value") == "a\u00a0b\u2028c d"
