import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import lxml.etree as ET

from .element import Document, Element, Node, Text, TextKind

logger = logging.getLogger(__name__)


class DocumentError(ValueError):
    """Raised when input bytes are not a well-formed XML document."""


def _make_parser() -> ET.XMLParser:
    # Keep every node the normalizer treats as an anchor; never touch the network.
    return ET.XMLParser(
        remove_blank_text=False,
        remove_comments=False,
        remove_pis=False,
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
    )


def _special_to_text(node: ET._Element) -> Optional[Text]:
    if isinstance(node, ET._Comment):
        return Text(content=node.text or "", kind=TextKind.COMMENT)
    if isinstance(node, ET._ProcessingInstruction):
        content = node.target if not node.text else f"{node.target} {node.text}"
        return Text(content=content, kind=TextKind.PROCESSING_INSTRUCTION)
    if isinstance(node, ET._Entity):
        return Text(content=node.name, kind=TextKind.ENTITY)
    return None


def _declared_namespaces(node: ET._Element) -> List[Tuple[Optional[str], str]]:
    parent = node.getparent()
    inherited = parent.nsmap if parent is not None else {}
    declared = [
        (prefix, uri) for prefix, uri in node.nsmap.items()
        if inherited.get(prefix) != uri
    ]
    return sorted(declared, key=lambda item: (item[0] is not None, item[0] or ""))


def element_from_lxml(node: ET._Element) -> Element:
    """Convert an lxml element (and its subtree) into the immutable model."""
    children: List[Node] = []
    if node.text:
        children.append(Text(content=node.text))
    for child in node:
        special = _special_to_text(child)
        if special is not None:
            children.append(special)
        else:
            children.append(element_from_lxml(child))
        if child.tail:
            children.append(Text(content=child.tail))
    return Element(
        tag=node.tag,
        attributes=list(node.attrib.items()),
        namespaces=_declared_namespaces(node),
        children=children,
    )


def _text_to_lxml(text: Text) -> ET._Element:
    if text.kind == TextKind.COMMENT:
        return ET.Comment(text.content)
    if text.kind == TextKind.PROCESSING_INSTRUCTION:
        target, _, data = text.content.partition(" ")
        return ET.PI(target, data or None)
    if text.kind == TextKind.ENTITY:
        return ET.Entity(text.content)
    raise ValueError(f"Character data cannot become a standalone node: {text.content!r}")


def element_to_lxml(element: Element, parent: Optional[ET._Element] = None) -> ET._Element:
    """Build an lxml element from the model, appending it to ``parent`` if given."""
    nsmap = dict(element.namespaces) or None
    if parent is None:
        node = ET.Element(element.tag, nsmap=nsmap)
    else:
        node = ET.SubElement(parent, element.tag, nsmap=nsmap)
    for name, value in element.attributes:
        node.set(name, value)

    last: Optional[ET._Element] = None
    for child in element.children:
        if isinstance(child, Text) and child.kind == TextKind.TEXT:
            # Adjacent character data merges into .text or the previous tail
            if last is None:
                node.text = (node.text or "") + child.content
            else:
                last.tail = (last.tail or "") + child.content
        elif isinstance(child, Element):
            last = element_to_lxml(child, node)
        else:
            last = _text_to_lxml(child)
            node.append(last)
    return node


def _skip_markup(text: str, index: int, opener: str, closer: str) -> int:
    end = text.find(closer, index + len(opener))
    if end < 0:
        raise DocumentError(f"Unterminated '{opener}' in DOCTYPE internal subset")
    return end + len(closer)


def _doctype_declaration(data: bytes, encoding: str) -> str:
    """Return the DOCTYPE declaration of ``data`` verbatim, internal subset included."""
    try:
        text = data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read DOCTYPE declaration: {e}") from e
    start = text.find("<!DOCTYPE")
    if start < 0:
        raise DocumentError("DOCTYPE declaration not found")

    quote: Optional[str] = None
    in_subset = False
    index = start + len("<!DOCTYPE")
    while index < len(text):
        char = text[index]
        if quote:
            if char == quote:
                quote = None
        elif in_subset and text.startswith("<!--", index):
            index = _skip_markup(text, index, "<!--", "-->")
            continue
        elif in_subset and text.startswith("<?", index):
            index = _skip_markup(text, index, "<?", "?>")
            continue
        elif char in "\"'":
            quote = char
        elif char == "[":
            in_subset = True
        elif char == "]":
            in_subset = False
        elif char == ">" and not in_subset:
            return text[start:index + 1]
        index += 1
    raise DocumentError("Unterminated DOCTYPE declaration")


def parse_document(data: bytes) -> Document:
    """Parse XML bytes into a :class:`Document`.

    Raises:
        DocumentError: If the bytes are not well-formed XML.
    """
    try:
        root = ET.fromstring(data, parser=_make_parser())
    except ET.XMLSyntaxError as e:
        raise DocumentError(f"Failed to parse XML: {e}") from e

    docinfo = root.getroottree().docinfo
    encoding = docinfo.encoding or "UTF-8"
    doctype = _doctype_declaration(data, encoding) if docinfo.doctype else None
    prolog = [_special_to_text(node) for node in reversed(list(root.itersiblings(preceding=True)))]
    epilog = [_special_to_text(node) for node in root.itersiblings()]
    return Document(
        root=element_from_lxml(root),
        doctype=doctype,
        prolog=[text for text in prolog if text is not None],
        epilog=[text for text in epilog if text is not None],
        encoding=encoding,
    )


def read_document(path: Union[str, Path]) -> Document:
    """Read and parse an XML file. File errors propagate as ``OSError``."""
    data = Path(path).read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return parse_document(data)


def to_xml_bytes(document: Document,
                 pretty_print: bool = False,
                 xml_declaration: bool = True,
                 encoding: Optional[str] = None) -> bytes:
    """Serialize a document, including its doctype, prolog and epilog."""
    root = element_to_lxml(document.root)
    for text in document.prolog:
        root.addprevious(_text_to_lxml(text))
    for text in reversed(document.epilog):
        root.addnext(_text_to_lxml(text))
    return ET.tostring(
        root.getroottree(),
        pretty_print=pretty_print,
        xml_declaration=xml_declaration,
        encoding=encoding or document.encoding,
        doctype=document.doctype,
    )  # type: ignore


def write_document(document: Document, path: Union[str, Path], **kwargs) -> None:
    """Serialize a document into ``path``; keyword arguments go to :func:`to_xml_bytes`."""
    xml_bytes = to_xml_bytes(document, **kwargs)
    Path(path).write_bytes(xml_bytes)
    logger.debug("Wrote %d bytes to %s", len(xml_bytes), path)
