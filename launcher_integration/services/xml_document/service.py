"""
XML Document Service.

Loads manifest and config files into ElementTree objects and writes them back.
Namespace prefixes and comments found in the source file survive the round trip.
"""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from ...core.config import get_config
from ...core.exceptions import ManifestParseError
from ...core.files import read_text, write_text
from ...core.logging import get_logger

logger = get_logger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"
ANDROID_NAME = f"{{{ANDROID_NS}}}name"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

# ElementTree reserves ns0, ns1, ... for prefixes it invents itself
_GENERATED_PREFIX = re.compile(r"ns\d+$")


def strip_leading_garbage(content: str) -> str:
    """Drop everything before the first '<' (byte-order marks, stray bytes)."""
    if not content:
        return content
    start = content.find("<")
    return content[start:] if start > 0 else content


def register_namespaces(content: str) -> dict[str, str]:
    """Register every prefix declared in ``content`` so serialization keeps it.

    Returns:
        The prefixes declared on the root element, mapped to their URIs.
    """
    root_namespaces: dict[str, str] = {}
    seen_root = False
    for event, node in ET.iterparse(io.StringIO(content), events=["start-ns", "start"]):
        if event == "start":
            seen_root = True
            continue
        prefix, uri = node
        if prefix and not _GENERATED_PREFIX.match(prefix):
            ET.register_namespace(prefix, uri)
        if not seen_root:
            root_namespaces[prefix] = uri
    return root_namespaces


def used_namespaces(root: ET.Element) -> set[str]:
    """Collect the namespace URIs appearing in tags and attribute names."""
    uris: set[str] = set()
    for elem in root.iter():
        names = list(elem.attrib)
        if isinstance(elem.tag, str):
            names.append(elem.tag)
        uris.update(name[1:].partition("}")[0] for name in names if name.startswith("{"))
    return uris


def drop_blank_text(root: ET.Element) -> None:
    """Clear whitespace-only text of childless elements so they self-close."""
    for elem in root.iter():
        if isinstance(elem.tag, str) and len(elem) == 0 and elem.text and not elem.text.strip():
            elem.text = None


class XmlDocument(ET.ElementTree):
    """ElementTree that remembers the namespace declarations of its root."""

    def __init__(self, element: ET.Element, root_namespaces: dict[str, str] | None = None) -> None:
        super().__init__(element)
        self.root_namespaces = dict(root_namespaces or {})


class XmlDocumentService:
    """Parses and serializes the XML files of a Cordova project."""

    def __init__(self, indent: int | None = None) -> None:
        """Initialize the service.

        Args:
            indent: Indent width used when serializing. Defaults to the
                configured manifest indent.
        """
        self.indent = get_config().manifest_indent if indent is None else indent

    def parse(self, file_path: Path) -> XmlDocument:
        """Read and parse an XML file.

        Raises:
            FileReadError: If the file cannot be read.
            ManifestParseError: If the content is not well-formed XML.
        """
        content = read_text(file_path)
        return self.parse_string(content, source=str(file_path))

    def parse_string(self, content: str, source: str = "<string>") -> XmlDocument:
        """Parse XML text into an ElementTree."""
        content = strip_leading_garbage(content)
        try:
            root_namespaces = register_namespaces(content)
            parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
            root = ET.fromstring(content, parser=parser)
        except ET.ParseError as exc:
            raise ManifestParseError(message="Malformed XML", path=source, cause=exc) from exc
        return XmlDocument(root, root_namespaces)

    def serialize(self, tree: ET.ElementTree, indent: int | None = None) -> str:
        """Serialize a tree with a fixed indentation width.

        Attribute order and element order follow the tree's insertion order.
        Prefixed namespaces declared on the root of a parsed document are
        written back even when no element uses them any more.
        """
        width = self.indent if indent is None else indent
        root = tree.getroot()
        drop_blank_text(root)
        ET.indent(tree, space=" " * width)

        declared = getattr(tree, "root_namespaces", {})
        used = used_namespaces(root)
        unused = {
            f"xmlns:{prefix}": uri
            for prefix, uri in declared.items()
            if prefix and not _GENERATED_PREFIX.match(prefix) and uri not in used
        }
        for key, uri in unused.items():
            root.set(key, uri)
        try:
            text = ET.tostring(root, encoding="unicode")
        finally:
            for key in unused:
                del root.attrib[key]
        return XML_DECLARATION + text + "\n"

    def write(self, tree: ET.ElementTree, file_path: Path) -> None:
        """Serialize ``tree`` and overwrite ``file_path`` with the result."""
        content = self.serialize(tree)
        write_text(file_path, content, failure_message=f"Writing XML file failed: {file_path}")
        logger.debug("XML file written", path=str(file_path), bytes=len(content))
