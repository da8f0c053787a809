"""
HTML checks: element and attribute compatibility keys.
"""

from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node, Tree

from ..extractor_base import BaseExtractor
from ..issue import IssueKind
from ..utils import HTML_LANGUAGE, node_text

ELEMENT_TYPES = ("element", "script_element", "style_element")
_TAG_TYPES = ("start_tag", "self_closing_tag")


def element_tag(node: Node) -> Optional[Node]:
    """The start (or self-closing) tag node of an element node."""
    return next((c for c in node.children if c.type in _TAG_TYPES), None)


def tag_name(node: Node) -> str:
    """Lower-cased tag name of an element node, or '' if it has no start tag."""
    tag = element_tag(node)
    if tag is None:
        return ""
    name = next((c for c in tag.children if c.type == "tag_name"), None)
    return node_text(name).lower() if name is not None else ""


def tag_attributes(node: Node) -> List[Tuple[str, str]]:
    """(lower-cased name, unquoted value) pairs of an element's start tag."""
    tag = element_tag(node)
    if tag is None:
        return []
    attrs: List[Tuple[str, str]] = []
    for attr in tag.children:
        if attr.type != "attribute":
            continue
        name = next((c for c in attr.children if c.type == "attribute_name"), None)
        if name is None:
            continue
        value = ""
        for c in attr.children:
            if c.type == "attribute_value":
                value = node_text(c)
            elif c.type == "quoted_attribute_value":
                value = node_text(c)[1:-1]
        attrs.append((node_text(name).lower(), value))
    return attrs


def iter_elements(root: Node) -> Iterator[Node]:
    """Depth-first walk over element nodes, skipping unrecoverable error subtrees."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error and node is not root:
            continue
        if node.type in ELEMENT_TYPES:
            yield node
        stack.extend(reversed(node.children))


class HTMLExtractor(BaseExtractor):
    """Check every element and each of its attributes. No source locations are tracked."""

    language_tag = "html"
    grammar = HTML_LANGUAGE
    tolerate_errors = True

    def _walk(self, tree: Tree, text: str):
        self.walk_elements(tree.root_node)

    def walk_elements(self, root: Node):
        for element in iter_elements(root):
            name = tag_name(element)
            if not name:
                continue
            self._check(f"html.elements.{name}", None, IssueKind.ELEMENT, name)
            for attr_name, _value in tag_attributes(element):
                self._check(f"html.global_attributes.{attr_name}", None, IssueKind.ATTRIBUTE, attr_name)
