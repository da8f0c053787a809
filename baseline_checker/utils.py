"""
Utility functions shared by the extractors: tree-sitter parsing and node helpers.
"""

import re
from typing import Iterator, Optional

import tree_sitter_css as tscss
import tree_sitter_html as tshtml
import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree

from .issue import Location

CSS_LANGUAGE = Language(tscss.language())
HTML_LANGUAGE = Language(tshtml.language())
JS_LANGUAGE = Language(tsjavascript.language())
TS_LANGUAGE = Language(tstypescript.language_typescript())
TSX_LANGUAGE = Language(tstypescript.language_tsx())

# Vendor prefixes as written in React style objects.
_VENDOR_PREFIXES = {"Webkit": "webkit", "Moz": "moz", "ms": "ms", "O": "o"}
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


class SourceParseError(Exception):
    """The parser could not build a usable syntax tree."""


def parse_source(text: str, language: Language, tolerate_errors: bool = False) -> Tree:
    """Parse text with a fresh Parser.

    Raises SourceParseError when the tree contains error or missing nodes, or
    (with tolerate_errors) only when nothing at all could be recognized. Callers
    that tolerate errors must check the nodes they use (``Node.has_error``).
    """
    # Parser instances are not shared between calls.
    parser = Parser(language)
    tree = parser.parse(text.encode("utf-8"))
    root = tree.root_node
    if root.is_error:
        raise SourceParseError(f"unrecognizable input ({root.type})")
    if root.has_error and not tolerate_errors:
        bad = first_error(root)
        where = f" at line {bad.start_point[0] + 1}" if bad is not None else ""
        raise SourceParseError(f"syntax error{where}")
    return tree


def first_error(node: Node) -> Optional[Node]:
    for n in iter_nodes(node):
        if n.is_error or n.is_missing:
            return n
    return None


def iter_nodes(node: Node) -> Iterator[Node]:
    """Pre-order walk over node and all of its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def node_location(node: Node, line_offset: int = 0) -> Location:
    """1-based line and column of the node's start."""
    row, column = node.start_point
    return Location(line=row + 1 + line_offset, column=column + 1)


def camel_to_kebab(name: str) -> str:
    """React style key to CSS property: backgroundColor -> background-color, WebkitUserSelect -> -webkit-user-select."""
    if name.startswith("--") or "-" in name:
        return name.lower() if not name.startswith("--") else name
    for prefix, vendor in _VENDOR_PREFIXES.items():
        if name.startswith(prefix) and len(name) > len(prefix) and name[len(prefix)].isupper():
            return f"-{vendor}-" + camel_to_kebab(name[len(prefix)].lower() + name[len(prefix) + 1:])
    return _CAMEL_BOUNDARY.sub(lambda m: "-" + m.group(1).lower(), name).lower()
