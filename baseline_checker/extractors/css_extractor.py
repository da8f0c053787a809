"""
CSS checks: property and property-value compatibility keys.
"""

import re
from typing import Iterator

from tree_sitter import Node, Tree

from ..extractor_base import BaseExtractor
from ..issue import BaselineReport, IssueKind, Location
from ..status_resolver import dedupe_key
from ..utils import CSS_LANGUAGE, iter_nodes, node_text

# A CSS <ident-token>: red, flex, sans-serif, -webkit-box.
_CSS_IDENT = re.compile(r"^-?[a-zA-Z_][a-zA-Z0-9_-]*$")

# Bare declaration lists (style objects, styled-components bodies) are wrapped in
# a rule so the stylesheet grammar accepts them. Kept on the first line so
# line numbers do not move.
_DECLARATIONS_PREFIX = "*{"
_DECLARATIONS_SUFFIX = "\n}"

# Declarations sit in a block, or at the top level of a bare declaration list.
_DECLARATION_PARENTS = ("block", "stylesheet")


def is_intact(decl: Node) -> bool:
    """A declaration with no error or missing node inside, outside any ERROR node."""
    parent = decl.parent
    return not decl.has_error and parent is not None and parent.type in _DECLARATION_PARENTS


class CSSExtractor(BaseExtractor):
    """Check every declaration's property and its identifier values.

    Parsing is error tolerant: syntax the grammar does not know (newer at-rule
    preludes, nesting) only drops the declarations it breaks.
    """

    language_tag = "css"
    grammar = CSS_LANGUAGE
    tolerate_errors = True

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._wrapped = False

    def analyze(
        self, text: str, line_offset: int = 0, declarations_only: bool = False, column_offset: int = 0
    ) -> BaselineReport:
        """Analyze a stylesheet, or with declarations_only a bare ``prop: value;`` list."""
        self._wrapped = declarations_only
        if declarations_only:
            text = f"{_DECLARATIONS_PREFIX}{text}{_DECLARATIONS_SUFFIX}"
        return super().analyze(text, line_offset=line_offset, column_offset=column_offset)

    def _walk(self, tree: Tree, text: str):
        if tree.root_node.has_error:
            self.logger.debug("[Baseline] css: recovering from syntax errors")
        for node in iter_nodes(tree.root_node):
            if node.type == "declaration" and is_intact(node):
                self._check_declaration(node)

    def _location(self, node: Node) -> Location:
        loc = self.location(node)
        if self._wrapped and node.start_point[0] == 0:
            loc = Location(loc.line, loc.column - len(_DECLARATIONS_PREFIX))
        return loc

    def _check_declaration(self, decl: Node):
        name_node = next((c for c in decl.named_children if c.type == "property_name"), None)
        if name_node is None:
            return
        prop = node_text(name_node).strip().lower()
        if not prop:
            return
        loc = self._location(decl)

        # 1) property-level key
        self._check(f"css.properties.{prop}", loc, IssueKind.PROPERTY, prop)

        # 2) value-level identifiers, at the declaration's location
        for ident in self._value_identifiers(decl):
            value_key = f"css.properties.{prop}.{ident}"
            if dedupe_key(value_key, loc) in self.seen:
                continue
            self._check(value_key, loc, IssueKind.PROPERTY_VALUE, prop, value=ident)

    @staticmethod
    def _value_identifiers(decl: Node) -> Iterator[str]:
        for child in decl.named_children:
            if child.type in ("property_name", "comment", "important"):
                continue
            for node in iter_nodes(child):
                if node.type != "plain_value":
                    continue
                ident = node_text(node).lower()
                if not ident or ident.startswith("--") or not _CSS_IDENT.match(ident):
                    continue
                yield ident
