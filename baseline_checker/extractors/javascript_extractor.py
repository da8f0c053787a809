"""
JavaScript/TypeScript checks: builtin identifiers and ``object.property`` API usages.
"""

from typing import Iterator

from tree_sitter import Node, Tree

from ..extractor_base import BaseExtractor
from ..issue import IssueKind
from ..utils import JS_LANGUAGE, TS_LANGUAGE, node_text

# parent type -> fields whose identifier child declares a name instead of using one
_BINDING_FIELDS = {
    "variable_declarator": ("name",),
    "function_declaration": ("name",),
    "function_expression": ("name",),
    "function": ("name",),
    "generator_function_declaration": ("name",),
    "generator_function": ("name",),
    "class_declaration": ("name",),
    "class": ("name",),
    "arrow_function": ("parameter",),
    "catch_clause": ("parameter",),
    "assignment_expression": ("left",),
    "augmented_assignment_expression": ("left",),
    "assignment_pattern": ("left",),
    "object_assignment_pattern": ("left",),
    "pair_pattern": ("value",),
    "import_specifier": ("name", "alias"),
    "export_specifier": ("name", "alias"),
    "required_parameter": ("pattern",),
    "optional_parameter": ("pattern",),
    "enum_declaration": ("name",),
    "internal_module": ("name",),
    "module": ("name",),
}
# parents whose identifier children are always bindings
_BINDING_PARENTS = (
    "formal_parameters",
    "import_clause",
    "namespace_import",
    "namespace_export",
    "array_pattern",
    "object_pattern",
    "rest_pattern",
)
JSX_TAG_TYPES = ("jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element")


def is_binding(node: Node) -> bool:
    """True if the identifier declares a name (variable, parameter, import, ...)."""
    parent = node.parent
    if parent is None:
        return False
    if parent.type in _BINDING_PARENTS:
        return True
    for field_name in _BINDING_FIELDS.get(parent.type, ()):
        if parent.child_by_field_name(field_name) == node:
            return True
    return False


def iter_post_order(root: Node) -> Iterator[Node]:
    """Children before parents. JSX tag names are not visited."""
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        skip = node.child_by_field_name("name") if node.type in JSX_TAG_TYPES else None
        for child in reversed(node.children):
            if skip is not None and child == skip:
                continue
            stack.append((child, False))


class JavaScriptExtractor(BaseExtractor):
    """Single-pass visitor over identifiers and member expressions."""

    language_tag = "js"
    grammar = JS_LANGUAGE

    def __init__(self, *args, dialect: str = "javascript", **kwargs):
        super().__init__(*args, **kwargs)
        if dialect == "typescript":
            self.grammar = TS_LANGUAGE

    def _walk(self, tree: Tree, text: str):
        self.walk_script(tree.root_node)

    def walk_script(self, root: Node):
        for node in iter_post_order(root):
            if node.type in ("identifier", "shorthand_property_identifier", "undefined"):
                if node.type == "identifier" and is_binding(node):
                    continue
                self._check_builtin(node)
            elif node.type == "member_expression":
                self._check_member(node)

    def _check_builtin(self, node: Node):
        name = node_text(node)
        self._check(
            f"javascript.builtins.{name}",
            self.location(node),
            IssueKind.JS_BUILTIN,
            name,
        )

    def _check_member(self, node: Node):
        obj = node.child_by_field_name("object")
        prop = node.child_by_field_name("property")
        if obj is None or prop is None:
            return
        if obj.type != "identifier" or prop.type != "property_identifier":
            return
        obj_name, prop_name = node_text(obj), node_text(prop)
        self._check(
            f"api.{obj_name}.{prop_name}",
            self.location(node),
            IssueKind.JS_API,
            obj_name,
            value=prop_name,
        )
