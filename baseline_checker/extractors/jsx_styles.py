"""
CSS collection from JSX/TSX sources.

Finds the CSS a component produces (styled-components/emotion tagged
templates, ``style={{...}}`` objects, ``<style>`` elements and ``css={...}``
props) and turns each into plain CSS text for the CSS extractor.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from tree_sitter import Node

from ..utils import camel_to_kebab, iter_nodes, node_text

# Stands in for ${...} interpolations inside flattened templates.
PLACEHOLDER = "/* ${} */"
MAX_RESOLVE_DEPTH = 8

_TRANSPARENT_EXPRESSIONS = (
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
)
_JSX_ELEMENT_TAGS = ("jsx_opening_element", "jsx_self_closing_element")
# Literals whose text starts one column after the node (past the quote or backtick).
_QUOTED_LITERALS = ("string", "template_string")

# `color: ${p => p.color};` once flattened: a declaration with nothing but placeholders.
_INTERPOLATED_DECLARATION = re.compile(
    r"-{0,2}[A-Za-z_][\w-]*[ \t]*:[ \t]*(?:" + re.escape(PLACEHOLDER) + r"[ \t]*)+(?:;|(?=[}\n])|$)"
)


@dataclass(frozen=True)
class StyleSnippet:
    """CSS text found in a JSX file.

    line_offset is the 0-based row of the snippet's first line in the file and
    column_offset the 0-based column that line starts at.
    declarations_only marks a bare ``prop: value;`` list rather than a stylesheet.
    """
    text: str
    line_offset: int
    declarations_only: bool
    origin: str
    column_offset: int = 0


def _comment(text: str) -> str:
    return "/* " + text.replace("*/", "* /") + " */"


def string_content(node: Node) -> str:
    """Text of a string literal without its quotes."""
    text = node_text(node)
    return text[1:-1] if len(text) >= 2 else ""


def blank_interpolated_declarations(css: str) -> str:
    """Replace declarations whose whole value is interpolated with spaces.

    The value is unknown, and an empty value would be a syntax error that
    hides the declarations around it. Blanking keeps every column in place.
    """
    if PLACEHOLDER not in css:
        return css
    return _INTERPOLATED_DECLARATION.sub(lambda m: " " * len(m.group(0)), css)


def flatten_template(node: Node) -> str:
    """Template literal text with each ${...} replaced by PLACEHOLDER."""
    raw = node.text or b""
    start = node.start_byte
    parts: List[str] = []
    pos = 1
    for child in node.children:
        if child.type == "template_substitution":
            parts.append(raw[pos:child.start_byte - start].decode("utf-8", errors="replace"))
            parts.append(PLACEHOLDER)
            pos = child.end_byte - start
    parts.append(raw[pos:max(pos, len(raw) - 1)].decode("utf-8", errors="replace"))
    return "".join(parts)


def unwrap(node: Node) -> Node:
    while node.type in _TRANSPARENT_EXPRESSIONS and node.named_children:
        node = node.named_children[0]
    return node


def jsx_attribute_parts(attr: Node):
    """(name, value node or None) of a jsx_attribute."""
    named = attr.named_children
    if not named:
        return "", None
    name = node_text(named[0])
    value = named[1] if len(named) > 1 else None
    return name, value


def jsx_expression_value(value: Optional[Node]) -> Optional[Node]:
    """Expression inside ``{...}``, or the value itself for string attributes."""
    if value is None:
        return None
    if value.type == "jsx_expression":
        inner = [c for c in value.named_children if c.type != "comment"]
        return unwrap(inner[0]) if inner else None
    return value


class ExpressionResolver:
    """Best-effort static evaluation of JS expressions to strings and object literals.

    Identifiers resolve through the file's variable declarations (first one
    wins). Anything that is not a literal shape yields None.
    """

    def __init__(self, root: Node):
        self.declarations: Dict[str, Node] = {}
        for node in iter_nodes(root):
            if node.type != "variable_declarator":
                continue
            name = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if name is None or value is None or name.type != "identifier":
                continue
            self.declarations.setdefault(node_text(name), value)

    def lookup(self, name: str) -> Optional[Node]:
        value = self.declarations.get(name)
        return unwrap(value) if value is not None else None

    def to_string(self, node: Optional[Node], depth: int = 0) -> Optional[str]:
        if node is None or depth > MAX_RESOLVE_DEPTH:
            return None
        node = unwrap(node)
        t = node.type
        if t == "string":
            return string_content(node)
        if t == "template_string":
            return flatten_template(node)
        if t == "number":
            return node_text(node)
        if t == "unary_expression":
            arg = node.child_by_field_name("argument")
            op = node.child_by_field_name("operator")
            if arg is not None and arg.type == "number" and op is not None and node_text(op) == "-":
                return "-" + node_text(arg)
            return None
        if t == "binary_expression":
            op = node.child_by_field_name("operator")
            if op is None or node_text(op) != "+":
                return None
            left = self.to_string(node.child_by_field_name("left"), depth + 1)
            right = self.to_string(node.child_by_field_name("right"), depth + 1)
            if left is None or right is None:
                return None
            return left + right
        if t == "identifier":
            return self.to_string(self.lookup(node_text(node)), depth + 1)
        return None

    def to_object(self, node: Optional[Node]) -> Optional[Node]:
        """Object literal for ``{...}``, ``name`` or ``name.key`` (one lookup each)."""
        if node is None:
            return None
        node = unwrap(node)
        if node.type == "object":
            return node
        if node.type == "identifier":
            target = self.lookup(node_text(node))
            return target if target is not None and target.type == "object" else None
        if node.type == "member_expression":
            obj = node.child_by_field_name("object")
            prop = node.child_by_field_name("property")
            if obj is None or prop is None or obj.type != "identifier":
                return None
            container = self.lookup(node_text(obj))
            if container is None or container.type != "object":
                return None
            value = object_property(container, node_text(prop))
            value = unwrap(value) if value is not None else None
            return value if value is not None and value.type == "object" else None
        return None

    def property_key(self, key: Optional[Node]) -> Optional[str]:
        if key is None:
            return None
        if key.type in ("property_identifier", "number"):
            return node_text(key)
        if key.type == "string":
            return string_content(key)
        if key.type == "computed_property_name":
            inner = key.named_children
            return self.to_string(inner[0]) if inner else None
        return None

    def style_value(self, node: Optional[Node]) -> Optional[str]:
        if node is None:
            return None
        node = unwrap(node)
        if node.type == "array":
            parts = [self.style_value(el) for el in node.named_children if el.type != "comment"]
            if not parts or any(p is None for p in parts):
                return None
            return " ".join(parts)
        return self.to_string(node)

    def serialize_style_object(self, obj: Node) -> str:
        """``{backgroundColor: 'red', gap: 8}`` -> ``background-color: red;\\ngap: 8;``"""
        lines: List[str] = []
        for prop in obj.named_children:
            if prop.type == "comment":
                continue
            if prop.type == "pair":
                key = self.property_key(prop.child_by_field_name("key"))
                if key is None:
                    lines.append(_comment("computed key"))
                    continue
                css_key = camel_to_kebab(key)
                value_node = prop.child_by_field_name("value")
                if value_node is not None and unwrap(value_node).type == "object":
                    lines.append(_comment(f"{key}: nested object"))
                    continue
                value = self.style_value(value_node)
                if value is None:
                    lines.append(_comment(f"{css_key}: unresolved"))
                else:
                    lines.append(f"{css_key}: {value};")
            elif prop.type == "shorthand_property_identifier":
                name = node_text(prop)
                value = self.to_string(self.lookup(name))
                if value is None:
                    lines.append(_comment(f"{camel_to_kebab(name)}: unresolved"))
                else:
                    lines.append(f"{camel_to_kebab(name)}: {value};")
            elif prop.type == "spread_element":
                lines.append(_comment("spread"))
            else:
                lines.append(_comment(prop.type))
        return "\n".join(lines)


def object_property(obj: Node, key: str) -> Optional[Node]:
    """Value node of the pair named key in an object literal."""
    for prop in obj.named_children:
        if prop.type != "pair":
            continue
        k = prop.child_by_field_name("key")
        if k is None:
            continue
        name = string_content(k) if k.type == "string" else node_text(k)
        if name == key:
            return prop.child_by_field_name("value")
    return None


def _is_styled_base(node: Node) -> bool:
    """``styled.div`` or ``styled(Component)``."""
    if node.type == "member_expression":
        obj = node.child_by_field_name("object")
        return obj is not None and obj.type == "identifier" and node_text(obj) == "styled"
    if node.type == "call_expression":
        fn = node.child_by_field_name("function")
        return fn is not None and fn.type == "identifier" and node_text(fn) == "styled"
    return False


def is_styled_tag(tag: Node) -> bool:
    """styled.<tag>, styled(<expr>), styled.<tag>.attrs(...), styled(<expr>).attrs(...) or bare css."""
    if tag.type == "identifier":
        return node_text(tag) == "css"
    if _is_styled_base(tag):
        return True
    if tag.type == "call_expression":
        fn = tag.child_by_field_name("function")
        if fn is not None and fn.type == "member_expression":
            prop = fn.child_by_field_name("property")
            obj = fn.child_by_field_name("object")
            if prop is not None and node_text(prop) == "attrs" and obj is not None:
                return _is_styled_base(obj)
    return False


def _element_name(node: Node) -> str:
    name = node.child_by_field_name("name")
    return node_text(name) if name is not None else ""


def _attributes(tag: Node) -> List[Node]:
    return [c for c in tag.named_children if c.type == "jsx_attribute"]


class StyleCollector:
    """Walk a JSX/TSX tree once and collect every CSS snippet in document order."""

    def __init__(self, root: Node):
        self.root = root
        self.resolver = ExpressionResolver(root)
        self.snippets: List[StyleSnippet] = []

    def collect(self) -> List[StyleSnippet]:
        self.snippets = []
        for node in iter_nodes(self.root):
            if node.type == "call_expression":
                self._tagged_template(node)
            elif node.type in _JSX_ELEMENT_TAGS:
                if _element_name(node) == "style":
                    self._style_element(node)
                for attr in _attributes(node):
                    self._style_attribute(attr)
        return self.snippets

    def _add(self, text: Optional[str], anchor: Node, declarations_only: bool, origin: str):
        if not text or not text.strip():
            return
        row, column = anchor.start_point
        if anchor.type in _QUOTED_LITERALS:
            column += 1
        text = blank_interpolated_declarations(text)
        self.snippets.append(StyleSnippet(text, row, declarations_only, origin, column_offset=column))

    def _tagged_template(self, node: Node):
        fn = node.child_by_field_name("function")
        args = node.child_by_field_name("arguments")
        if fn is None or args is None or args.type != "template_string":
            return
        if is_styled_tag(fn):
            self._add(flatten_template(args), args, True, "styled")

    def _style_attribute(self, attr: Node):
        name, value = jsx_attribute_parts(attr)
        if name not in ("style", "css"):
            return
        expr = jsx_expression_value(value)
        if expr is None:
            return
        if expr.type == "string":
            self._add(string_content(expr), expr, True, name)
            return
        if expr.type == "template_string":
            self._add(flatten_template(expr), expr, True, name)
            return
        if expr.type == "call_expression":
            # css`...` values are picked up as tagged templates.
            return
        obj = self.resolver.to_object(expr)
        if obj is not None:
            self._add(self.resolver.serialize_style_object(obj), attr, True, name)

    def _style_element(self, tag: Node):
        # dangerouslySetInnerHTML={{ __html: ... }}
        for attr in _attributes(tag):
            name, value = jsx_attribute_parts(attr)
            if name != "dangerouslySetInnerHTML":
                continue
            obj = self.resolver.to_object(jsx_expression_value(value))
            html_value = object_property(obj, "__html") if obj is not None else None
            if html_value is not None:
                self._add(self.resolver.to_string(html_value), html_value, False, "style-element")
                return

        element = tag.parent
        if tag.type != "jsx_opening_element" or element is None:
            return
        parts: List[str] = []
        anchor: Optional[Node] = None
        for child in element.named_children:
            if child.type == "jsx_text":
                parts.append(node_text(child))
            elif child.type == "jsx_expression":
                inner = jsx_expression_value(child)
                text = self.resolver.to_string(inner)
                if text is None:
                    continue
                parts.append(text)
            else:
                continue
            if anchor is None:
                anchor = inner if child.type == "jsx_expression" and inner.type in _QUOTED_LITERALS else child
        if anchor is not None:
            self._add("".join(parts), anchor, False, "style-element")


def collect_style_snippets(root: Node) -> List[StyleSnippet]:
    return StyleCollector(root).collect()
