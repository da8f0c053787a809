"""
HTML documents with embedded ``<style>`` and ``<script>`` blocks.
"""

from typing import List

from tree_sitter import Node, Tree

from ..issue import BaselineReport
from ..reporter import merge_reports
from .css_extractor import CSSExtractor
from .html_extractor import HTMLExtractor, iter_elements, tag_attributes
from .javascript_extractor import JavaScriptExtractor

# <script type="..."> values that hold JavaScript; anything else (JSON, templates) is skipped.
JS_SCRIPT_TYPES = (
    "",
    "module",
    "text/javascript",
    "application/javascript",
    "text/ecmascript",
    "application/ecmascript",
)


def script_type(element: Node) -> str:
    for name, value in tag_attributes(element):
        if name == "type":
            return value.strip().lower()
    return ""


def raw_text(element: Node):
    """The raw_text child of a script/style element, if any."""
    return next((c for c in element.children if c.type == "raw_text"), None)


class MixedExtractor(HTMLExtractor):
    """HTML elements/attributes, plus <style> text through CSS and <script> text through JS.

    Embedded locations are document positions: lines move by the block's
    starting row, and the block's first line also by its starting column.
    """

    language_tag = "mixed"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.html = HTMLExtractor(self.classifier, logger=self.logger)
        self.css = CSSExtractor(self.classifier, logger=self.logger)
        self.js = JavaScriptExtractor(self.classifier, logger=self.logger)

    def analyze_tree(self, tree: Tree, text: str, line_offset: int = 0, column_offset: int = 0) -> BaselineReport:
        reports: List[BaselineReport] = [self.html.analyze_tree(tree, text, line_offset=line_offset)]
        css_reports: List[BaselineReport] = []
        js_reports: List[BaselineReport] = []

        for element in iter_elements(tree.root_node):
            body = raw_text(element)
            if body is None:
                continue
            code = body.text.decode("utf-8", errors="replace") if body.text else ""
            if not code.strip():
                continue
            offset = line_offset + body.start_point[0]
            column = body.start_point[1]
            if element.type == "style_element":
                css_reports.append(self.css.analyze(code, line_offset=offset, column_offset=column))
            elif element.type == "script_element":
                kind = script_type(element)
                if kind not in JS_SCRIPT_TYPES:
                    self.logger.debug("[Baseline] skipping <script type=%r>", kind)
                    continue
                js_reports.append(self.js.analyze(code, line_offset=offset, column_offset=column))

        return merge_reports(self.language_tag, self.min_level, reports + css_reports + js_reports)
