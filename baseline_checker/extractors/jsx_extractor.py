"""
JSX/TSX checks: the JavaScript pass plus every CSS snippet the component produces.
"""

from typing import List

from tree_sitter import Tree

from ..issue import BaselineReport
from ..reporter import merge_reports
from ..utils import TSX_LANGUAGE
from .css_extractor import CSSExtractor
from .javascript_extractor import JavaScriptExtractor
from .jsx_styles import collect_style_snippets


class JSXExtractor(JavaScriptExtractor):
    """JS identifiers/APIs (JSX tag names excluded) merged with CSS from styles.

    The JS pass always runs. Issues from the CSS snippets are merged after it,
    dropping any finding with the same (kind, key, location).
    """

    language_tag = "jsx"
    grammar = TSX_LANGUAGE

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.grammar = TSX_LANGUAGE
        self.css = CSSExtractor(self.classifier, logger=self.logger)

    def analyze_tree(self, tree: Tree, text: str, line_offset: int = 0, column_offset: int = 0) -> BaselineReport:
        self._reset(line_offset, column_offset)
        self.walk_script(tree.root_node)
        reports: List[BaselineReport] = [self._report()]

        for snippet in collect_style_snippets(tree.root_node):
            report = self.css.analyze(
                snippet.text,
                line_offset=line_offset + snippet.line_offset,
                declarations_only=snippet.declarations_only,
                column_offset=snippet.column_offset,
            )
            self.logger.debug(
                "[Baseline] %s snippet at line %d: %d checked, %d issues",
                snippet.origin, snippet.line_offset + 1,
                report.summary.total_checked, report.summary.below_min_level,
            )
            reports.append(report)

        return merge_reports(self.language_tag, self.min_level, reports, dedupe=True)
