"""
Base extractor class for baseline compatibility checks.
"""

import logging
from typing import List, Optional, Set

from tree_sitter import Language, Node, Tree

from .issue import BaselineIssue, BaselineReport, IssueKind, Location, ReportSummary, empty_report
from .status_resolver import BaselineClassifier
from .utils import SourceParseError, node_location, parse_source


class BaseExtractor:
    """Base class for all extractors.

    Each ``analyze`` call resets the issue list, the counter and the
    de-duplication set, so one instance can be reused for many calls.
    """

    #: Report language tag.
    language_tag = "unknown"
    #: tree-sitter grammar used by parse().
    grammar: Optional[Language] = None
    #: Accept trees with recoverable errors.
    tolerate_errors = False

    def __init__(self, classifier: BaselineClassifier, logger: Optional[logging.Logger] = None):
        self.classifier = classifier
        self.logger = logger or logging.getLogger(__name__)
        self.issues: List[BaselineIssue] = []
        self.total_checked = 0
        self.seen: Set[str] = set()
        self.line_offset = 0
        self.column_offset = 0

    @property
    def min_level(self) -> str:
        return self.classifier.min_level

    def analyze(self, text: str, line_offset: int = 0, column_offset: int = 0) -> BaselineReport:
        """Parse and walk text. Parse failures give an empty report.

        line_offset and column_offset place an embedded snippet in its document;
        column_offset applies to the snippet's first line only.
        """
        try:
            tree = self.parse(text)
        except SourceParseError as e:
            self.logger.debug("[Baseline] %s parse failed: %s", self.language_tag, e)
            return empty_report(self.language_tag, self.min_level)
        return self.analyze_tree(tree, text, line_offset=line_offset, column_offset=column_offset)

    def analyze_tree(self, tree: Tree, text: str, line_offset: int = 0, column_offset: int = 0) -> BaselineReport:
        """Walk an already parsed tree (lets one parse feed several extractors)."""
        self._reset(line_offset, column_offset)
        self._walk(tree, text)
        return self._report()

    def parse(self, text: str) -> Tree:
        return parse_source(text, self.grammar, tolerate_errors=self.tolerate_errors)

    def _reset(self, line_offset: int = 0, column_offset: int = 0):
        self.issues = []
        self.total_checked = 0
        self.seen = set()
        self.line_offset = line_offset
        self.column_offset = column_offset

    def location(self, node: Node) -> Location:
        loc = node_location(node, self.line_offset)
        if self.column_offset and node.start_point[0] == 0:
            loc = Location(loc.line, loc.column + self.column_offset)
        return loc

    def _walk(self, tree: Tree, text: str):
        """Override in subclasses to walk the syntax tree."""
        pass

    def _check(
        self,
        compat_key: str,
        location: Optional[Location],
        kind: IssueKind,
        prop: str,
        value: Optional[str] = None,
    ):
        """Count one usage and record an issue if it is below the minimum level."""
        self.total_checked += 1
        issue = self.classifier.classify(compat_key, location, kind, prop, self.seen, value=value)
        if issue is not None:
            self.issues.append(issue)

    def _report(self) -> BaselineReport:
        return BaselineReport(
            input_language=self.language_tag,
            min_level=self.min_level,
            issues=list(self.issues),
            summary=ReportSummary(
                total_checked=self.total_checked,
                below_min_level=len(self.issues),
            ),
        )
