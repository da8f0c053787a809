"""
Report aggregation, severity scoring and text reports.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .issue import BaselineIssue, BaselineReport, ReportSummary

CRITICAL = "critical"
MODERATE = "moderate"
TRACKED_BROWSERS = ("chrome", "firefox", "safari")


def issue_identity(issue: BaselineIssue) -> Tuple[str, str, Optional[int], Optional[int]]:
    """(kind, compat_key, line, column): issues with equal identity are the same finding."""
    loc = issue.location
    return (
        issue.kind.value,
        issue.compat_key,
        loc.line if loc else None,
        loc.column if loc else None,
    )


def merge_reports(
    input_language: str,
    min_level: str,
    reports: Iterable[BaselineReport],
    dedupe: bool = False,
) -> BaselineReport:
    """Concatenate issues in report order and sum the checked counts.

    With dedupe, later issues whose (kind, key, location) already appeared are dropped.
    """
    issues: List[BaselineIssue] = []
    seen: Set[Tuple] = set()
    total_checked = 0
    for report in reports:
        total_checked += report.summary.total_checked
        for issue in report.issues:
            if dedupe:
                ident = issue_identity(issue)
                if ident in seen:
                    continue
                seen.add(ident)
            issues.append(issue)
    return BaselineReport(
        input_language=input_language,
        min_level=min_level,
        issues=issues,
        summary=ReportSummary(total_checked=total_checked, below_min_level=len(issues)),
    )


@dataclass(frozen=True)
class ScoredIssue:
    """An issue with its display severity."""
    issue: BaselineIssue
    severity: str
    score: int


def score_issue(issue: BaselineIssue) -> ScoredIssue:
    # Only False or "low" reach a report.
    if issue.detected_baseline is False:
        return ScoredIssue(issue, CRITICAL, 2)
    return ScoredIssue(issue, MODERATE, 1)


def sort_issues(issues: Iterable[BaselineIssue]) -> List[ScoredIssue]:
    """Critical first, then by line and column."""
    scored = [score_issue(i) for i in issues]

    def order(s: ScoredIssue):
        loc = s.issue.location
        return (-s.score, loc.line if loc else 0, loc.column if loc else 0)

    return sorted(scored, key=order)


def severity_counts(scored: Sequence[ScoredIssue]) -> Dict[str, int]:
    counts = {CRITICAL: 0, MODERATE: 0}
    for s in scored:
        counts[s.severity] += 1
    return counts


def overall_score(scored: Sequence[ScoredIssue]) -> int:
    """100 - (3 per critical + 2 per moderate), floored at 0."""
    counts = severity_counts(scored)
    return max(0, 100 - (counts[CRITICAL] * 3 + counts[MODERATE] * 2))


def problematic_browsers(issues: Iterable[BaselineIssue]) -> List[str]:
    """Tracked browsers missing from the support map of at least one issue."""
    browsers: List[str] = []
    for issue in issues:
        support = issue.support or {}
        for name in TRACKED_BROWSERS:
            if name in browsers:
                continue
            missing = support.get(name) is None
            if name == "safari":
                missing = missing and support.get("safari_ios") is None
            if missing:
                browsers.append(name)
    return browsers


def infringements(issues: Iterable[BaselineIssue], limit: int = 4) -> List[str]:
    """One bullet per distinct compat key (property, value and key), up to limit."""
    bullets: List[str] = []
    keys: Set[str] = set()
    for issue in issues:
        if issue.compat_key in keys:
            continue
        keys.add(issue.compat_key)
        label = f"{issue.property}: {issue.value}" if issue.value else issue.property
        bullets.append(f"{label} — {issue.compat_key}")
        if len(bullets) >= limit:
            break
    return bullets


class ReportGenerator:
    """Generate reports from baseline reports."""

    @staticmethod
    def generate_text_report(report: BaselineReport, source: str = "input") -> str:
        """Generate a text report."""
        if not report.issues:
            return (
                f"\n✓ No features below Baseline {report.min_level} found in {source} "
                f"({report.summary.total_checked} checked)\n"
            )

        lines = [f"\n{'=' * 80}"]
        lines.append(f"Baseline Compatibility Report: {source}")
        lines.append(f"Language: {report.input_language} · Minimum level: {report.min_level}")
        lines.append(f"{'=' * 80}\n")

        scored = sort_issues(report.issues)
        for severity, title in ((CRITICAL, "NOT BASELINE"), (MODERATE, "BELOW MINIMUM")):
            group = [s for s in scored if s.severity == severity]
            if not group:
                continue
            lines.append(f"{title} ({len(group)}):")
            lines.append("-" * 80)
            for s in group:
                i = s.issue
                where = f"Line {i.location.line}:{i.location.column}" if i.location else "Document"
                label = f"{i.property}: {i.value}" if i.value else i.property
                lines.append(f"  {where}: {label} [{i.kind.value}]")
                lines.append(f"    Key: {i.compat_key}")
                lines.append(f"    Feature: {i.feature_id or 'unknown'}")
                lines.append(f"    Baseline: {i.detected_baseline}\n")

        counts = severity_counts(scored)
        lines.append(
            f"\nSummary: {report.summary.below_min_level} of {report.summary.total_checked} checked usages "
            f"below minimum ({counts[CRITICAL]} critical, {counts[MODERATE]} moderate), "
            f"score {overall_score(scored)}"
        )
        by_kind = ReportGenerator.generate_summary(report.issues)
        lines.append("By kind: " + ", ".join(f"{kind} {count}" for kind, count in sorted(by_kind.items())))
        lines.append("=" * 80)
        return "\n".join(lines)

    @staticmethod
    def generate_summary(issues: Iterable[BaselineIssue]) -> Dict[str, int]:
        """Generate a summary count by issue kind."""
        summary: Dict[str, int] = {}
        for issue in issues:
            summary[issue.kind.value] = summary.get(issue.kind.value, 0) + 1
        return summary
