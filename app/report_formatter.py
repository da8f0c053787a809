"""Format check results as human-readable Markdown."""

from deps import List, datetime

from .schemas import CheckResponse, IssueOut

_KIND_TITLES = {
    "property": "Property",
    "property-value": "Property value",
    "element": "Element",
    "attribute": "Attribute",
    "js-builtin": "JS builtin",
    "js-api": "JS API",
}


def _baseline_label(value) -> str:
    if value is False:
        return "Not Baseline"
    return f"Baseline {value}"


def _issue_block_md(i: IssueOut, severity: str) -> List[str]:
    """One issue: Line N:C · Kind · Severity, then key, feature and dates."""
    where = f"Line {i.location.line}:{i.location.column}" if i.location else "Document"
    label = f"{i.property}: {i.value}" if i.value else i.property
    lines = [f"**{where} · {_KIND_TITLES.get(i.kind, i.kind)} · {severity.title()}**", ""]
    lines.append(f"`{label}` ({_baseline_label(i.detected_baseline)})")
    lines.append("")
    lines.append(f"- **Key:** `{i.compat_key}`")
    lines.append(f"- **Feature:** {i.feature_id or 'unknown'}")
    if i.baseline_low_date:
        lines.append(f"- **Newly available since:** {i.baseline_low_date}")
    if i.baseline_high_date:
        lines.append(f"- **Widely available since:** {i.baseline_high_date}")
    if i.support:
        support = ", ".join(f"{browser} {version}" for browser, version in sorted(i.support.items()))
        lines.append(f"- **Support:** {support}")
    lines.append("")
    return lines


def format_markdown_report(source: str, result: CheckResponse) -> str:
    """Format one check result as Markdown, critical issues first."""
    report = result.report
    severity = result.severity
    lines = [f"# Baseline report: {source}", ""]
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")
    lines.append(f"Language: {result.language} · Minimum level: {report.min_level}")
    lines.append("")
    lines.append(
        f"**{report.summary.below_min_level}** of {report.summary.total_checked} checked usage(s) below "
        f"the minimum ({severity.critical} critical, {severity.moderate} moderate). "
        f"Score: **{severity.overall_score}**/100."
    )
    lines.append("")

    if severity.problematic_browsers:
        lines.append(f"Problematic browsers: {', '.join(severity.problematic_browsers)}")
        lines.append("")

    lines.append("## Issues")
    lines.append("")
    if not report.issues:
        lines.append("No features below the minimum Baseline level found.")
        lines.append("")
    else:
        by_position = {}
        for i in report.issues:
            key = (i.compat_key, i.location.line if i.location else None, i.location.column if i.location else None)
            by_position.setdefault(key, i)
        for s in severity.issues:
            issue = by_position.get((s.compat_key, s.line, s.column))
            if issue is not None:
                lines.extend(_issue_block_md(issue, s.severity))

    if severity.infringements:
        lines.append("## Top infringements")
        lines.append("")
        lines.extend(f"- {bullet}" for bullet in severity.infringements)
        lines.append("")

    access = result.accessibility
    lines.append("## Accessibility")
    lines.append("")
    lines.append(f"Score: **{access.score}**/100")
    lines.append("")
    for a in access.issues:
        lines.append(f"- **{a.severity.title()}** ({a.type}): {a.message}")
    if access.issues:
        lines.append("")

    return "\n".join(lines)
