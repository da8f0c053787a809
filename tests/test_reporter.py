"""
Tests for report merging, severity scoring and the text report.
"""
from baseline_checker.issue import BaselineIssue, BaselineReport, IssueKind, Location, ReportSummary
from baseline_checker.reporter import (
    CRITICAL,
    MODERATE,
    ReportGenerator,
    infringements,
    merge_reports,
    overall_score,
    problematic_browsers,
    sort_issues,
)


def make_issue(key, baseline="low", line=1, column=1, value=None, support=None, kind=IssueKind.PROPERTY):
    prop = key.split(".")[2] if key.count(".") >= 2 else key
    return BaselineIssue(
        kind=kind,
        property=prop,
        compat_key=key,
        feature_id="feature",
        detected_baseline=baseline,
        value=value,
        location=Location(line, column) if line else None,
        support=support,
    )


def make_report(issues, checked=None):
    return BaselineReport(
        input_language="css",
        min_level="high",
        issues=issues,
        summary=ReportSummary(total_checked=checked or len(issues), below_min_level=len(issues)),
    )


def test_sort_critical_first_then_position():
    issues = [
        make_issue("css.properties.a", "low", line=1),
        make_issue("css.properties.b", False, line=5),
        make_issue("css.properties.c", False, line=2, column=7),
        make_issue("css.properties.d", False, line=2, column=3),
    ]
    scored = sort_issues(issues)
    assert [s.issue.compat_key for s in scored] == [
        "css.properties.d", "css.properties.c", "css.properties.b", "css.properties.a",
    ]
    assert [s.severity for s in scored] == [CRITICAL, CRITICAL, CRITICAL, MODERATE]
    assert [s.score for s in scored] == [2, 2, 2, 1]


def test_overall_score():
    issues = [make_issue("css.properties.a", False), make_issue("css.properties.b", "low")]
    assert overall_score(sort_issues(issues)) == 95
    assert overall_score([]) == 100
    many = [make_issue(f"css.properties.p{n}", False, line=n) for n in range(1, 40)]
    assert overall_score(sort_issues(many)) == 0


def test_problematic_browsers():
    issues = [
        make_issue("css.properties.a", support={"chrome": "1", "firefox": "1", "safari_ios": "2"}),
        make_issue("css.properties.b", support={"chrome": "1", "safari": "3"}),
    ]
    assert problematic_browsers(issues) == ["firefox"]
    assert problematic_browsers([make_issue("css.properties.c")]) == ["chrome", "firefox", "safari"]


def test_infringements_unique_and_limited():
    issues = [
        make_issue("css.properties.text-wrap.pretty", value="pretty"),
        make_issue("css.properties.text-wrap.pretty", value="pretty", line=3),
        make_issue("css.properties.a"),
        make_issue("css.properties.b"),
        make_issue("css.properties.c"),
        make_issue("css.properties.d"),
    ]
    bullets = infringements(issues)
    assert len(bullets) == 4
    assert bullets[0] == "text-wrap: pretty — css.properties.text-wrap.pretty"
    assert bullets[1] == "a — css.properties.a"


def test_merge_reports_sums_and_keeps_order():
    first = make_report([make_issue("css.properties.a")], checked=3)
    second = make_report([make_issue("css.properties.b")], checked=2)
    merged = merge_reports("mixed", "high", [first, second])
    assert [i.compat_key for i in merged.issues] == ["css.properties.a", "css.properties.b"]
    assert merged.summary.total_checked == 5
    assert merged.summary.below_min_level == 2
    assert merged.input_language == "mixed"


def test_merge_reports_dedupe():
    issue = make_issue("css.properties.a", line=4, column=2)
    merged = merge_reports("jsx", "high", [make_report([issue]), make_report([issue])], dedupe=True)
    assert len(merged.issues) == 1
    assert merged.summary.below_min_level == 1
    assert merged.summary.total_checked == 2


def test_text_report():
    report = make_report([
        make_issue("css.properties.gap", "low", line=2),
        make_issue("css.properties.text-wrap.pretty", False, line=3, value="pretty"),
    ])
    text = ReportGenerator.generate_text_report(report, source="styles.css")
    assert "Baseline Compatibility Report: styles.css" in text
    assert text.index("NOT BASELINE") < text.index("BELOW MINIMUM")
    assert "Line 3:1: text-wrap: pretty [property]" in text
    assert "score 95" in text
    assert "By kind: property 2" in text


def test_text_report_empty():
    text = ReportGenerator.generate_text_report(make_report([], checked=4))
    assert "No features below Baseline high" in text
    assert "4 checked" in text


def test_summary_by_kind():
    issues = [
        make_issue("css.properties.a"),
        make_issue("html.elements.b", line=None, kind=IssueKind.ELEMENT),
        make_issue("css.properties.c"),
    ]
    assert ReportGenerator.generate_summary(issues) == {"property": 2, "element": 1}
