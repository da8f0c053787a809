"""
Tests for the issue and report data models.
"""
from baseline_checker.issue import BaselineIssue, BaselineReport, IssueKind, Location, empty_report


def test_issue_to_dict_omits_absent_fields():
    issue = BaselineIssue(
        kind=IssueKind.ELEMENT,
        property="dialog",
        compat_key="html.elements.dialog",
        feature_id=None,
        detected_baseline=False,
    )
    assert issue.to_dict() == {
        "kind": "element",
        "property": "dialog",
        "compatibilityKey": "html.elements.dialog",
        "featureId": None,
        "detectedBaseline": False,
    }


def test_issue_to_dict_full():
    issue = BaselineIssue(
        kind=IssueKind.PROPERTY_VALUE,
        property="display",
        value="grid",
        compat_key="css.properties.display.grid",
        feature_id="grid",
        detected_baseline="low",
        baseline_low_date="2017-10-17",
        location=Location(3, 5),
        support={"chrome": "57"},
    )
    out = issue.to_dict()
    assert out["value"] == "grid"
    assert out["baselineLowDate"] == "2017-10-17"
    assert "baselineHighDate" not in out
    assert out["location"] == {"line": 3, "column": 5}
    assert out["support"] == {"chrome": "57"}


def test_empty_report_to_dict():
    assert empty_report("css", "low").to_dict() == {
        "inputLanguage": "css",
        "minLevel": "low",
        "issues": [],
        "summary": {"totalChecked": 0, "belowMinLevel": 0},
    }
    assert isinstance(empty_report("css", "low"), BaselineReport)
