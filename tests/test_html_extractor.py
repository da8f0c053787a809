"""
Tests for the HTML extractor.
"""
from baseline_checker.issue import IssueKind

from conftest import keys


def test_img_with_src(checker):
    report = checker.analyze("<img src='x.png'>", "html")
    assert report.issues == []
    assert report.summary.total_checked == 2
    assert report.input_language == "html"


def test_attribute_below_minimum(checker):
    report = checker.analyze('<div popover id="menu">Menu</div>', "html")
    assert keys(report) == ["html.global_attributes.popover"]
    issue = report.issues[0]
    assert issue.kind is IssueKind.ATTRIBUTE
    assert issue.property == "popover"
    assert issue.location is None
    # div, popover, id
    assert report.summary.total_checked == 3


def test_tag_names_are_lowercased(checker):
    report = checker.analyze("<IMG SRC='x.png'>", "html")
    assert report.issues == []
    assert report.summary.total_checked == 2


def test_nested_elements_counted(checker):
    report = checker.analyze("<div><p>one</p><p>two</p></div>", "html")
    assert report.summary.total_checked == 3


def test_repeated_attribute_reported_once(checker):
    report = checker.analyze("<div popover></div><span popover></span>", "html")
    assert keys(report) == ["html.global_attributes.popover"]
    assert report.summary.total_checked == 4
