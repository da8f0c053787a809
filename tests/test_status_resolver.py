"""
Tests for status lookup and the shared classification step.
"""
import pytest

from baseline_checker.compat_index import load_feature_dataset
from baseline_checker.issue import IssueKind, Location, meets_minimum
from baseline_checker.status_resolver import (
    BaselineClassifier,
    DatasetStatusResolver,
    StatusNotFound,
    dedupe_key,
)


@pytest.mark.parametrize("baseline,min_level,expected", [
    ("high", "high", True),
    ("low", "high", False),
    (False, "high", False),
    ("high", "low", True),
    ("low", "low", True),
    (False, "low", False),
])
def test_meets_minimum(baseline, min_level, expected):
    assert meets_minimum(baseline, min_level) is expected


def test_invalid_min_level(dataset):
    with pytest.raises(ValueError):
        BaselineClassifier(dataset, min_level="medium")


def test_dataset_resolver_prefers_per_key_status():
    resolver = DatasetStatusResolver(load_feature_dataset())
    assert resolver("text-wrap", "css.properties.text-wrap")["baseline"] == "low"
    assert resolver("text-wrap", "css.properties.text-wrap.pretty")["baseline"] is False


def test_dataset_resolver_unknown_feature():
    resolver = DatasetStatusResolver(load_feature_dataset())
    with pytest.raises(StatusNotFound):
        resolver("", "css.properties.unmapped")
    with pytest.raises(StatusNotFound):
        resolver("no-such-feature", "css.properties.color")


def test_classify_below_minimum(classifier):
    issue = classifier.classify(
        "css.properties.gap", Location(1, 5), IssueKind.PROPERTY, "gap", set(),
    )
    assert issue is not None
    assert issue.feature_id == "grid"
    assert issue.detected_baseline == "low"
    assert issue.location == Location(1, 5)
    assert issue.support == {"chrome": "120", "firefox": "121", "safari": "17"}


def test_classify_meets_minimum(classifier):
    assert classifier.classify("css.properties.color", Location(1, 1), IssueKind.PROPERTY, "color", set()) is None
    low = classifier.with_min_level("low")
    assert low.classify("css.properties.gap", Location(1, 1), IssueKind.PROPERTY, "gap", set()) is None


def test_classify_dedupes_same_key_and_location(classifier):
    seen = set()
    first = classifier.classify("css.properties.gap", Location(2, 3), IssueKind.PROPERTY, "gap", seen)
    again = classifier.classify("css.properties.gap", Location(2, 3), IssueKind.PROPERTY, "gap", seen)
    elsewhere = classifier.classify("css.properties.gap", Location(4, 3), IssueKind.PROPERTY, "gap", seen)
    assert first is not None
    assert again is None
    assert elsewhere is not None
    assert dedupe_key("css.properties.gap", Location(2, 3)) in seen


def test_unmapped_key_queries_empty_feature_id(dataset):
    calls = []

    def resolver(feature_id, compat_key):
        calls.append((feature_id, compat_key))
        return {"baseline": "low"}

    issue = BaselineClassifier(dataset, resolver).classify(
        "css.properties.unmapped", None, IssueKind.PROPERTY, "unmapped", set(),
    )
    assert calls == [("", "css.properties.unmapped")]
    assert issue.feature_id is None


def test_resolver_failure_means_unsupported(dataset):
    def resolver(feature_id, compat_key):
        raise RuntimeError("offline")

    issue = BaselineClassifier(dataset, resolver).classify(
        "css.properties.color", None, IssueKind.PROPERTY, "color", set(),
    )
    assert issue is not None
    assert issue.detected_baseline is False
    assert issue.support is None


def test_missing_baseline_field_is_unsupported(dataset):
    issue = BaselineClassifier(dataset, lambda f, k: {"support": {}}).classify(
        "css.properties.color", None, IssueKind.PROPERTY, "color", set(),
    )
    assert issue.detected_baseline is False
