"""
Shared test fixtures: a small feature dataset and a resolver keyed by compat key.
"""
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from baseline_checker import BaselineChecker, BaselineClassifier, FeatureDataset

FEATURES = {
    "css-basics": {
        "kind": "feature",
        "compat_features": ["css.properties.color", "css.properties.display", "css.properties.margin"],
    },
    "grid": {"kind": "feature", "compat_features": ["css.properties.display.grid", "css.properties.gap"]},
    "text-wrap": {
        "kind": "feature",
        "compat_features": ["css.properties.text-wrap", "css.properties.text-wrap.pretty"],
    },
    "html-basics": {"kind": "feature", "compat_features": ["html.elements.img", "html.global_attributes.src"]},
    "popover": {"kind": "feature", "compat_features": ["html.global_attributes.popover"]},
    "localstorage": {
        "kind": "feature",
        "compat_features": ["javascript.builtins.localStorage", "api.localStorage.setItem"],
    },
    "promise-withresolvers": {"kind": "feature", "compat_features": ["api.Promise.withResolvers"]},
    "old-grid": {"kind": "moved", "redirect_target": "grid"},
}

# Keys not listed here resolve as widely available.
STATUSES = {
    "css.properties.color": "high",
    "css.properties.color.red": "high",
    "css.properties.gap": "low",
    "css.properties.text-wrap": "low",
    "css.properties.text-wrap.pretty": False,
    "html.elements.img": "high",
    "html.global_attributes.src": "high",
    "html.global_attributes.popover": "low",
    "javascript.builtins.localStorage": "low",
    "api.localStorage.setItem": "low",
    "api.Promise.withResolvers": "low",
    "javascript.builtins.Popover": False,
}

SUPPORT = {"chrome": "120", "firefox": "121", "safari": "17"}


def mock_resolver(feature_id, compat_key):
    return {"baseline": STATUSES.get(compat_key, "high"), "support": dict(SUPPORT)}


@pytest.fixture
def dataset():
    return FeatureDataset.from_features(FEATURES)


@pytest.fixture
def classifier(dataset):
    return BaselineClassifier(dataset, mock_resolver, "high")


@pytest.fixture
def checker(dataset):
    return BaselineChecker(dataset=dataset, resolver=mock_resolver)


def keys(report):
    """Compat keys of a report's issues, in order."""
    return [i.compat_key for i in report.issues]
