"""
Baseline compatibility checker: finds web-platform features in CSS, HTML,
JavaScript and JSX/TSX that are below a chosen Baseline level.
"""

import logging

from .compat_index import DatasetError, FeatureDataset, build_reverse_index, load_feature_dataset
from .issue import BaselineIssue, BaselineReport, IssueKind, Location, meets_minimum
from .language_detect import detect_language
from .main_checker import BaselineChecker, analyze_code_string
from .reporter import ReportGenerator, merge_reports
from .status_resolver import BaselineClassifier, DatasetStatusResolver, StatusNotFound

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaselineChecker",
    "BaselineClassifier",
    "BaselineIssue",
    "BaselineReport",
    "DatasetError",
    "DatasetStatusResolver",
    "FeatureDataset",
    "IssueKind",
    "Location",
    "ReportGenerator",
    "StatusNotFound",
    "analyze_code_string",
    "build_reverse_index",
    "detect_language",
    "load_feature_dataset",
    "meets_minimum",
    "merge_reports",
]
