"""
Issue and report data models for the baseline compatibility checker.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

# False (not broadly supported), "low" (newly available) or "high" (widely available).
BaselineLevel = Union[bool, str]

MIN_LEVELS = ("low", "high")
DEFAULT_MIN_LEVEL = "high"


class IssueKind(Enum):
    """Which kind of syntax usage produced an issue."""
    PROPERTY = "property"
    PROPERTY_VALUE = "property-value"
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    JS_BUILTIN = "js-builtin"
    JS_API = "js-api"


def validate_min_level(min_level: str) -> str:
    """Return min_level unchanged, or raise ValueError if it is not 'low' or 'high'."""
    if min_level not in MIN_LEVELS:
        raise ValueError(f"min_level must be one of {MIN_LEVELS}, got {min_level!r}")
    return min_level


def meets_minimum(baseline: BaselineLevel, min_level: str) -> bool:
    """'high' accepts only 'high'; 'low' accepts 'low' or 'high'."""
    if min_level == "high":
        return baseline == "high"
    return baseline in ("low", "high")


@dataclass(frozen=True)
class Location:
    """1-based line and column of a usage."""
    line: int
    column: int


@dataclass(frozen=True)
class BaselineIssue:
    """A usage whose detected baseline does not meet the minimum level."""
    kind: IssueKind
    property: str
    compat_key: str
    feature_id: Optional[str]
    detected_baseline: BaselineLevel
    value: Optional[str] = None
    baseline_low_date: Optional[str] = None
    baseline_high_date: Optional[str] = None
    location: Optional[Location] = None
    support: Optional[Mapping[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "kind": self.kind.value,
            "property": self.property,
            "compatibilityKey": self.compat_key,
            "featureId": self.feature_id,
            "detectedBaseline": self.detected_baseline,
        }
        if self.value is not None:
            out["value"] = self.value
        if self.baseline_low_date is not None:
            out["baselineLowDate"] = self.baseline_low_date
        if self.baseline_high_date is not None:
            out["baselineHighDate"] = self.baseline_high_date
        if self.location is not None:
            out["location"] = {"line": self.location.line, "column": self.location.column}
        if self.support is not None:
            out["support"] = dict(self.support)
        return out


@dataclass
class ReportSummary:
    total_checked: int = 0
    below_min_level: int = 0


@dataclass
class BaselineReport:
    """Result of one analysis call."""
    input_language: str
    min_level: str
    issues: List[BaselineIssue] = field(default_factory=list)
    summary: ReportSummary = field(default_factory=ReportSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputLanguage": self.input_language,
            "minLevel": self.min_level,
            "issues": [i.to_dict() for i in self.issues],
            "summary": {
                "totalChecked": self.summary.total_checked,
                "belowMinLevel": self.summary.below_min_level,
            },
        }


def empty_report(input_language: str, min_level: str) -> BaselineReport:
    """Report with no issues and nothing checked (parse failures, unknown languages)."""
    return BaselineReport(input_language=input_language, min_level=min_level)
