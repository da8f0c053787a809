"""Pydantic request/response models."""

from deps import Any, BaseModel, Dict, Field, List, Literal, Optional, Union, to_camel

MinLevel = Literal["low", "high"]

# JSON keys are camelCase; Python attributes stay snake_case.
_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


# --- Requests ---


class CheckRequest(BaseModel):
    """Request body for POST /check and POST /check/report."""

    code: str = Field(..., description="Source text to analyze")
    language: Optional[str] = Field(
        default=None,
        description="css, html, javascript or typescript. Detected from filename or content when omitted.",
    )
    filename: Optional[str] = Field(default=None, description="Virtual filename; its extension can pick the language")
    min_level: Optional[MinLevel] = Field(default=None, description="low or high; server default when omitted")

    model_config = _CAMEL


class DetectRequest(BaseModel):
    """Request body for POST /detect."""

    code: str = Field(..., description="Snippet to classify")


# --- Report ---


class LocationOut(BaseModel):
    line: int
    column: int


class IssueOut(BaseModel):
    """One feature usage below the requested Baseline level."""

    kind: str
    property: str
    value: Optional[str] = None
    compat_key: str = Field(..., alias="compatibilityKey")
    feature_id: Optional[str] = None
    detected_baseline: Union[bool, str] = Field(..., description="false, 'low' or 'high'")
    baseline_low_date: Optional[str] = None
    baseline_high_date: Optional[str] = None
    location: Optional[LocationOut] = None
    support: Optional[Dict[str, Any]] = None

    model_config = _CAMEL


class SummaryOut(BaseModel):
    total_checked: int = 0
    below_min_level: int = 0

    model_config = _CAMEL


class ReportOut(BaseModel):
    input_language: str
    min_level: MinLevel
    issues: List[IssueOut] = Field(default_factory=list)
    summary: SummaryOut = Field(default_factory=SummaryOut)

    model_config = _CAMEL


# --- Severity / accessibility ---


class ScoredIssueOut(BaseModel):
    compat_key: str = Field(..., alias="compatibilityKey")
    severity: str = Field(..., description="critical or moderate")
    score: int
    line: Optional[int] = None
    column: Optional[int] = None

    model_config = _CAMEL


class SeverityOut(BaseModel):
    """Severity view of a report: scored issues plus the headline numbers."""

    overall_score: int = Field(..., description="0-100, higher is better")
    critical: int = 0
    moderate: int = 0
    problematic_browsers: List[str] = Field(default_factory=list)
    infringements: List[str] = Field(default_factory=list)
    issues: List[ScoredIssueOut] = Field(default_factory=list, description="Critical first, then by position")

    model_config = _CAMEL


class AccessibilityIssueOut(BaseModel):
    type: str
    message: str
    severity: str


class AccessibilityOut(BaseModel):
    issues: List[AccessibilityIssueOut] = Field(default_factory=list)
    score: int = 100


# --- Responses ---


class CheckResponse(BaseModel):
    """Response for POST /check."""

    language: str = Field(..., description="Language the code was analyzed as")
    report: ReportOut
    severity: SeverityOut
    accessibility: AccessibilityOut

    model_config = _CAMEL


class DetectResponse(BaseModel):
    """Response for POST /detect."""

    language: str
