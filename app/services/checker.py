"""Checker service: wraps baseline_checker and maps to API models."""

from deps import Optional, logging, lru_cache

from baseline_checker import BaselineChecker, detect_language, load_feature_dataset
from baseline_checker.accessibility import analyze_accessibility
from baseline_checker.issue import BaselineReport
from baseline_checker.language_detect import language_for_filename
from baseline_checker.reporter import (
    CRITICAL,
    MODERATE,
    infringements,
    overall_score,
    problematic_browsers,
    severity_counts,
    sort_issues,
)

from ..config import get_features_data_path, get_min_level
from ..schemas import (
    AccessibilityOut,
    CheckRequest,
    CheckResponse,
    ReportOut,
    ScoredIssueOut,
    SeverityOut,
)

logger = logging.getLogger("baseline_api")


@lru_cache(maxsize=1)
def get_checker() -> BaselineChecker:
    """Process-wide checker over the configured dataset (bundled sample when unset or missing)."""
    data_path = get_features_data_path()
    if data_path is not None and not data_path.exists():
        data_path = None
    dataset = load_feature_dataset(data_path)
    return BaselineChecker(dataset=dataset, min_level=get_min_level(), logger=logger)


def severity_view(report: BaselineReport) -> SeverityOut:
    scored = sort_issues(report.issues)
    counts = severity_counts(scored)
    return SeverityOut(
        overall_score=overall_score(scored),
        critical=counts[CRITICAL],
        moderate=counts[MODERATE],
        problematic_browsers=problematic_browsers(report.issues),
        infringements=infringements(report.issues),
        issues=[
            ScoredIssueOut(
                compatibilityKey=s.issue.compat_key,
                severity=s.severity,
                score=s.score,
                line=s.issue.location.line if s.issue.location else None,
                column=s.issue.location.column if s.issue.location else None,
            )
            for s in scored
        ],
    )


class CheckerService:
    """Wraps BaselineChecker for use by the API."""

    def __init__(self, checker: Optional[BaselineChecker] = None):
        self._checker = checker

    @property
    def checker(self) -> BaselineChecker:
        if self._checker is None:
            self._checker = get_checker()
        return self._checker

    def resolve_language(self, code: str, language: Optional[str] = None, filename: Optional[str] = None) -> str:
        """Explicit language, else the filename extension, else content detection."""
        if language:
            return language.strip().lower()
        if filename:
            by_name = language_for_filename(filename)
            if by_name:
                return by_name
        return detect_language(code)

    def analyze(self, req: CheckRequest) -> BaselineReport:
        language = self.resolve_language(req.code, req.language, req.filename)
        report = self.checker.analyze(req.code, language, req.min_level)
        logger.info(
            "[Check] language=%s min_level=%s checked=%d below=%d",
            language, report.min_level, report.summary.total_checked, report.summary.below_min_level,
        )
        return report

    def check(self, req: CheckRequest) -> CheckResponse:
        """Baseline report, severity view and accessibility heuristics for one snippet."""
        report = self.analyze(req)
        return CheckResponse(
            language=report.input_language,
            report=ReportOut.model_validate(report.to_dict()),
            severity=severity_view(report),
            accessibility=AccessibilityOut.model_validate(analyze_accessibility(req.code)),
        )

    def detect(self, code: str) -> str:
        return detect_language(code)
