"""
Accessibility heuristics for markup, reported next to the Baseline report.

Independent of the compatibility checks: plain regex rules over the text.
"""

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

CRITICAL = "critical"
WARNING = "warning"

_IMG_WITHOUT_ALT = re.compile(r"<img(?![^>]*alt=)[^>]*>", re.IGNORECASE)
_EMPTY_BUTTON = re.compile(r"<button[^>]*>\s*</button>", re.IGNORECASE)
_LINK_WITHOUT_HREF = re.compile(r"<a(?![^>]*href=)[^>]*>.*</a>", re.IGNORECASE)


@dataclass(frozen=True)
class AccessibilityIssue:
    type: str
    message: str
    severity: str


def analyze_accessibility(code: str) -> Dict[str, Any]:
    """Return {"issues": [...], "score": 0-100}."""
    issues: List[AccessibilityIssue] = []

    if _IMG_WITHOUT_ALT.search(code):
        issues.append(AccessibilityIssue("img-alt", "Image elements must have an alt attribute.", CRITICAL))

    if _EMPTY_BUTTON.search(code):
        issues.append(AccessibilityIssue("button-text", "Buttons should have descriptive text.", CRITICAL))

    if _LINK_WITHOUT_HREF.search(code):
        issues.append(AccessibilityIssue("link-href", "Links must have an href attribute.", WARNING))

    # Simplified contrast check
    if "color: #fff" in code and "background: #fff" in code:
        issues.append(AccessibilityIssue(
            "contrast", "Text color and background should have sufficient contrast.", WARNING,
        ))

    deductions = sum(20 if i.severity == CRITICAL else 10 for i in issues)
    return {"issues": [asdict(i) for i in issues], "score": max(0, 100 - deductions)}
