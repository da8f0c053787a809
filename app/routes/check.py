"""Check routes: JSON report and Markdown download."""

from deps import APIRouter, HTMLResponse, Path, PlainTextResponse, re

from ..report_formatter import format_markdown_report
from ..schemas import CheckRequest, CheckResponse
from ..services import CheckerService

router = APIRouter()
checker_svc = CheckerService()

_CHECK_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Check · Baseline Checker API</title>
</head>
<body>
  <h1>POST /check</h1>
  <p>Send JSON: <code>{"code": "...", "language": "css", "minLevel": "high"}</code>.
  <code>language</code> and <code>minLevel</code> are optional.</p>
  <p>POST the same body to <code>/check/report</code> for a Markdown report.</p>
  <p><a href="/">Home</a> · <a href="/docs">Swagger UI</a> · <a href="/health">Health</a></p>
</body>
</html>
"""


def _safe_report_basename(label: str) -> str:
    """Filesystem-safe base name for the report download (no extension)."""
    stem = Path((label or "").replace("\\", "/")).stem
    return re.sub(r"[^\w\-]", "_", stem)[:80].strip("_") or "baseline_report"


@router.get("/check", response_class=HTMLResponse)
def check_get() -> str:
    """GET /check: usage page. Use POST with a JSON body to analyze."""
    return _CHECK_HTML


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest) -> CheckResponse:
    """Baseline report, severity view and accessibility heuristics."""
    return checker_svc.check(req)


@router.post("/check/report", response_class=PlainTextResponse)
def check_report(req: CheckRequest) -> PlainTextResponse:
    """Same analysis as POST /check, returned as a Markdown attachment."""
    source = req.filename or "input"
    text = format_markdown_report(source, checker_svc.check(req))
    filename = f"{_safe_report_basename(source)}_baseline_report.md"
    return PlainTextResponse(
        content=text,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
