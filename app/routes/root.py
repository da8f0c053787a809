"""Root route."""

from deps import APIRouter, HTMLResponse

router = APIRouter()

_ROOT_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Baseline Checker API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
    h1 { font-size: 1.25rem; font-weight: 600; }
    ul { list-style: none; padding: 0; }
    li { margin: 0.5rem 0; }
    a { color: #2563eb; text-decoration: none; }
  </style>
</head>
<body>
  <h1>Baseline Checker API</h1>
  <p>Finds CSS, HTML and JavaScript features below a Baseline level.</p>
  <ul>
    <li><a href="/docs">/docs</a> · Swagger UI</li>
    <li><a href="/health">/health</a> · Liveness</li>
    <li><a href="/check">/check</a> · Usage (POST)</li>
    <li>/detect · Language detection (POST)</li>
  </ul>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with links."""
    return _ROOT_HTML
