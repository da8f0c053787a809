"""
API tests for /, /health, /detect, /check and /check/report.
"""
import os

import pytest

# Bundled sample dataset and the default level, whatever the local .env says.
os.environ["WEB_FEATURES_DATA"] = ""
os.environ["BASELINE_MIN_LEVEL"] = "high"

from starlette.testclient import TestClient
from app.main import app

PRETTY_CSS = ".card { text-wrap: pretty; }"


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Baseline Checker API" in r.text


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["features"] > 0
    assert data["compatKeys"] >= data["features"]


def test_detect(client):
    r = client.post("/detect", json={"code": "<!DOCTYPE html>\n<html><body></body></html>"})
    assert r.status_code == 200
    assert r.json() == {"language": "html"}


def test_check_css(client):
    r = client.post("/check", json={"code": PRETTY_CSS, "language": "css"})
    assert r.status_code == 200
    data = r.json()
    assert data["language"] == "css"

    report = data["report"]
    assert report["inputLanguage"] == "css"
    assert report["minLevel"] == "high"
    assert [i["compatibilityKey"] for i in report["issues"]] == [
        "css.properties.text-wrap",
        "css.properties.text-wrap.pretty",
    ]
    assert report["issues"][1]["detectedBaseline"] is False
    assert report["issues"][0]["detectedBaseline"] == "low"
    assert report["issues"][0]["location"] == {"line": 1, "column": 9}
    assert report["summary"] == {"totalChecked": 2, "belowMinLevel": 2}

    severity = data["severity"]
    assert severity["overallScore"] == 95
    assert severity["critical"] == 1
    assert severity["moderate"] == 1
    assert severity["problematicBrowsers"] == ["firefox", "safari"]
    assert severity["issues"][0]["compatibilityKey"] == "css.properties.text-wrap.pretty"
    assert severity["issues"][0]["severity"] == "critical"
    assert severity["infringements"][0] == "text-wrap — css.properties.text-wrap"

    assert data["accessibility"] == {"issues": [], "score": 100}


def test_check_min_level_low(client):
    for body in ({"code": PRETTY_CSS, "language": "css", "minLevel": "low"},
                 {"code": PRETTY_CSS, "language": "css", "min_level": "low"}):
        data = client.post("/check", json=body).json()
        assert data["report"]["minLevel"] == "low"
        assert [i["compatibilityKey"] for i in data["report"]["issues"]] == ["css.properties.text-wrap.pretty"]


def test_check_invalid_min_level(client):
    r = client.post("/check", json={"code": PRETTY_CSS, "minLevel": "medium"})
    assert r.status_code == 422


def test_check_requires_code(client):
    assert client.post("/check", json={"language": "css"}).status_code == 422


def test_check_language_from_filename(client):
    data = client.post("/check", json={"code": PRETTY_CSS, "filename": "card.css"}).json()
    assert data["language"] == "css"
    assert data["report"]["summary"]["belowMinLevel"] == 2


def test_check_html_accessibility(client):
    data = client.post("/check", json={"code": '<img src="a.png">', "language": "html"}).json()
    assert data["report"]["issues"] == []
    assert data["report"]["summary"]["totalChecked"] == 2
    assert data["accessibility"]["score"] == 80
    assert data["severity"]["overallScore"] == 100


def test_check_unsupported_language(client):
    data = client.post("/check", json={"code": "SELECT 1;", "language": "sql"}).json()
    assert data["language"] == "sql"
    assert data["report"]["issues"] == []


def test_check_report_markdown(client):
    r = client.post("/check/report", json={"code": PRETTY_CSS, "filename": "card.css"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/markdown")
    assert 'filename="card_baseline_report.md"' in r.headers["content-disposition"]
    assert r.text.startswith("# Baseline report: card.css")
    assert "`css.properties.text-wrap.pretty`" in r.text
    assert r.text.index("Not Baseline") < r.text.index("Baseline low")
    assert "## Accessibility" in r.text


def test_check_get_usage_page(client):
    r = client.get("/check")
    assert r.status_code == 200
    assert "POST /check" in r.text
