"""
Tests for HTML documents with embedded <style> and <script>.
"""
from baseline_checker.issue import Location

from conftest import keys

PAGE = """<html>
<head>
<style>
  .a { text-wrap: pretty; }
</style>
</head>
<body>
<script>
localStorage.setItem("k", "v");
</script>
</body>
</html>
"""


def test_style_and_script_blocks(checker):
    report = checker.analyze(PAGE, "html")
    assert report.input_language == "mixed"
    assert [(i.compat_key, i.location) for i in report.issues] == [
        ("css.properties.text-wrap", Location(4, 8)),
        ("css.properties.text-wrap.pretty", Location(4, 8)),
        ("javascript.builtins.localStorage", Location(9, 1)),
        ("api.localStorage.setItem", Location(9, 1)),
    ]
    # html, head, style, body, script + 2 CSS + 2 JS
    assert report.summary.total_checked == 9
    assert report.summary.below_min_level == 4


def test_elements_still_checked(checker):
    report = checker.analyze('<div popover></div><style>a { gap: 0; }</style>', "html")
    assert keys(report) == ["html.global_attributes.popover", "css.properties.gap"]


def test_non_javascript_script_skipped(checker):
    html = '<script type="application/json">{"localStorage": 1}</script>\n<script type="module">localStorage;</script>'
    report = checker.analyze(html, "html")
    assert keys(report) == ["javascript.builtins.localStorage"]
    assert report.issues[0].location == Location(2, 23)


def test_broken_style_block_does_not_hide_others(checker):
    html = "<style>a { color: ;;;</style>\n<script>localStorage;</script>"
    report = checker.analyze(html, "html")
    assert keys(report) == ["javascript.builtins.localStorage"]


def test_one_line_style_block_uses_document_columns(checker):
    report = checker.analyze("<p></p><style>a { gap: 0; }</style>", "html")
    assert [i.location for i in report.issues] == [Location(1, 19)]
