"""
Language detection for pasted snippets and uploaded file names.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from pygments.lexers import guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# Pygments lexer alias -> language id.
LEXER_TO_LANGUAGE = {
    "javascript": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "react": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "tsx": "typescript",
    "python": "python",
    "java": "java",
    "go": "go",
    "cpp": "cpp",
    "c": "cpp",
    "csharp": "csharp",
    "rust": "rust",
    "sql": "sql",
    "xml": "html",
    "html": "html",
    "css": "css",
    "php": "php",
    "json": "json",
    "bash": "shell",
    "sh": "shell",
    "shell": "shell",
    "yaml": "yaml",
    "yml": "yaml",
    "markdown": "markdown",
    "md": "markdown",
}

MIN_LENGTH = 3          # Below this only the '<' prefix check runs.
MIN_CONFIDENCE = 0.15   # Lower guesses fall through to the structural signals.

_HTML_START = re.compile(r"^\s*<")
_HTML_TAG = re.compile(r"</?[a-z]", re.IGNORECASE)
_JS_SIGNAL = re.compile(r"\bconsole\.log\(|\bexport\s+|import\s+.+from\s+['\"]")
_CSS_RULE = re.compile(r"^[^{}<>;=()]+\{\s*-{0,2}[a-zA-Z][\w-]*\s*:[^{}]*\}", re.MULTILINE)

_EXTENSIONS = {
    ".css": "css",
    ".html": "html",
    ".htm": "html",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".tsx": "typescript",
}


def _guess_with_lexer(text: str) -> Optional[str]:
    try:
        lexer = guess_lexer(text)
    except ClassNotFound:
        return None
    confidence = lexer.analyse_text(text)
    if confidence < MIN_CONFIDENCE:
        return None
    for alias in lexer.aliases:
        language = LEXER_TO_LANGUAGE.get(alias.lower())
        if language:
            logger.debug("Lexer %s guessed %s (%.2f)", lexer.name, language, confidence)
            return language
    return None


def detect_language(text: str) -> str:
    """Classify raw text as css, html, javascript, ... or 'plaintext'."""
    t = (text or "").strip()
    if not t:
        return "plaintext"
    if len(t) < MIN_LENGTH:
        return "html" if t.startswith("<") else "plaintext"

    guessed = _guess_with_lexer(t)
    if guessed:
        return guessed

    if _HTML_START.match(t) and _HTML_TAG.search(t):
        return "html"
    if _JS_SIGNAL.search(t):
        return "javascript"
    if _CSS_RULE.search(t):
        return "css"
    return "plaintext"


def language_for_filename(filename: str) -> Optional[str]:
    """Language id from a file extension, or None if unknown."""
    return _EXTENSIONS.get(Path(filename).suffix.lower())
