"""
Main checker class that dispatches source text to the right extractor.
"""

import logging
from functools import lru_cache
from typing import Dict, Optional, Type

from .compat_index import FeatureDataset, load_feature_dataset
from .extractor_base import BaseExtractor
from .extractors import (
    CSSExtractor, HTMLExtractor, JavaScriptExtractor, JSXExtractor, MixedExtractor,
)
from .issue import BaselineReport, DEFAULT_MIN_LEVEL, empty_report, validate_min_level
from .status_resolver import BaselineClassifier, StatusResolver

# Input variant -> extractor class.
EXTRACTORS: Dict[str, Type[BaseExtractor]] = {
    "css": CSSExtractor,
    "html": HTMLExtractor,
    "mixed": MixedExtractor,
    "js": JavaScriptExtractor,
    "jsx": JSXExtractor,
}


@lru_cache(maxsize=1)
def default_dataset() -> FeatureDataset:
    """The bundled sample dataset, loaded once per process."""
    return load_feature_dataset()


def select_variant(code: str, language: str) -> Optional[str]:
    """Pick the extractor variant for a language tag, or None if unsupported."""
    if language == "css":
        return "css"
    if language == "html":
        if "<style" in code or "<script" in code:
            return "mixed"
        return "html"
    if language in ("javascript", "typescript"):
        # Cheap JSX sniff.
        if "<" in code and "/>" in code:
            return "jsx"
        return "js"
    return None


class BaselineChecker:
    """Main checker class for Baseline compatibility.

    Holds the dataset, its reverse index and the status resolver, all
    read-only. Every analyze call builds fresh extractors, so calls share
    no issue lists or de-duplication state.
    """

    def __init__(
        self,
        dataset: Optional[FeatureDataset] = None,
        resolver: Optional[StatusResolver] = None,
        min_level: str = DEFAULT_MIN_LEVEL,
        logger: Optional[logging.Logger] = None,
    ):
        self.dataset = dataset if dataset is not None else default_dataset()
        self.classifier = BaselineClassifier(self.dataset, resolver, min_level)
        self.logger = logger or logging.getLogger(__name__)

    @property
    def min_level(self) -> str:
        return self.classifier.min_level

    def extractor(self, variant: str, min_level: Optional[str] = None, language: str = "") -> BaseExtractor:
        classifier = self.classifier.with_min_level(min_level or self.min_level)
        cls = EXTRACTORS[variant]
        if cls is JavaScriptExtractor:
            dialect = "typescript" if language == "typescript" else "javascript"
            return cls(classifier, logger=self.logger, dialect=dialect)
        return cls(classifier, logger=self.logger)

    def analyze(self, code: str, detected_language: str, min_level: Optional[str] = None) -> BaselineReport:
        """Analyze code in the given language. Extractor failures give an empty report."""
        level = validate_min_level(min_level or self.min_level)
        try:
            variant = select_variant(code, detected_language)
            if variant is None:
                self.logger.debug("[Baseline] no extractor for language %r", detected_language)
                return empty_report(detected_language, level)
            return self.extractor(variant, level, detected_language).analyze(code)
        except Exception:
            self.logger.exception("[Baseline] analysis of %s input failed", detected_language)
            return empty_report(detected_language, level)

    def analyze_css(self, code: str, min_level: Optional[str] = None) -> BaselineReport:
        return self.extractor("css", min_level).analyze(code)

    def analyze_html(self, code: str, min_level: Optional[str] = None) -> BaselineReport:
        return self.extractor("html", min_level).analyze(code)

    def analyze_mixed(self, code: str, min_level: Optional[str] = None) -> BaselineReport:
        return self.extractor("mixed", min_level).analyze(code)

    def analyze_js(self, code: str, min_level: Optional[str] = None, language: str = "javascript") -> BaselineReport:
        return self.extractor("js", min_level, language).analyze(code)

    def analyze_jsx(self, code: str, min_level: Optional[str] = None) -> BaselineReport:
        return self.extractor("jsx", min_level).analyze(code)


def analyze_code_string(code: str, detected_language: str, min_level: str = DEFAULT_MIN_LEVEL) -> BaselineReport:
    """Analyze with the bundled dataset and its inline statuses."""
    return BaselineChecker(min_level=min_level).analyze(code, detected_language)
