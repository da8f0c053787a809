"""
Extractors package: one analyzer per input language.
"""

from .css_extractor import CSSExtractor
from .html_extractor import HTMLExtractor
from .javascript_extractor import JavaScriptExtractor
from .jsx_extractor import JSXExtractor
from .mixed_extractor import MixedExtractor

__all__ = [
    'CSSExtractor',
    'HTMLExtractor',
    'JavaScriptExtractor',
    'JSXExtractor',
    'MixedExtractor',
]
