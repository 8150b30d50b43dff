"""
Figma to HTML - Python Implementation
Convert Figma documents to HTML markup and a CSS stylesheet
"""

__version__ = "1.0.0"

from .src.figma_api_client import FigmaApiClient
from .src.figma_api_mapper import figma_api_to_domain
from .src.figma_types import ConversionResult, Node
from .src.figma_url_parser import parse_figma_url
from .src.html_generator import HtmlGenerator, convert
from .src.style_builder import CSSStyleBuilder, build_css_for_node

__all__ = [
    "ConversionResult",
    "CSSStyleBuilder",
    "FigmaApiClient",
    "HtmlGenerator",
    "Node",
    "build_css_for_node",
    "convert",
    "figma_api_to_domain",
    "parse_figma_url",
]
