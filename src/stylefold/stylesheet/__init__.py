from stylefold.stylesheet.parser import calculate_specificity, parse_stylesheet
from stylefold.stylesheet.minify import extract_query, minify_css
from stylefold.stylesheet.model import Declaration, Selector, Stylesheet

__all__ = [
    "parse_stylesheet",
    "calculate_specificity",
    "minify_css",
    "extract_query",
    "Stylesheet",
    "Selector",
    "Declaration",
]
