"""
Documentation Parser component.

Extract structured API documentation from annotation tags in the docstrings
of verb methods, or from documentation declared with the api_doc decorator.
"""

from apiendpoint.doc_parser.accumulator import accumulate, strip_tag
from apiendpoint.doc_parser.models import ApiDoc, ParsedDocumentation, api_doc, get_api_doc
from apiendpoint.doc_parser.parser import AnnotationParser, LineKind, parse_doc

__all__ = [
    "AnnotationParser",
    "LineKind",
    "parse_doc",
    "accumulate",
    "strip_tag",
    "ApiDoc",
    "ParsedDocumentation",
    "api_doc",
    "get_api_doc"
]
