"""
apiendpoint - endpoint base class for HTTP APIs.

Endpoints implement HTTP verbs as methods and get HEAD and self-documenting
OPTIONS responses for free.
"""

__version__ = "1.0.0"

from apiendpoint.config import EndpointConfig, settings
from apiendpoint.doc_parser import AnnotationParser, ApiDoc, api_doc, parse_doc
from apiendpoint.endpoint import Endpoint, OptionsDescriptor, Request, Response
from apiendpoint.utils.error_handling import ConfigurationError, EndpointError, MethodNotAllowed

__all__ = [
    "EndpointConfig",
    "settings",
    "AnnotationParser",
    "ApiDoc",
    "api_doc",
    "parse_doc",
    "Endpoint",
    "OptionsDescriptor",
    "Request",
    "Response",
    "ConfigurationError",
    "EndpointError",
    "MethodNotAllowed"
]
