"""
Base class for API endpoints.

Subclasses implement HTTP verbs as methods named after them (get, post, ...).
The base class answers HEAD by running GET without returning its body, and
answers OPTIONS by listing the implemented verbs together with the
documentation found on each verb method.
"""

import logging
from typing import Any, Dict, Optional

from apiendpoint.config import EndpointConfig
from apiendpoint.doc_parser.models import ParsedDocumentation, get_api_doc
from apiendpoint.doc_parser.parser import AnnotationParser
from apiendpoint.endpoint.http import Request, ResponseLike, is_response
from apiendpoint.endpoint.introspection import get_operation, list_verbs
from apiendpoint.endpoint.models import OptionsDescriptor
from apiendpoint.utils.error_handling import MethodNotAllowed

logger = logging.getLogger(__name__)


class Endpoint:
    """
    Parent class for all endpoints.

    Holds the request, the response and the endpoint configuration for a
    single call. The response is immutable, so methods that add headers
    replace self.response with the new instance.
    """

    def __init__(self, request: Request, response: Optional[ResponseLike], config: Optional[EndpointConfig] = None):
        """
        Create the endpoint.

        Args:
            request: Incoming request
            response: Response to build on
            config: Endpoint configuration, defaults to the application settings
        """
        self.request = request
        self.response = response
        self.config = config or EndpointConfig.from_settings()

    def get_response(self) -> Optional[ResponseLike]:
        """Return the current response."""
        return self.response

    def head(self) -> Dict[str, Any]:
        """
        Handle HEAD requests when a GET method is implemented.

        Headers added by GET stay on self.response, the body is dropped.

        Returns:
            Empty body

        Raises:
            MethodNotAllowed: If the endpoint has no GET method
        """
        get = getattr(self, "get", None)
        if not callable(get):
            logger.warning(f"HEAD refused for {type(self).__name__}: no GET method")
            raise MethodNotAllowed("HEAD")

        get()
        return {}

    def options(self) -> OptionsDescriptor:
        """
        Handle OPTIONS requests.

        Adds an Allow header listing the implemented verbs and describes
        each documented verb.

        Returns:
            OptionsDescriptor

        Raises:
            MethodNotAllowed: If no response is attached
        """
        if not is_response(self.response):
            logger.warning(f"OPTIONS refused for {type(self).__name__}: no response attached")
            raise MethodNotAllowed("OPTIONS")

        verbs = list_verbs(self, self.config.valid_http_verbs)

        self.response = self.response.with_added_header("Allow", ", ".join(verbs))

        descriptor = OptionsDescriptor(
            content_type=list(self.config.content_types),
            accept=list(self.config.accept_types)
        )

        for verb in verbs:
            doc = self.parse_method_doc(verb)
            if doc:
                descriptor.methods[verb] = doc

        logger.info(
            f"OPTIONS {type(self).__name__}: allow={verbs}, "
            f"documented={list(descriptor.methods)}"
        )
        return descriptor

    def parse_method_doc(self, verb: str) -> ParsedDocumentation:
        """
        Collect the documentation of a verb method.

        Documentation declared with api_doc wins over docstring tags.

        Args:
            verb: Upper-case verb name

        Returns:
            Documentation mapping, empty when the method is undocumented
        """
        method = get_operation(type(self), verb)
        if method is None:
            return {}

        declared = get_api_doc(method)
        if declared is not None:
            return declared.to_documentation()

        parser = AnnotationParser(self.config.annotation_marker)
        return parser.parse(method.__doc__)
