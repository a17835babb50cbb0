"""
Endpoint component.

Base class for request handlers with built-in HEAD and OPTIONS support,
plus the request/response value objects it works with.
"""

from apiendpoint.endpoint.base import Endpoint
from apiendpoint.endpoint.http import Request, Response, ResponseLike, is_response
from apiendpoint.endpoint.introspection import get_operation, iter_operations, list_verbs
from apiendpoint.endpoint.models import OptionsDescriptor

__all__ = [
    "Endpoint",
    "Request",
    "Response",
    "ResponseLike",
    "is_response",
    "OptionsDescriptor",
    "get_operation",
    "iter_operations",
    "list_verbs"
]
