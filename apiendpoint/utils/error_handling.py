"""
Error handling for apiendpoint.

This module defines the exception hierarchy raised by endpoints and by the
configuration layer. Dispatchers translate these into transport responses.
"""

import time
from typing import Any, Dict, Optional


class EndpointError(Exception):
    """Base exception class for all apiendpoint errors."""
    def __init__(self, message: str, component: str = "unknown", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}
        self.timestamp = time.time()


class MethodNotAllowed(EndpointError):
    """
    Raised when an endpoint refuses the requested HTTP method.

    The dispatcher is expected to map this to a 405 response.
    """
    status_code = 405

    def __init__(self, method: Optional[str] = None, message: str = "Method not allowed",
                 component: str = "endpoint", details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if method:
            details.setdefault("method", method)
        super().__init__(message, component=component, details=details)
        self.method = method


class ConfigurationError(EndpointError):
    """Error related to endpoint configuration."""
    pass
