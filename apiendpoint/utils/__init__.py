"""
Shared utilities for apiendpoint.
"""

from apiendpoint.utils.error_handling import EndpointError, MethodNotAllowed, ConfigurationError

__all__ = ["EndpointError", "MethodNotAllowed", "ConfigurationError"]
