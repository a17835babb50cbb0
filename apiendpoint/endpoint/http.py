"""
Request and response value objects.

Both are immutable: every modification returns a new instance, so callers
must keep the object returned by with_header/with_added_header.
"""

from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field


class ResponseLike(Protocol):
    """Anything an endpoint can add headers to."""

    def with_added_header(self, name: str, value: str) -> "ResponseLike":
        ...


def is_response(obj: Any) -> bool:
    """Check whether an object can be used as a response."""
    return obj is not None and callable(getattr(obj, "with_added_header", None))


def _find_header(headers: Dict[str, List[str]], name: str) -> Optional[str]:
    """Return the stored spelling of a header name, matched case-insensitively."""
    lowered = name.lower()
    for existing in headers:
        if existing.lower() == lowered:
            return existing
    return None


class HttpMessage(BaseModel):
    """Common header handling for requests and responses."""
    model_config = ConfigDict(frozen=True)

    headers: Dict[str, List[str]] = Field(default_factory=dict)

    def has_header(self, name: str) -> bool:
        return _find_header(self.headers, name) is not None

    def get_header(self, name: str) -> List[str]:
        existing = _find_header(self.headers, name)
        return list(self.headers[existing]) if existing is not None else []

    def get_header_line(self, name: str) -> str:
        return ", ".join(self.get_header(name))


class Request(HttpMessage):
    """An incoming request."""
    method: str = "GET"
    path: str = "/"
    query_params: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[Any] = None


class Response(HttpMessage):
    """An outgoing response."""
    status_code: int = 200
    reason_phrase: str = ""

    def with_header(self, name: str, value: str) -> "Response":
        """
        Return a copy with the header replaced.

        Args:
            name: Header name, case-insensitive
            value: Header value

        Returns:
            New response
        """
        headers = {k: list(v) for k, v in self.headers.items()}
        existing = _find_header(headers, name)
        if existing is not None:
            del headers[existing]
        headers[name] = [value]
        return self.model_copy(update={"headers": headers})

    def with_added_header(self, name: str, value: str) -> "Response":
        """
        Return a copy with the value appended to the header.

        Args:
            name: Header name, case-insensitive
            value: Header value

        Returns:
            New response
        """
        headers = {k: list(v) for k, v in self.headers.items()}
        existing = _find_header(headers, name)
        if existing is None:
            headers[name] = [value]
        else:
            headers[existing].append(value)
        return self.model_copy(update={"headers": headers})

    def with_status(self, status_code: int, reason_phrase: str = "") -> "Response":
        """Return a copy with a different status."""
        return self.model_copy(update={"status_code": status_code, "reason_phrase": reason_phrase})
