"""
Data models for the documentation parser component.
"""

from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

# Tag key -> single value, or every value when the tag was repeated
ParsedDocumentation = Dict[str, Union[str, List[str]]]

API_DOC_ATTRIBUTE = "__api_doc__"


class ApiDoc(BaseModel):
    """
    Declarative documentation for a single verb method.

    Extra keyword arguments are accepted as additional tags.
    """
    model_config = ConfigDict(extra="allow")

    uri: Optional[str] = None
    description: Optional[str] = None
    params: Optional[Union[str, List[str]]] = None
    response: Optional[Union[str, List[str]]] = None

    def to_documentation(self) -> ParsedDocumentation:
        """Return the documentation mapping with unset tags dropped."""
        documentation: ParsedDocumentation = {}
        for key, value in self.model_dump().items():
            if value is None or value == [] or value == "":
                continue
            documentation[key] = [str(item) for item in value] if isinstance(value, list) else str(value)
        return documentation


def api_doc(**tags) -> Callable:
    """
    Attach declarative documentation to a verb method.

    Example:
        @api_doc(uri="/blog/12", response=["id int Blog ID"])
        def get(self):
            ...
    """
    doc = ApiDoc(**tags)

    def decorator(func):
        setattr(func, API_DOC_ATTRIBUTE, doc)
        return func

    return decorator


def get_api_doc(func) -> Optional[ApiDoc]:
    """Return the declared documentation of a method, if any."""
    return getattr(func, API_DOC_ATTRIBUTE, None)
