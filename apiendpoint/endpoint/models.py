"""
Data models for the Endpoint component.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from apiendpoint.doc_parser.models import ParsedDocumentation


class OptionsDescriptor(BaseModel):
    """
    Body of an OPTIONS response.

    methods only lists verbs that have documentation.
    """
    model_config = ConfigDict(populate_by_name=True)

    content_type: List[str] = Field(default_factory=list, alias="Content-Type")
    accept: List[str] = Field(default_factory=list, alias="Accept")
    methods: Dict[str, ParsedDocumentation] = Field(default_factory=dict)

    def to_body(self) -> Dict[str, Any]:
        """Return the response body, leaving out methods when none are documented."""
        body = self.model_dump(by_alias=True)
        if not body["methods"]:
            del body["methods"]
        return body
