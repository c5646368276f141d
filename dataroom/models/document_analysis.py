"""
Document analysis API schemas.

Request/response contracts for the analysis endpoints. Field names are
camelCase on the wire.

Dependencies: pydantic
System role: Analysis HTTP API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalyzeDocumentRequest(BaseModel):
    """
    Body of POST /analyze-document.

    Both fields are optional at the schema level so that a missing value maps
    to the error envelope instead of a generic 422.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_path: str | None = Field(default=None, description="Storage key of the uploaded document")
    user_id: str | None = Field(default=None, description="Caller identity; owner of the document")


class ErrorEnvelope(BaseModel):
    """Error body returned by the analysis endpoints."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error_kind: str
    message: str
