"""
Upload event schema.

Document metadata parsed from an S3 ObjectCreated notification for keys of
the form users/{owner_id}/pdfs/{filename}.

Dependencies: pydantic
System role: Storage-trigger contract
"""

from pydantic import BaseModel, ConfigDict, Field


class UploadEvent(BaseModel):
    """One uploaded document to analyze."""

    owner_id: str = Field(..., min_length=1, description="Owner parsed from the key path")
    s3_key: str = Field(..., min_length=1, description="S3 object key")
    filename: str = Field(..., description="Last key segment")
    file_size_bytes: int = Field(default=0, ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "owner_id": "u-7f3a",
                "s3_key": "users/u-7f3a/pdfs/pitch-deck.pdf",
                "filename": "pitch-deck.pdf",
                "file_size_bytes": 1024000,
            }
        }
    )
