"""
Document models for the analysis pipeline.

DocumentReference identifies what to analyze; Document holds the extracted
text for the duration of one job run.

Dependencies: pydantic
System role: Input contracts for AnalysisJob
"""

from pydantic import BaseModel, Field, computed_field

UNKNOWN_DOCUMENT_NAME = "Unknown"


class DocumentReference(BaseModel):
    """Pointer to an uploaded document in object storage."""

    file_path: str = Field(min_length=1, description="Object key of the uploaded document")
    owner_id: str = Field(min_length=1, description="Owner (uploading user) identifier")

    @computed_field
    @property
    def name(self) -> str:
        """Display name: last segment of the object key."""
        return self.file_path.rstrip("/").split("/")[-1] or UNKNOWN_DOCUMENT_NAME


class Document(BaseModel):
    """Extracted document owned by a single analysis run."""

    document_id: str = Field(description="Storage path of the source object")
    owner_id: str = Field(description="Owner identifier")
    name: str = Field(description="Display name")
    text: str = Field(description="Raw extracted text")
    size_bytes: int = Field(default=0, ge=0, description="Source object size")
