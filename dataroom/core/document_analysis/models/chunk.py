"""
Chunk domain model for the analysis pipeline.

Represents one bounded slice of a document's extracted text.

Dependencies: pydantic
System role: Unit of work for per-chunk LLM analysis
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Ordered, bounded text slice of a document."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="0-based position in the document")
    content: str = Field(description="Chunk text content")
