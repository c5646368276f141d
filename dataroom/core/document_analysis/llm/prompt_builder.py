"""
Prompt builder for chunk analysis.

Turns (document title, chunk text) into a CompletionRequest bound to the
document analysis schema.

Dependencies: pydantic (completion models)
System role: Request construction for CompletionClient (pure)
"""

import copy

from ..models import ChatMessage, CompletionRequest
from .analysis_prompt import (
    DOCUMENT_ANALYSIS_SCHEMA,
    SCHEMA_NAME,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
)

DEFAULT_MODEL = "gpt-4o-2024-08-06"


class PromptBuilder:
    """Build structured-output completion requests for document chunks."""

    def __init__(self, model: str = DEFAULT_MODEL) -> None:
        """
        Initialize prompt builder.

        Args:
            model: Completion model that supports json_schema output
        """
        self._model = model

    def build(self, document_title: str, chunk_text: str) -> CompletionRequest:
        """
        Build the completion request for one chunk.

        Args:
            document_title: Display name of the document
            chunk_text: Chunk content to analyze

        Returns:
            CompletionRequest: System persona, user instruction, strict schema
        """
        user_prompt = USER_PROMPT_TEMPLATE.format(
            document_title=document_title,
            chunk_text=chunk_text,
        )
        return CompletionRequest(
            model=self._model,
            messages=[
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=user_prompt),
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": SCHEMA_NAME,
                    "strict": True,
                    "schema": copy.deepcopy(DOCUMENT_ANALYSIS_SCHEMA),
                },
            },
        )
