"""
Completion request model.

Provider-neutral description of one chat completion call with a
json_schema response format.

Dependencies: pydantic
System role: Contract between PromptBuilder and CompletionClient
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Single chat message."""

    role: Literal["system", "user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    """Chat completion request constrained to a structured-output schema."""

    model: str = Field(description="Completion model identifier")
    messages: list[ChatMessage] = Field(min_length=1)
    response_format: dict[str, Any] = Field(description="json_schema response format block")

    def to_payload(self) -> dict[str, Any]:
        """Keyword arguments for chat.completions.create."""
        return {
            "model": self.model,
            "messages": [message.model_dump() for message in self.messages],
            "response_format": self.response_format,
        }
