"""
LLM boundary for document analysis.

Exports: PromptBuilder, CompletionClient, BackoffPolicy
"""

from .backoff import BackoffPolicy
from .completion_client import CompletionClient
from .prompt_builder import DEFAULT_MODEL, PromptBuilder

__all__ = ["BackoffPolicy", "CompletionClient", "PromptBuilder", "DEFAULT_MODEL"]
