"""
Data room document analysis backend.

Chunked LLM analysis of uploaded documents with persisted, bounded results.
"""

__version__ = "0.1.0"
