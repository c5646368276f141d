"""API request/response schemas."""

from dataroom.models.document_analysis import AnalyzeDocumentRequest, ErrorEnvelope

__all__ = ["AnalyzeDocumentRequest", "ErrorEnvelope"]
