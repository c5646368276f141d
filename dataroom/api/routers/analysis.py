"""
Document analysis API endpoints.

Routes:
    POST /analyze-document
    GET  /users/{user_id}/files/{document_name}/analysis

Errors are returned as {errorKind, message} with the mapped HTTP status.

Dependencies: dataroom.application.services, dataroom.models
System role: Document analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from dataroom.api.deps import get_analysis_service
from dataroom.api.routers.router_utils import error_response
from dataroom.application.services import AnalysisService
from dataroom.core.document_analysis.models import AnalysisRecord, MergedAnalysis
from dataroom.core.exceptions import DataRoomException
from dataroom.models import AnalyzeDocumentRequest, ErrorEnvelope

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope},
    401: {"model": ErrorEnvelope},
    429: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}


@router.post(
    "/analyze-document",
    response_model=MergedAnalysis,
    responses=ERROR_RESPONSES,
)
async def analyze_document(
    request: AnalyzeDocumentRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """
    Analyze an uploaded document and store the merged analysis.

    Args:
        request: filePath and userId
        analysis_service: Injected AnalysisService

    Returns:
        MergedAnalysis: camelCase analysis record

    Example Response:
        {
            "summary": "...",
            "keywords": [{"word": "runway", "explanation": "..."}],
            "categories": ["Finance"],
            "tags": ["fundraising"],
            "keyInsights": ["..."],
            "toneAndStyle": "Formal",
            "targetAudience": "Investors",
            "potentialApplications": ["Due diligence"]
        }
    """
    try:
        return await analysis_service.analyze_document(request.file_path, request.user_id)
    except DataRoomException as e:
        logger.warning(
            "%s:analyze_document - %s: %s",
            __name__,
            type(e).__name__,
            e,
            extra={"error_kind": e.error_kind.value},
        )
        return error_response(e)
    except Exception as e:
        logger.exception("%s:analyze_document - Unexpected %s", __name__, type(e).__name__)
        return error_response(e)


@router.get(
    "/users/{user_id}/files/{document_name}/analysis",
    response_model=AnalysisRecord,
    responses={404: {"model": ErrorEnvelope}},
)
async def get_document_analysis(
    user_id: str,
    document_name: str,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """Return the stored analysis record for one document."""
    try:
        return await analysis_service.get_analysis(user_id, document_name)
    except DataRoomException as e:
        return error_response(e)
