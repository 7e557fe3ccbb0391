# api/routers/search.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from agents.data_acquisition_agent import DataAcquisitionAgent
from api.dependencies.search import get_acquisition_agent
from api.models.search_models import (
    INTERNAL_ERROR_MESSAGE,
    QUERY_REQUIRED_MESSAGE,
    ErrorResponse,
    SearchPapersRequest,
)
from services.schema.paper_schema import UnifiedPaperResult
from services.search_service import search_papers

router = APIRouter()
logger = logging.getLogger(__name__)


async def read_payload(request: Request, model):
    """
    Parse the JSON body into `model`. Returns None for anything unusable:
    malformed JSON, a non-object body, or a missing/blank query.
    """
    try:
        body = await request.json()
        return model.model_validate(body)
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected {request.url.path} payload: {e}")
        return None


def query_required_response() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": QUERY_REQUIRED_MESSAGE})


def internal_error_response(error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE, "details": str(error)},
    )


@router.post(
    "/search-papers",
    response_model=List[UnifiedPaperResult],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_papers_endpoint(
    request: Request,
    acquisition_agent: DataAcquisitionAgent = Depends(get_acquisition_agent),
):
    payload = await read_payload(request, SearchPapersRequest)
    if payload is None:
        return query_required_response()

    try:
        papers = await search_papers(payload.query, payload.limit, acquisition_agent)
        content = [paper.model_dump(mode="json") for paper in papers]
    except Exception as e:
        logger.error("Error in /search-papers", exc_info=True)
        return internal_error_response(e)

    return JSONResponse(status_code=200, content=content)
