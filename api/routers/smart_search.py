# api/routers/smart_search.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from agents.data_acquisition_agent import DataAcquisitionAgent
from api.dependencies.search import get_acquisition_agent
from api.models.search_models import ErrorResponse, SmartSearchRequest, SmartSearchResponse
from api.routers.search import internal_error_response, query_required_response, read_payload
from services.smart_search_service import smart_search

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/smart-search",
    response_model=SmartSearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def smart_search_endpoint(
    request: Request,
    acquisition_agent: DataAcquisitionAgent = Depends(get_acquisition_agent),
):
    payload = await read_payload(request, SmartSearchRequest)
    if payload is None:
        return query_required_response()

    try:
        studies = await smart_search(payload.userQuery, acquisition_agent)
        content = SmartSearchResponse(studies=studies).model_dump(mode="json")
    except Exception as e:
        logger.error("Error in /smart-search", exc_info=True)
        return internal_error_response(e)

    return JSONResponse(status_code=200, content=content)
