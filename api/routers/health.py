# File: api/routers/health.py
from fastapi import APIRouter
from pydantic import BaseModel


router = APIRouter()


class HealthResponse(BaseModel):
    status: str


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    # Liveness only; upstream providers are not probed
    return HealthResponse(status="ok")
