"""Service health endpoint."""

from fastapi import APIRouter

from response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(message="Server is running!")
