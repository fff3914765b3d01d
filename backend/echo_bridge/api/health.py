from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HEALTH_MESSAGE = "Echo Bridge Backend is running!"


@router.get("/health", response_class=PlainTextResponse, tags=["health"], summary="Health check")
async def health_check() -> str:
    """
    Health check endpoint to verify the API is running.

    Returns:
        str: Fixed liveness message
    """
    return HEALTH_MESSAGE
