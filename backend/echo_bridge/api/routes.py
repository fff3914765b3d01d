from fastapi import APIRouter
from . import echo, health
from ..core.config import settings

api_router = APIRouter(prefix=settings.API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(echo.router)
