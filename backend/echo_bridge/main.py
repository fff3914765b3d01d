import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from .api.routes import api_router
from .core.config import settings
from .core.errors import register_exception_handlers
import uvicorn

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description="Echo Bridge backend API"
)

# Registered first so fault handling sits inside logging and CORS
register_exception_handlers(app)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f">>> [REQUEST] {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"<<< [RESPONSE] {request.method} {request.url.path} Status: {response.status_code}")
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


if __name__ == "__main__":
	uvicorn.run("echo_bridge.main:app", port=settings.PORT, host=settings.HOST, log_level=settings.LOG_LEVEL.lower(), workers=1)
