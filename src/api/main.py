import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uuid

from src.api.routes import guidance_router
from src.api.services import get_cultural_guide
from configs import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(f"Starting Andhra Local Guide API on {settings.api_host}:{settings.api_port}")
    guide = get_cultural_guide()
    logger.info(f"Knowledge loaded from {guide.store.loaded_from}: {guide.store.get_stats()}")
    yield
    logger.info("Shutting down Andhra Local Guide API")


app = FastAPI(
    title="Andhra Local Guide API",
    description="Warm, vernacular guidance on Andhra slang, street food, festivals and mood food",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with logging."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "request_id": request_id
        }
    )


app.include_router(guidance_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    status = get_cultural_guide().status()
    return {
        "status": "healthy" if status["ready"] else "degraded",
        "service": "andhra-local-guide-api",
        "knowledge": status["knowledge"],
    }


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Andhra Local Guide API",
        "version": "1.0.0",
        "endpoints": {
            "categories": "GET /api/categories",
            "category_info": "GET /api/categories/{category}",
            "subcategories": "GET /api/categories/{category}/subcategories",
            "guidance": "POST /api/guidance",
            "validate": "POST /api/validate",
            "format_validate": "POST /api/format/validate",
            "health": "GET /health"
        }
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("src.api.main:app", host=settings.api_host, port=settings.api_port)
