"""
FastAPI Gateway for the BMSCE AIML department assistant
Serves the department content and the chat assistant over one HTTP API
"""

import logging
import sys
from datetime import datetime

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import dependencies
from .config import load_cors_origins, load_settings
from .errors import ApiError, StartupConfigError
from .metrics import http_requests_total
from .models import HealthResponse
from .routes import ai as ai_router
from .routes import calendar as calendar_router
from .routes import courses as courses_router
from .routes import faculty as faculty_router
from .routes import infrastructure as infrastructure_router
from .services.chat_service import ChatService
from .services.completion_client import GeminiCompletionClient
from .services.content_store import load_content
from .services.context_store import ConversationContextStore

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="AIML Department Assistant Gateway",
    description="Department content API and conversational assistant for the AIML department at BMSCE",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS origins are fixed when the app object is built
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def http_request_counter_middleware(request, call_next):
    """Count all HTTP requests with method, route template, and status labels"""
    response = await call_next(request)

    route = request.url.path
    if request.scope.get("route"):
        route = request.scope["route"].path

    http_requests_total.labels(
        method=request.method,
        route=route,
        status=str(response.status_code),
    ).inc()

    return response


@app.on_event("startup")
async def startup_event():
    """Load settings and content, then wire the chat service"""
    logger.info("Initializing AIML department gateway...")

    try:
        settings = load_settings()
    except StartupConfigError as e:
        logger.error(f"Startup aborted: {e}")
        raise

    logging.getLogger().setLevel(settings.log_level)

    content = load_content(settings.data_dir)
    contexts = ConversationContextStore(limit=settings.history_limit)

    completion_client = None
    if settings.demo_mode:
        logger.warning("DEMO_MODE enabled: answers come from the keyword fallback only")
    else:
        completion_client = GeminiCompletionClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_s=settings.gemini_timeout_s,
        )

    dependencies.state.settings = settings
    dependencies.state.content = content
    dependencies.state.contexts = contexts
    dependencies.state.chat_service = ChatService(
        content, contexts, completion_client, demo_mode=settings.demo_mode
    )
    logger.info("All services initialized successfully")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down AIML department gateway...")

    chat_service = dependencies.state.chat_service
    if chat_service is not None:
        try:
            await chat_service.close()
            logger.info("Completion client closed")
        except Exception as e:
            logger.error(f"Error closing completion client: {e}")

    logger.info("Shutdown complete")


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness plus a summary of what the gateway has loaded"""
    services = {}
    state = dependencies.state
    if state.content is not None:
        services["content"] = state.content.summary()
    if state.contexts is not None:
        services["sessions"] = len(state.contexts)
    if state.settings is not None:
        services["completion"] = "demo" if state.settings.demo_mode else state.settings.gemini_model

    return HealthResponse(
        status="OK",
        timestamp=datetime.utcnow().isoformat(),
        services=services,
    )


@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(ai_router.router)
app.include_router(faculty_router.router)
app.include_router(courses_router.router)
app.include_router(calendar_router.router)
app.include_router(infrastructure_router.router)


@app.exception_handler(ApiError)
async def api_error_handler(request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    """Malformed bodies get one static 400 message"""
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """General exception handler for unhandled errors"""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "An unexpected error occurred"},
    )


def main():
    """Entry point: fail fast on missing configuration, then serve"""
    try:
        settings = load_settings()
    except StartupConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    uvicorn.run(
        "aiml_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
