"""
Primary FastAPI application entry point
"""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mflix_api.core.config import settings
from mflix_api.core.errors import ApiError, InternalError
from mflix_api.api.deps import initialize_connections, close_connections
from mflix_api.api.api import api_router
from mflix_api.models.envelope import envelope_response
from mflix_api.services.auth_service import build_user_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)
logger.info("Starting Mflix API server...")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Application startup: Initializing connections...")
    await initialize_connections()
    yield
    # Shutdown
    logger.info("Application shutdown: Closing connections...")
    await close_connections()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Accounts live as long as this application instance
app.state.user_store = build_user_store(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error mapping: every failure leaves as an envelope ---

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return envelope_response(exc.status_code, message=exc.message, error=exc.error)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    logger.warning(f"Rejected request to {request.url.path}: {problems}")
    return envelope_response(
        status.HTTP_400_BAD_REQUEST, message="Invalid request body", error="; ".join(problems)
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return envelope_response(exc.status_code, message=str(exc.detail))

@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    # The driver message is logged by the repository, never returned
    internal = InternalError()
    return envelope_response(internal.status_code, message=internal.message, error=internal.error)

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    internal = InternalError()
    return envelope_response(internal.status_code, message=internal.message, error=internal.error)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/", status_code=status.HTTP_200_OK)
async def root():
    """Root endpoint to confirm the API is running."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}

# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mflix_api.server:app", host=settings.HOST, port=settings.PORT, reload=True)
