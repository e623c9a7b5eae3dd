import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from postgrest.exceptions import APIError as PostgRESTAPIError

from common.database.client import close_client, open_client
from common.exceptions import (
    NotefulException,
    generic_exception_handler,
    noteful_exception_handler,
    postgrest_error_handler,
    request_validation_error_handler,
)
from services.notes_service.api.v1.api import api_router
from services.notes_service.core.config import (
    API_PREFIX,
    CORS_ORIGINS,
    LOG_LEVEL,
    PROJECT_NAME,
    VERSION,
)

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("noteful.gateway")


# ---------------------------------------------------------------------------
# Lifespan: one database client per process
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.db = await open_client()
    logger.info("Database client ready")
    try:
        yield
    finally:
        await close_client(app.state.db)
        logger.info("Database client closed")


app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    description="Notes, folders and tags",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Middleware: honour X-Forwarded-Proto so Location headers and redirects use
# the scheme the client actually spoke when running behind a proxy.
# ---------------------------------------------------------------------------
@app.middleware("http")
async def set_scheme_from_proxy(request: Request, call_next):
    proto = request.headers.get("x-forwarded-proto")
    if proto:
        request.scope["scheme"] = proto
    return await call_next(request)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------
app.add_exception_handler(NotefulException, noteful_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(PostgRESTAPIError, postgrest_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "noteful-api"}
