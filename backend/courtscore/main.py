import logging
import os

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routers import players, matches, leaderboards
from .exceptions import DomainException, ProblemDetail
from .config import API_PREFIX, parse_allowed_origins
from .utils.sentry import init_sentry

logger = logging.getLogger(__name__)

init_sentry()

ALLOWED_ORIGINS = parse_allowed_origins(os.getenv("ALLOWED_ORIGINS"))
ALLOW_CREDENTIALS = os.getenv("ALLOW_CREDENTIALS", "true").lower() == "true"

app = FastAPI(
    title="Court Score API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("API_PREFIX=%r, %d CORS origin(s)", API_PREFIX, len(ALLOWED_ORIGINS))


def _health():
    return {"status": "ok"}


app.add_api_route("/healthz", _health, methods=["GET"], tags=["health"])


def _problem_response(problem: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        media_type="application/problem+json",
    )


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    return _problem_response(
        ProblemDetail(
            type=exc.type,
            title=exc.title,
            detail=exc.detail,
            status=exc.status_code,
            code=exc.code,
        )
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        ProblemDetail(
            title=detail,
            detail=detail,
            status=exc.status_code,
            code=getattr(exc, "code", f"http_{exc.status_code}"),
        )
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", exc_info=(type(exc), exc, exc.__traceback__))
    return _problem_response(
        ProblemDetail(
            title="Internal Server Error",
            status=500,
            detail=str(exc),
            code="internal_server_error",
        )
    )


api_router = APIRouter(prefix=API_PREFIX)
api_router.add_api_route("/healthz", _health, methods=["GET"], tags=["health"])


@api_router.get("")
def api_root():
    return {"message": "Court Score API. See /docs."}


# Resources are versioned under /v0
v0_router = APIRouter(prefix="/v0")
for module in (players, matches, leaderboards):
    v0_router.include_router(module.router)

api_router.include_router(v0_router)
app.include_router(api_router)
