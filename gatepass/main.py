# gatepass/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, domain/global error handlers, and all routers.
"""

import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gatepass.config import settings
from gatepass.routers import auth, health, passes, tracking
from gatepass.utils.exceptions import GatePassError
from gatepass.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Campus Gate-Pass API",
    description="Student gate pass requests, moderator decisions, gate exit/entry and late tracking.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (frontend origins from settings) ────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Domain Error Handler ─────────────────────────────────────────────────────
@app.exception_handler(GatePassError)
async def gate_pass_error_handler(request: Request, exc: GatePassError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
# tracking goes first: /passes/late must win over /passes/{pass_id}
app.include_router(tracking.router, prefix="/api", tags=["Tracking"])
app.include_router(auth.router,     prefix="/api", tags=["Auth"])
app.include_router(passes.router,   prefix="/api", tags=["Passes"])
app.include_router(health.router,   prefix="/api", tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Gate-Pass backend starting up...")
    logger.info(f"Storage backend: {settings.STORAGE_BACKEND}")
    if settings.STRICT_TRANSITIONS:
        logger.info("Strict transitions enabled: re-decide / double exit / double entry are refused")
    logger.info(f"Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Gate-Pass backend shutting down...")
