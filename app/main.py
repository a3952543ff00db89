"""
FastAPI application entry point.
Registers CORS, request logging, the centralized error handlers and all routers.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.routers import roles, usuarios, vehiculos, ventas, citas, health
from app.database import create_tables
from app.config import settings
from app.exceptions import register_exception_handlers
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="API Venta de Autos",
    description="API para gestionar la venta de automóviles con usuarios, vehículos, roles, "
                "ventas y citas de prueba de manejo",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
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


# ── Error Handlers ───────────────────────────────────────────────────────────
register_exception_handlers(app)


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(roles.router,     prefix=settings.API_PREFIX, tags=["Roles"])
app.include_router(usuarios.router,  prefix=settings.API_PREFIX, tags=["Usuarios"])
app.include_router(vehiculos.router, prefix=settings.API_PREFIX, tags=["Vehículos"])
app.include_router(ventas.router,    prefix=settings.API_PREFIX, tags=["Ventas"])
app.include_router(citas.router,     prefix=settings.API_PREFIX, tags=["Citas de prueba de manejo"])
app.include_router(health.router,    prefix=settings.API_PREFIX, tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Dealership API starting up...")
    create_tables()
    logger.info("Database tables ready")
    logger.info(f"Listening on http://{settings.APP_HOST}:{settings.APP_PORT}")
    logger.info("API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Dealership API shutting down...")
