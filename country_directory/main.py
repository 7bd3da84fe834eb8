"""
Point d'entree FastAPI / FastAPI entry point.
Country Directory - annuaire CRUD des pays / CRUD country directory.
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import BaseHTTPMiddleware

from country_directory.api import api_router
from country_directory.config import settings
from country_directory.database import init_db
from country_directory.errors import register_exception_handlers
from country_directory.logging_config import request_id_ctx, setup_logging
from country_directory.rate_limit import limiter
from country_directory.repositories import InMemoryCountryRepository

setup_logging(settings.LOG_LEVEL, json_logs=settings.use_json_logs)
logger = logging.getLogger("country_directory")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialisation et fermeture / Startup and shutdown."""
    if settings.STORAGE_BACKEND == "sql":
        # Creer les tables au demarrage / Create tables on startup
        await init_db()
    else:
        app.state.country_store = InMemoryCountryRepository()
    logger.info(
        "%s %s started (storage=%s)",
        settings.APP_NAME, settings.APP_VERSION, settings.STORAGE_BACKEND,
    )
    yield
    logger.info("%s stopped", settings.APP_NAME)


# Desactiver Swagger en production / Disable Swagger in production
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Annuaire des pays / Country directory",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# Erreurs du domaine / Domain errors
register_exception_handlers(app)

# Rate limiting
app.state.limiter = limiter

# CORS durci / Hardened CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Requested-With", "X-Request-ID"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Ajoute les headers de securite / Add security headers."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Ajoute un X-Request-ID unique a chaque requete / Add unique X-Request-ID to each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        token = request_id_ctx.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)


# Routes API
app.include_router(api_router)

# Metriques Prometheus / Prometheus metrics
if settings.METRICS_ENABLED:
    Instrumentator(excluded_handlers=["/metrics", "/livez", "/readyz"]).instrument(app).expose(
        app, endpoint="/metrics", include_in_schema=False
    )
