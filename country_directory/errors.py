"""
Erreurs du domaine / Domain errors.

Chaque erreur porte un type (``kind``) et un code HTTP ; elles sont converties
en reponse JSON a la frontiere de la requete.
Each error carries a kind and an HTTP status; they are converted to a JSON
response at the request boundary.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)


class CountryDirectoryError(Exception):
    """Erreur de base / Base error."""

    kind = "Error"
    status_code = 400

    def __init__(self, message: str, details: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.kind, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class NotFoundError(CountryDirectoryError):
    kind = "NotFound"
    status_code = 404


class ConflictError(CountryDirectoryError):
    kind = "Conflict"
    status_code = 409


class PayloadValidationError(CountryDirectoryError):
    kind = "ValidationError"
    status_code = 422


async def country_error_handler(request: Request, exc: CountryDirectoryError) -> JSONResponse:
    """Erreur du domaine -> JSON / Domain error -> JSON."""
    logger.info(
        "%s %s -> %s: %s",
        request.method, request.url.path, exc.kind, exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps invalide -> ValidationError / Invalid body -> ValidationError."""
    error = PayloadValidationError(
        "Invalid request payload",
        details=jsonable_encoder(exc.errors()),
    )
    logger.info("%s %s -> ValidationError", request.method, request.url.path)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Quota depasse -> 429 / Limit exceeded -> 429."""
    logger.warning("%s %s -> rate limited (%s)", request.method, request.url.path, exc.detail)
    response = JSONResponse(
        status_code=429,
        content={"error": "RateLimitExceeded", "message": f"Rate limit exceeded: {exc.detail}"},
    )
    limiter = getattr(request.app.state, "limiter", None)
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if limiter is not None and view_rate_limit is not None:
        response = limiter._inject_headers(response, view_rate_limit)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erreur inattendue -> 500 JSON / Unexpected error -> 500 JSON."""
    logger.error("%s %s -> unhandled error", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "InternalError", "message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Brancher les handlers d'erreurs / Wire the error handlers."""
    app.add_exception_handler(CountryDirectoryError, country_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
