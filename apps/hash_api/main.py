"""hash-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from credential_hasher.application.dto.hashing_models import ErrorResponse
from credential_hasher.application.services.credential_service import CredentialService
from credential_hasher.config.settings import Settings, load_settings
from credential_hasher.domain.hash_parameters import HashParameters
from credential_hasher.infrastructure.http.hashing_router import build_hashing_router
from credential_hasher.infrastructure.logging import configure_logging
from credential_hasher.infrastructure.security.password_hasher import Argon2PasswordHasher

logger = logging.getLogger(__name__)


def build_hash_parameters(settings: Settings) -> HashParameters:
    """Build the immutable parameter set used for every new hash."""

    return HashParameters(
        memory_cost_kib=settings.hash_memory_cost_kib,
        time_cost=settings.hash_time_cost,
        parallelism=settings.hash_parallelism,
        hash_length=settings.hash_length,
        salt_length=settings.hash_salt_length,
        max_memory_cost_kib=settings.hash_max_memory_cost_kib,
        max_time_cost=settings.hash_max_time_cost,
        max_parallelism=settings.hash_max_parallelism,
    )


def build_credential_service(settings: Settings) -> CredentialService:
    """Build credential service with an Argon2 hasher from configured costs."""

    parameters = build_hash_parameters(settings)
    logger.info(
        "hash_parameters_loaded m=%s t=%s p=%s hash_len=%s salt_len=%s",
        parameters.memory_cost_kib,
        parameters.time_cost,
        parameters.parallelism,
        parameters.hash_length,
        parameters.salt_length,
    )
    return CredentialService(
        password_hasher=Argon2PasswordHasher(parameters),
        decoy_password=settings.decoy_password,
    )


def create_app(*, credential_service: CredentialService | None = None) -> FastAPI:
    """Create FastAPI app exposing the hashing endpoints."""

    if credential_service is None:
        settings = load_settings()
        configure_logging(level=settings.log_level)
        credential_service = build_credential_service(settings)

    app = FastAPI()
    app.include_router(build_hashing_router(credential_service=credential_service))

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info(
            "hash_api_invalid_request path=%s errors=%s",
            request.url.path,
            len(exc.errors()),
        )
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="invalid_request").model_dump(),
        )

    @app.exception_handler(405)
    async def method_not_allowed_handler(request: Request, exc: Exception) -> JSONResponse:
        _ = request, exc
        return JSONResponse(status_code=404, content={"detail": "Not Found"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def run_asgi_server(*, host: str, port: int) -> None:
    """Run hash-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.hash_api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run hash-api runtime process."""

    settings = load_settings()
    run_asgi_server(host=settings.hash_api_host, port=settings.hash_api_port)


if __name__ == "__main__":
    main()
