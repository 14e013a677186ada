"""FastAPI router for password hashing endpoints."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from credential_hasher.application.dto.hashing_models import (
    ErrorResponse,
    HashPasswordRequest,
    HashPasswordResponse,
    VerifyPasswordRequest,
    VerifyPasswordResponse,
)
from credential_hasher.application.services.credential_service import CredentialService
from credential_hasher.domain.errors import HashError, http_status_for

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def hash_error_response(exc: HashError) -> JSONResponse:
    """Render one hash error as `{"error": code}` with its boundary status."""

    return JSONResponse(
        status_code=http_status_for(exc.severity),
        content=ErrorResponse(error=exc.code).model_dump(),
    )


def build_hashing_router(*, credential_service: CredentialService) -> APIRouter:
    """Build router exposing hash and verify endpoints."""

    router = APIRouter(tags=["hashing"])

    @router.post(
        "/hash_password",
        response_model=HashPasswordResponse,
        responses=_ERROR_RESPONSES,
    )
    async def hash_password(payload: HashPasswordRequest) -> HashPasswordResponse | JSONResponse:
        try:
            password_hash = await credential_service.hash_password(payload.password)
        except HashError as exc:
            return hash_error_response(exc)
        return HashPasswordResponse(password_hash=password_hash)

    @router.post(
        "/verify_password",
        response_model=VerifyPasswordResponse,
        responses=_ERROR_RESPONSES,
    )
    async def verify_password(
        payload: VerifyPasswordRequest,
    ) -> VerifyPasswordResponse | JSONResponse:
        try:
            ok = await credential_service.verify_password(
                password=payload.password,
                password_hash=payload.hash,
            )
        except HashError as exc:
            return hash_error_response(exc)
        return VerifyPasswordResponse(ok=ok)

    return router
