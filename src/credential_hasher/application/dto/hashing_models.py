"""Pydantic models for the hashing HTTP contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class HashPasswordRequest(StrictModel):
    """Body of `POST /hash_password`."""

    password: str


class HashPasswordResponse(StrictModel):
    password_hash: str


class VerifyPasswordRequest(StrictModel):
    """Body of `POST /verify_password`."""

    password: str
    hash: str


class VerifyPasswordResponse(StrictModel):
    ok: bool


class ErrorResponse(StrictModel):
    """Error body carrying only the stable code."""

    error: str
