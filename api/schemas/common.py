from __future__ import annotations

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str

    model_config = {"extra": "allow"}


class ErrorResponse(BaseModel):
    error: ErrorDetail


class ValidationErrorEntry(BaseModel):
    kind: str
    height: int
    message: str
    stored_hash: str | None = None
    expected_prev: str | None = None
    actual_prev: str | None = None
