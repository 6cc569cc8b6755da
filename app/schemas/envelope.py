from typing import Any

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    fieldLabel: str | None = None
    message: str | None = None


class RecordResult(BaseModel):
    success: bool
    data: dict[str, Any] | None = None
    message: str | None = None
    errors: list[FieldError] = []


class RecordResponse(BaseModel):
    """Envelope returned by fetch calls; ``data`` is a row or a list of rows."""

    success: bool
    message: str | None = None
    data: list[dict[str, Any]] | dict[str, Any] | None = None


class BatchResponse(BaseModel):
    success: bool
    message: str | None = None
    results: list[RecordResult] | None = Field(default=None)
