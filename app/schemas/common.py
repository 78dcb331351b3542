from typing import Any

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)
    hint: str | None = None


class ErrorResponse(BaseModel):
    detail: ErrorPayload
