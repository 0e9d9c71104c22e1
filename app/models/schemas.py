"""API request and response models."""
from typing import Any

from pydantic import BaseModel, Field

from app.core.results import ErrorCode


class TitleRequest(BaseModel):
    message: dict[str, Any] = Field(..., description="First chat message of the conversation, e.g. {role, content}")


class TitleResponse(BaseModel):
    title: str = Field(..., description="Generated conversation title")


class EnvelopeResponse(BaseModel):
    success: bool
    data: dict[str, Any] | None = None
    error: ErrorCode | None = None
