from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from notebook_api.core.models.base import AppBaseModel


class ErrorResponse(AppBaseModel):
    """Body returned for every handled error."""

    message: str
    details: str | list | dict | None = None
    status_code: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
