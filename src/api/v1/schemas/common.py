"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    error_code: str
    message: str
    details: Any | None = None
