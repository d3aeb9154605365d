"""Response models for the speech analytics API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Response returned when an upload could not be processed."""

    error: str
