"""Error envelope returned by the registry API on non-2xx responses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Inner error object. Every field is optional on the wire."""

    code: Optional[str] = Field(None, description="Machine-readable error code")
    message: Optional[str] = Field(None, description="Human-readable message")
    details: Optional[Dict[str, Any]] = Field(None, description="Server-defined details")


class ErrorEnvelope(BaseModel):
    """``{"error": {...}}`` wrapper."""

    error: Optional[ErrorBody] = None
