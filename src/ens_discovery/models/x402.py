"""x402 facilitator discovery models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class X402DiscoveryOptions(BaseModel):
    """Query options for listing resources published by an x402 facilitator."""

    model_config = ConfigDict(populate_by_name=True)

    facilitator_url: Optional[str] = Field(default=None, alias="facilitatorUrl")
    type: Optional[str] = Field(default=None, description="Resource type (server default: 'http')")
    limit: Optional[int] = None
    offset: Optional[int] = None


class X402DiscoveryResponse(BaseModel):
    """Resources discovered through a facilitator."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    facilitator_url: str = Field(..., alias="facilitatorUrl")
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = 0

    @model_validator(mode="before")
    @classmethod
    def _default_total(cls, data: Any) -> Any:
        if isinstance(data, dict) and not isinstance(data.get("total"), int):
            items = data.get("items")
            data = {**data, "total": len(items) if isinstance(items, list) else 0}
        return data
