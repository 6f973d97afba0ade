"""Registry service models.

Wire names are camelCase and declared as field aliases; Python attributes are
snake_case. Models accept either form when constructed from Python code.
"""

from typing import Any, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RegisteredService(BaseModel):
    """A service record as returned by the registry. Never mutated client-side."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ens_name: str = Field(default="", alias="ensName", description="ENS name of the service")
    ens_node: str = Field(default="", alias="ensNode", description="ENS namehash of the name")
    owner: str = Field(default="", description="Owner address")
    endpoint: str = Field(default="", description="Service endpoint URL")
    payment_scheme: str = Field(
        default="", alias="paymentScheme", description="Payment scheme (e.g. 'exact')"
    )
    network: str = Field(default="", description="CAIP-2 network (e.g. 'eip155:8453')")
    description: Optional[str] = Field(default=None, description="Free-form description")
    capabilities: List[str] = Field(default_factory=list, description="Capability tags")
    facilitator_url: Optional[str] = Field(
        default=None, alias="facilitatorUrl", description="Payment facilitator URL"
    )
    active: bool = Field(default=False, description="Whether the service is active")
    created_at: str = Field(default="", alias="createdAt", description="ISO-8601 creation time")
    updated_at: str = Field(default="", alias="updatedAt", description="ISO-8601 update time")

    @field_validator(
        "ens_name", "ens_node", "owner", "endpoint", "payment_scheme", "network",
        "capabilities", "active", "created_at", "updated_at",
        mode="before",
    )
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _default_if_null(cls, value, info)


class ENSResolution(BaseModel):
    """A normalized ENS name paired with the service it resolved to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ens_name: str = Field(..., alias="ensName", description="Normalized ENS name")
    service: RegisteredService


class ServiceRegistrationRequest(BaseModel):
    """Input for registering a new service.

    Required fields default to empty strings so that incomplete requests can be
    built and then rejected by client-side validation with a clear field name.
    """

    model_config = ConfigDict(populate_by_name=True)

    ens_name: str = Field(default="", alias="ensName")
    owner: str = ""
    endpoint: str = ""
    payment_scheme: str = Field(default="", alias="paymentScheme")
    network: str = ""

    # Optional; omitted from the request body when None
    description: Optional[str] = None
    capabilities: Optional[List[str]] = None
    facilitator_url: Optional[str] = Field(default=None, alias="facilitatorUrl")


class ServiceListFilters(BaseModel):
    """Optional constraints for listing services.

    ``active`` is tri-state: None means "no filter", which is distinct from False.
    """

    model_config = ConfigDict(populate_by_name=True)

    network: Optional[str] = None
    payment_scheme: Optional[str] = Field(default=None, alias="paymentScheme")
    owner: Optional[str] = None
    active: Optional[bool] = None


class ServiceListResponse(BaseModel):
    """A page of services plus the server-side total."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: List[RegisteredService] = Field(default_factory=list)
    total: int = Field(default=0, description="Total matches (may exceed len(items))")

    @field_validator("items", "total", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _default_if_null(cls, value, info)


def _default_if_null(model: Type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    """Replace a wire ``null`` with the field's default value."""
    if value is None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value
