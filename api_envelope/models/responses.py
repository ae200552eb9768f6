"""Generic API response envelope model.

Every API response is wrapped in this envelope:
{ isSuccess: bool, message: str, data: T | null, validationErrors?: {field: [msg]} }

``validationErrors`` is only emitted for validation failures; on every other
response the key is left out of the JSON object entirely.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginatedPayload(BaseModel, Generic[T]):
    """``data`` shape for list endpoints. ``page`` is 1-indexed."""

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)


class Envelope(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_success: bool = Field(alias="isSuccess")
    message: str
    data: T | None = None
    validation_errors: dict[str, list[str]] | None = Field(
        default=None, alias="validationErrors"
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, dropping ``validationErrors`` when unset."""
        exclude = {"validation_errors"} if self.validation_errors is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
