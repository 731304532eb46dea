from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)


class Policy(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    policy_number: str
    named_insured: str
    line_of_business: list[str] = []
    status: str
    effective_date: date | None = None
    expiration_date: date | None = None
    premium: Decimal | None = None
    MNPID: str | None = None
    MBU_handler: str | None = None
    producing_UW: str | None = None

    @field_serializer("premium")
    def serialize_premium(self, premium: Decimal | None) -> float | None:
        return float(premium) if premium is not None else None


def _str_or_none(v: Any) -> str | None:
    """Descriptor keys that are not strings are treated as missing."""
    return v if isinstance(v, str) else None


class FilterEntry(BaseModel):
    """One UI filter. Every key is optional; incomplete entries are ignored."""

    model_config = ConfigDict(extra="ignore")

    field: str | None = None
    action: str | None = Field(
        default=None, validation_alias=AliasChoices("filterAction", "action")
    )
    value: Any = Field(default=None, validation_alias=AliasChoices("filterValue", "value"))

    @field_validator("field", "action", mode="before")
    @classmethod
    def non_string_to_none(cls, v: Any) -> str | None:
        return _str_or_none(v)


class SortEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    field: str | None = Field(default=None, validation_alias=AliasChoices("colId", "field"))
    direction: str | None = Field(
        default=None, validation_alias=AliasChoices("sort", "direction")
    )

    @field_validator("field", "direction", mode="before")
    @classmethod
    def non_string_to_none(cls, v: Any) -> str | None:
        return _str_or_none(v)


class PolicySearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filter_entries: list[FilterEntry] | None = Field(default=None, alias="filterEntries")
    sort_entries: list[SortEntry] | None = Field(default=None, alias="sortEntries")
    offset: int = Field(default=0, ge=0, alias="from")
    size: int | None = Field(default=None, gt=0)

    @field_validator("filter_entries", "sort_entries", mode="before")
    @classmethod
    def drop_non_object_entries(cls, v: Any) -> list | None:
        """Keep only object entries; anything else in (or instead of) the list is ignored."""
        if not isinstance(v, list):
            return None
        return [entry for entry in v if isinstance(entry, (dict, BaseModel))]


class PolicySearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[Policy]
    total: int
    offset: int = Field(..., alias="from")
    size: int


class StatusCount(BaseModel):
    id: str
    count: int
    name: str


class LineOfBusinessStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    statuses: list[StatusCount]
    lines_of_business: list[str] = Field(..., alias="linesOfBusiness")
