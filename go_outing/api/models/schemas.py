from __future__ import annotations

import math
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# ---------- OutingRequest ----------


class OutingRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    location: str = Field(min_length=1, max_length=200)
    date: str = Field(min_length=1, max_length=100)
    budget: Union[int, float]
    mode: str = Field(min_length=1, max_length=200)
    type: str = Field(
        min_length=1,
        max_length=200,
        validation_alias=AliasChoices("type", "outingType"),
    )

    @field_validator("budget", mode="before")
    @classmethod
    def reject_boolean_budget(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("budget must be a number")
        return value

    @field_validator("budget")
    @classmethod
    def budget_must_be_positive(cls, value: Union[int, float]) -> Union[int, float]:
        if not math.isfinite(value) or value <= 0:
            raise ValueError("budget must be a positive number")
        return value


# ---------- Suggestion ----------


class Suggestion(BaseModel):
    id: str
    title: str
    description: str
    estimatedCost: Union[int, float]
    image: str = ""
    locationDetails: str
    itinerary: List[str] = Field(default_factory=list)
    bestTime: str = ""
    costBreakdown: Optional[List[str]] = None
    tips: Optional[List[str]] = None


# ---------- Responses ----------


class SuggestionsResponse(BaseModel):
    # Items are passed through from the model reply without re-validation.
    suggestions: List[Any]


class PingResponse(BaseModel):
    ok: bool
    now: int
