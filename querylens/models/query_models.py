"""Pydantic models for the entities the analysis engine works with.

All of these are transient values: they are built fresh per call and never
shared between calls.
"""

import math
from decimal import Decimal
from numbers import Number
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


ParameterType = Literal["date", "number", "boolean", "text"]
SyntaxForm = Literal["colon", "dollar", "mustache"]
QuickAction = Literal["sample", "count", "stats"]


def _is_finite(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


# ============================================================================
# Placeholders
# ============================================================================

class Parameter(BaseModel):
    """A named placeholder found in query text."""

    name: str = Field(..., description="Placeholder identifier")
    type: ParameterType = Field(..., description="Type inferred from the name")
    format: SyntaxForm = Field(..., description="Syntax of the first occurrence")
    placeholder: str = Field(..., description="Literal placeholder text, e.g. ':id'")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "start_date",
                "type": "date",
                "format": "colon",
                "placeholder": ":start_date"
            }
        }
    )


# ============================================================================
# Substitution values
# ============================================================================

class SubstitutionValue(BaseModel):
    """A value for one placeholder, tagged with how it is rendered as SQL."""

    kind: Literal["null", "number", "boolean", "text"]
    value: Union[None, bool, int, float, Decimal, str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_value_matches_kind(self):
        """Reject values that do not belong to the declared kind."""
        kind, value = self.kind, self.value
        if kind == "null" and value is not None:
            raise ValueError("null values carry no payload")
        if kind == "boolean" and not isinstance(value, bool):
            raise ValueError("boolean values require True or False")
        if kind == "number" and (isinstance(value, bool) or not isinstance(value, (int, float, Decimal))):
            raise ValueError("number values require an int, float or Decimal")
        if kind == "number" and not _is_finite(value):
            raise ValueError("number values must be finite")
        if kind == "text" and not isinstance(value, str):
            raise ValueError("text values require a string")
        return self

    @classmethod
    def null(cls) -> "SubstitutionValue":
        return cls(kind="null")

    @classmethod
    def number(cls, value: Union[int, float, Decimal]) -> "SubstitutionValue":
        return cls(kind="number", value=value)

    @classmethod
    def boolean(cls, value: bool) -> "SubstitutionValue":
        return cls(kind="boolean", value=value)

    @classmethod
    def text(cls, value: str) -> "SubstitutionValue":
        return cls(kind="text", value=value)

    @classmethod
    def coerce(cls, raw: Any) -> "SubstitutionValue":
        """Tag a plain Python value.

        bool is checked before numbers since bool is a subclass of int.
        NaN and infinities have no SQL literal and become null. Anything
        that is not None, a bool or a real number becomes text.
        """
        if isinstance(raw, SubstitutionValue):
            return raw
        if raw is None:
            return cls.null()
        if isinstance(raw, bool):
            return cls.boolean(raw)
        if isinstance(raw, (int, float, Decimal)):
            return cls.number(raw) if _is_finite(raw) else cls.null()
        if isinstance(raw, Number) and not isinstance(raw, complex):
            return cls.number(float(raw)) if _is_finite(float(raw)) else cls.null()
        return cls.text(str(raw))


# ============================================================================
# Quick actions and saved queries
# ============================================================================

class QuickActionRequest(BaseModel):
    """Request for a canned exploration query against one table."""

    table_name: str = Field(..., min_length=1, description="Table to query, optionally schema-qualified")
    action: QuickAction = Field("sample", description="Kind of quick action")
    columns: List[str] = Field(default_factory=list, description="Column names used by 'stats'")


class SavedQueryRecord(BaseModel):
    """A saved query as stored by an external persistence layer.

    Only the text fields are interpreted; anything else is carried along.
    """

    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    query: Optional[str] = None
    sql: Optional[str] = None
    content: Optional[str] = None

    model_config = ConfigDict(extra="allow")
