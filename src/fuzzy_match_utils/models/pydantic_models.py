"""Pydantic models for data validation."""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ValueT = TypeVar("ValueT")


class Option(BaseModel, Generic[ValueT]):
    """A selectable option: the text shown to the user and an opaque identifier."""

    label: str = Field(..., description="Text shown to the user")
    value: ValueT = Field(..., description="Opaque identifier for the option")

    model_config = ConfigDict(frozen=True)


class SubstitutionConfig(BaseModel):
    """Ordered pattern -> replacement rules applied after text cleanup.

    Keys are regular expression sources, values are literal replacements.
    Insertion order is preserved and significant.
    """

    substitutions: dict[str, str] = Field(
        default_factory=dict, description="Pattern -> literal replacement, applied in order"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("substitutions")
    @classmethod
    def check_patterns(cls, value: dict[str, str]) -> dict[str, str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid substitution pattern {pattern!r}: {e}") from e
        return value
