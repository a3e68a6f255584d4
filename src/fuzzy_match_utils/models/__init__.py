"""Data models for option filtering."""

from fuzzy_match_utils.models.pydantic_models import Option, SubstitutionConfig

__all__ = [
    "Option",
    "SubstitutionConfig",
]
