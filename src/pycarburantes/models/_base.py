"""Base model for upstream API records.

Every listing model inherits from :class:`CarburantesBaseModel` which
provides:

* Frozen instances, so annotating a record means copying it.
* A ``model_validator(mode="before")`` that strips upstream placeholder
  values (``""``, blanks, NaN) so the field default is used.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Placeholder strings the upstream API uses for "not available".
_SENTINELS = frozenset({"", "NaN", "nan"})


class CarburantesBaseModel(BaseModel):
    """Base for upstream API models.

    Handles:
    * upstream placeholders (``""``, whitespace, NaN) → dropped so the
      field default is used instead
    * stashes the original API dict in ``raw``, unless the subclass sets
      ``_stash_raw`` to ``False`` because its adapter passes ``raw=`` itself
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API record."""

    _stash_raw: ClassVar[bool] = True

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_api_values(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        original = dict(values)
        cleaned = CarburantesBaseModel._clean_dict(original)
        # Keep an explicit raw= from the caller.
        if cls._stash_raw and "raw" not in values:
            cleaned["raw"] = original
        return cleaned
