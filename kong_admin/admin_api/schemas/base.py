"""Pydantic base schema utilities for Kong Admin API models.

Provides a common `BaseSchema` that fixes the extra-field policy for all DTOs
under `kong_admin.admin_api.models`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all Pydantic models in admin_api.

    - Ignores unknown fields returned by newer or older gateway versions
    - Enables populate_by_name so aliased fields accept their Python name too
    - Validates on assignment so mutated routes stay well-typed before sending
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )
