"""Resolved, immutable configuration for the transform pipeline."""

import re

from pydantic import BaseModel, ConfigDict, Field


class CleanpathConfig(BaseModel):
    """Enabled transforms and their resolved parameters.

    Built once per invocation by ``build_config``; assignment raises.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tilde_expand: bool = False
    tilde_unexpand: bool = False
    env_expand: bool = False
    env_unexpand: bool = False
    absolute: bool = False
    unabsolute: bool = False

    user: str = Field("", description="Configured target user token")
    resolved_home: str = Field("", description="Home directory for bare ~")
    resolved_user: str = Field("", description="User the home directory belongs to")

    env_order: tuple[str, ...] = Field((), description="Unexpand precedence")
    env_values: dict[str, str] = Field(default_factory=dict, description="Values captured at startup")
    env_allowed: frozenset[str] = Field(frozenset(), description="Names eligible for expansion")

    regex: re.Pattern[str] | None = None
    new_pattern: str = ""

    base_abs: str = Field("", description="Absolute, cleaned base directory")
    parent_limit: int = Field(0, ge=0)
    unlimited_up: bool = False
