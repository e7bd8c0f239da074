"""Configuration settings using Pydantic Settings.

Usage:
    from membermatch.config import ReflectionSettings

    # Load from environment variables (MEMBERMATCH_*)
    settings = ReflectionSettings()

    # Or override with explicit values
    settings = ReflectionSettings(include_dunder=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for building method descriptions from live classes.

    Attributes:
        resolve_annotations: Resolve string annotations with typing.get_type_hints.
            When False, or when resolution fails, raw annotations are used.
        include_inherited: describe_methods also yields members inherited
            from base classes (the closest declaration wins, object excluded).
        include_dunder: describe_methods yields __dunder__ members.

    Environment Variables:
        MEMBERMATCH_RESOLVE_ANNOTATIONS
        MEMBERMATCH_INCLUDE_INHERITED
        MEMBERMATCH_INCLUDE_DUNDER
    """

    model_config = SettingsConfigDict(
        env_prefix="MEMBERMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    resolve_annotations: bool = True
    include_inherited: bool = False
    include_dunder: bool = True
