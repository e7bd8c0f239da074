"""Configuration module using Pydantic Settings.

Provides typed configuration for the reflection adapter with environment
variable support.

Usage:
    from membermatch.config import ReflectionSettings

    settings = ReflectionSettings(include_inherited=True)
"""

from membermatch.config.settings import ReflectionSettings

__all__ = [
    "ReflectionSettings",
]
