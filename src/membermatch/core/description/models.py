"""Method description models.

Usage:
    description = MethodDescription(
        name="save",
        declaring_type=Repository,
        modifiers=Modifier.PUBLIC | Modifier.FINAL,
        parameter_types=(Record,),
        return_type=bool,
        exception_types=frozenset({IOError}),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any


class Modifier(IntFlag):
    """Member modifier bits. Values follow the JVM access flags."""

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SYNCHRONIZED = 0x0020
    NATIVE = 0x0100
    ABSTRACT = 0x0400
    STRICT = 0x0800


@dataclass(frozen=True, slots=True)
class MethodDescription:
    """Immutable metadata of a method or constructor.

    The handle is the live object the description was taken from: a function
    for methods, the class for constructors. Hand-built descriptions may leave
    it unset, in which case they represent nothing.
    """

    name: str
    declaring_type: type
    modifiers: int = 0
    parameter_types: tuple[Any, ...] = ()
    return_type: Any = None
    exception_types: frozenset[type] = frozenset()
    is_var_args: bool = False
    is_synthetic: bool = False
    is_bridge: bool = False
    is_constructor: bool = False
    handle: object | None = None

    def represents(self, handle: object) -> bool:
        """Check if this description was taken from exactly this function or class.

        Args:
            handle: Function (for methods) or class (for constructors).

        Returns:
            True if handle is the stored handle, False otherwise.
        """
        return self.handle is not None and self.handle is handle

    def __str__(self) -> str:
        params = ", ".join(getattr(t, "__name__", repr(t)) for t in self.parameter_types)
        return f"{self.declaring_type.__qualname__}.{self.name}({params})"
