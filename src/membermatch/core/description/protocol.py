"""Method descriptor protocol for swappable metadata sources.

Matchers only read from a descriptor. Anything exposing these accessors can
be matched: the bundled MethodDescription dataclass, a view over parsed class
files, or an adapter around another reflection library.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MethodDescriptor(Protocol):
    """Read-only view of one method or constructor."""

    @property
    def name(self) -> str:
        """Simple name of the member."""
        ...

    @property
    def declaring_type(self) -> type:
        """Type that physically declares the member."""
        ...

    @property
    def modifiers(self) -> int:
        """Modifier bit-set, see Modifier."""
        ...

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        """Parameter types in declaration order."""
        ...

    @property
    def return_type(self) -> Any: ...

    @property
    def exception_types(self) -> frozenset[type]:
        """Exception types the member declares it can raise."""
        ...

    @property
    def is_var_args(self) -> bool: ...

    @property
    def is_synthetic(self) -> bool: ...

    @property
    def is_bridge(self) -> bool: ...

    @property
    def is_constructor(self) -> bool: ...

    def represents(self, handle: object) -> bool:
        """Check if this descriptor stands for exactly the given function or class."""
        ...
