"""External integration adapters.

Provides method descriptions built from live Python classes, so matchers can
be applied to real code.

Usage:
    from membermatch.adapters import describe_methods, select, throws

    for description in describe_methods(Repository):
        ...
"""

from membermatch.adapters.reflection import (
    describe_constructor,
    describe_method,
    describe_methods,
    find_declared_method,
    package_of,
    select,
    throws,
)

__all__ = [
    "describe_method",
    "describe_constructor",
    "describe_methods",
    "find_declared_method",
    "package_of",
    "select",
    "throws",
]
