"""membermatch: composable matchers for selecting methods and constructors.

Usage:
    from membermatch import describe_methods, is_public, name_starts_with, takes_arguments

    getters = is_public() & name_starts_with("get") & takes_arguments()

    for description in describe_methods(Account):
        if getters.matches(description):
            ...
"""

__version__ = "0.1.0"

# Core primitives
from membermatch.core import (
    Junction,
    Matcher,
    MatchMode,
    MethodDescription,
    MethodDescriptor,
    Modifier,
    evaluate,
)

# Reflection adapter
from membermatch.adapters import (
    describe_constructor,
    describe_method,
    describe_methods,
    find_declared_method,
    package_of,
    select,
    throws,
)

# Configuration
from membermatch.config import ReflectionSettings

# Factory functions
from membermatch.matchers import (
    any_,
    can_throw,
    declared_in,
    is_,
    is_bridge,
    is_constructor,
    is_default_finalize,
    is_defined_in_package,
    is_final,
    is_method,
    is_native,
    is_package_private,
    is_private,
    is_protected,
    is_public,
    is_static,
    is_strict,
    is_synchronized,
    is_synthetic,
    is_var_args,
    matches,
    name_contains,
    name_contains_ignore_case,
    name_ends_with,
    name_ends_with_ignore_case,
    name_starts_with,
    name_starts_with_ignore_case,
    named,
    named_ignore_case,
    none,
    not_,
    returns,
    satisfies,
    takes_arguments,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "MethodDescription",
    "MethodDescriptor",
    "Modifier",
    "Matcher",
    "Junction",
    "MatchMode",
    "evaluate",
    # Factory
    "declared_in",
    "named",
    "named_ignore_case",
    "name_starts_with",
    "name_starts_with_ignore_case",
    "name_ends_with",
    "name_ends_with_ignore_case",
    "name_contains",
    "name_contains_ignore_case",
    "matches",
    "is_public",
    "is_protected",
    "is_private",
    "is_package_private",
    "is_final",
    "is_static",
    "is_synchronized",
    "is_native",
    "is_strict",
    "is_var_args",
    "is_synthetic",
    "is_bridge",
    "is_constructor",
    "is_method",
    "returns",
    "takes_arguments",
    "can_throw",
    "is_",
    "is_defined_in_package",
    "is_default_finalize",
    "not_",
    "any_",
    "none",
    "satisfies",
    # Reflection
    "describe_method",
    "describe_constructor",
    "describe_methods",
    "find_declared_method",
    "package_of",
    "select",
    "throws",
    # Config
    "ReflectionSettings",
]
