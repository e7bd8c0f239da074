"""Matcher evaluation.

A single function dispatches over the closed set of matcher variants.
Combinators recurse depth-first and short-circuit: the right operand of a
conjunction is skipped once the left fails, the right operand of a
disjunction once the left succeeds.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from membermatch.core.description import MethodDescriptor
from membermatch.core.matcher.models import (
    Constant,
    Conjunction,
    DeclaringTypeMatcher,
    DefaultFinalizeMatcher,
    Disjunction,
    ExceptionMatcher,
    Flag,
    FlagMatcher,
    IdentityMatcher,
    Matcher,
    MatchMode,
    ModifierMatcher,
    NameMatcher,
    Negation,
    PackageMatcher,
    ParameterTypesMatcher,
    PredicateMatcher,
    ReturnTypeMatcher,
)

FINALIZE_METHOD_NAME = "finalize"

# (expected, actual) -> verdict, one per mode
_COMPARATORS: dict[MatchMode, Callable[[str, str], bool]] = {
    MatchMode.EQUALS_FULLY: lambda expected, actual: actual == expected,
    MatchMode.EQUALS_FULLY_IGNORE_CASE: lambda expected, actual: (
        actual.lower() == expected.lower()
    ),
    MatchMode.STARTS_WITH: lambda expected, actual: actual.startswith(expected),
    MatchMode.STARTS_WITH_IGNORE_CASE: lambda expected, actual: (
        actual.lower().startswith(expected.lower())
    ),
    MatchMode.ENDS_WITH: lambda expected, actual: actual.endswith(expected),
    MatchMode.ENDS_WITH_IGNORE_CASE: lambda expected, actual: (
        actual.lower().endswith(expected.lower())
    ),
    MatchMode.CONTAINS: lambda expected, actual: expected in actual,
    MatchMode.CONTAINS_IGNORE_CASE: lambda expected, actual: (
        expected.lower() in actual.lower()
    ),
    MatchMode.MATCHES: lambda expected, actual: re.fullmatch(expected, actual) is not None,
}


def compare_name(mode: MatchMode, expected: str, actual: str) -> bool:
    """Compare a member name against expected text.

    Args:
        mode: Comparison to apply.
        expected: Text (or regular expression for MATCHES) given to the matcher.
        actual: Name of the member under test.

    Returns:
        True if actual satisfies expected under mode.
    """
    return _COMPARATORS[mode](expected, actual)


def has_flag(flag: Flag, description: MethodDescriptor) -> bool:
    if flag is Flag.VAR_ARGS:
        return description.is_var_args
    if flag is Flag.SYNTHETIC:
        return description.is_synthetic
    if flag is Flag.BRIDGE:
        return description.is_bridge
    return description.is_constructor


def is_declared_in(declaring_type: type, description: MethodDescriptor) -> bool:
    """Check if description is declared in declaring_type or overrides one of its methods.

    The override check looks for a method declared directly in declaring_type
    with the same name and exactly the same parameter types. Finding none is
    an ordinary non-match.
    Constructors are never inherited, so they only match their own type.
    """
    if description.declaring_type is declaring_type:
        return True
    if description.is_constructor:
        return False

    from membermatch.adapters.reflection import find_declared_method

    found = find_declared_method(
        declaring_type, description.name, tuple(description.parameter_types)
    )
    return found is not None


def can_throw(exception_type: type, description: MethodDescriptor) -> bool:
    """Check if any declared exception type is exception_type or one of its bases."""
    return any(issubclass(exception_type, declared) for declared in description.exception_types)


def is_defined_in_package(package_name: str, description: MethodDescriptor) -> bool:
    from membermatch.adapters.reflection import package_of

    return package_of(description.declaring_type) == package_name


def is_default_finalize(description: MethodDescriptor) -> bool:
    return (
        description.declaring_type is object
        and description.name == FINALIZE_METHOD_NAME
        and len(description.parameter_types) == 0
    )


def evaluate(matcher: Matcher, description: MethodDescriptor) -> bool:
    """Evaluate a matcher tree against one description.

    Pure: no state is kept between calls and the description is only read.

    Args:
        matcher: Root of the matcher tree.
        description: Method or constructor to test. Must not be None.

    Returns:
        True if the description satisfies the tree, False otherwise.

    Raises:
        TypeError: If matcher is not a known matcher variant.
    """
    if isinstance(matcher, Conjunction):
        return evaluate(matcher.left, description) and evaluate(matcher.right, description)
    if isinstance(matcher, Disjunction):
        return evaluate(matcher.left, description) or evaluate(matcher.right, description)
    if isinstance(matcher, Negation):
        return not evaluate(matcher.matcher, description)
    if isinstance(matcher, Constant):
        return matcher.value
    if isinstance(matcher, NameMatcher):
        if matcher.pattern is not None:
            return matcher.pattern.fullmatch(description.name) is not None
        return compare_name(matcher.mode, matcher.text, description.name)
    if isinstance(matcher, ModifierMatcher):
        return (description.modifiers & matcher.mask) != 0
    if isinstance(matcher, FlagMatcher):
        return has_flag(matcher.flag, description)
    if isinstance(matcher, DeclaringTypeMatcher):
        return is_declared_in(matcher.declaring_type, description)
    if isinstance(matcher, ReturnTypeMatcher):
        return description.return_type == matcher.return_type
    if isinstance(matcher, ParameterTypesMatcher):
        return tuple(description.parameter_types) == matcher.parameter_types
    if isinstance(matcher, ExceptionMatcher):
        return can_throw(matcher.exception_type, description)
    if isinstance(matcher, IdentityMatcher):
        return description.represents(matcher.handle)
    if isinstance(matcher, PackageMatcher):
        return is_defined_in_package(matcher.package_name, description)
    if isinstance(matcher, DefaultFinalizeMatcher):
        return is_default_finalize(description)
    if isinstance(matcher, PredicateMatcher):
        return bool(matcher.predicate(description))
    raise TypeError(f"Not a matcher: {matcher!r}")
