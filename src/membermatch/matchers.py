"""Factory functions for method matchers.

Usage:
    from membermatch import matchers as m

    getters = m.is_public() & m.name_starts_with("get") & m.takes_arguments()
    hooks = m.declared_in(Plugin).and_(m.not_(m.is_static()))

    if getters.matches(description):
        ...

Every function returns an immutable matcher supporting and_/or_ (and the
&, |, ~ operators). Order cheap checks first: combinators skip the right
operand once the left one decides.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from membermatch.core.description import Modifier
from membermatch.core.matcher import (
    Constant,
    DeclaringTypeMatcher,
    DefaultFinalizeMatcher,
    ExceptionMatcher,
    Flag,
    FlagMatcher,
    IdentityMatcher,
    Junction,
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

if TYPE_CHECKING:
    from membermatch.core.description import MethodDescriptor


def declared_in(declaring_type: type) -> DeclaringTypeMatcher:
    """Members declared in declaring_type, or overriding a method it declares.

    An override is a method with the same name and exactly the same parameter
    types as one declared directly in declaring_type.
    """
    return DeclaringTypeMatcher(declaring_type)


# Name


def named(name: str) -> NameMatcher:
    """Members whose name equals name exactly (case-sensitive)."""
    return NameMatcher(name, MatchMode.EQUALS_FULLY)


def named_ignore_case(name: str) -> NameMatcher:
    return NameMatcher(name, MatchMode.EQUALS_FULLY_IGNORE_CASE)


def name_starts_with(prefix: str) -> NameMatcher:
    return NameMatcher(prefix, MatchMode.STARTS_WITH)


def name_starts_with_ignore_case(prefix: str) -> NameMatcher:
    return NameMatcher(prefix, MatchMode.STARTS_WITH_IGNORE_CASE)


def name_ends_with(suffix: str) -> NameMatcher:
    return NameMatcher(suffix, MatchMode.ENDS_WITH)


def name_ends_with_ignore_case(suffix: str) -> NameMatcher:
    return NameMatcher(suffix, MatchMode.ENDS_WITH_IGNORE_CASE)


def name_contains(text: str) -> NameMatcher:
    return NameMatcher(text, MatchMode.CONTAINS)


def name_contains_ignore_case(text: str) -> NameMatcher:
    return NameMatcher(text, MatchMode.CONTAINS_IGNORE_CASE)


def matches(regex: str) -> NameMatcher:
    """Members whose whole name matches regex.

    Raises:
        re.error: If regex is not a valid regular expression.
    """
    return NameMatcher(regex, MatchMode.MATCHES)


# Modifiers


def is_public() -> ModifierMatcher:
    return ModifierMatcher(Modifier.PUBLIC)


def is_protected() -> ModifierMatcher:
    return ModifierMatcher(Modifier.PROTECTED)


def is_private() -> ModifierMatcher:
    return ModifierMatcher(Modifier.PRIVATE)


def is_package_private() -> Negation:
    """Members with none of the public, protected and private bits set."""
    return not_(is_public().or_(is_protected()).or_(is_private()))


def is_final() -> ModifierMatcher:
    return ModifierMatcher(Modifier.FINAL)


def is_static() -> ModifierMatcher:
    return ModifierMatcher(Modifier.STATIC)


def is_synchronized() -> ModifierMatcher:
    return ModifierMatcher(Modifier.SYNCHRONIZED)


def is_native() -> ModifierMatcher:
    return ModifierMatcher(Modifier.NATIVE)


def is_strict() -> ModifierMatcher:
    return ModifierMatcher(Modifier.STRICT)


# Flags


def is_var_args() -> FlagMatcher:
    return FlagMatcher(Flag.VAR_ARGS)


def is_synthetic() -> FlagMatcher:
    return FlagMatcher(Flag.SYNTHETIC)


def is_bridge() -> FlagMatcher:
    return FlagMatcher(Flag.BRIDGE)


def is_constructor() -> FlagMatcher:
    return FlagMatcher(Flag.CONSTRUCTOR)


def is_method() -> Negation:
    """Members that are not constructors."""
    return not_(is_constructor())


# Types


def returns(return_type: Any) -> ReturnTypeMatcher:
    """Members returning exactly return_type. Subtypes do not match."""
    return ReturnTypeMatcher(return_type)


def takes_arguments(*parameter_types: Any) -> ParameterTypesMatcher:
    """Members whose parameter types are exactly parameter_types, in order.

    With no arguments, matches members taking no parameters.
    """
    return ParameterTypesMatcher(parameter_types)


def can_throw(exception_type: type[BaseException]) -> ExceptionMatcher:
    """Members declaring exception_type or one of its base classes."""
    return ExceptionMatcher(exception_type)


# Identity and location


def is_(handle: object) -> IdentityMatcher:
    """The member described from exactly this function, or this class's constructor.

    Bound methods (e.g. a classmethod read off its class) are unwrapped to
    their function.
    """
    if inspect.ismethod(handle):
        handle = handle.__func__
    return IdentityMatcher(handle)


def is_defined_in_package(package_name: str) -> PackageMatcher:
    return PackageMatcher(package_name)


def is_default_finalize() -> DefaultFinalizeMatcher:
    return DefaultFinalizeMatcher()


# Junction


def not_(matcher: Matcher | Junction) -> Negation:
    return Negation(matcher)  # type: ignore[arg-type]


def any_() -> Constant:
    """Matches every member."""
    return Constant(True)


def none() -> Constant:
    """Matches no member."""
    return Constant(False)


def satisfies(predicate: Callable[[MethodDescriptor], bool]) -> PredicateMatcher:
    """Members for which predicate returns true.

    predicate must be free of side effects for the matcher to stay safe to
    share and reuse.
    """
    return PredicateMatcher(predicate)
