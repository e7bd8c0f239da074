"""Matcher models: the closed set of predicate variants and their junction.

Usage:
    # Leaf matchers compose into expression trees
    getter = NameMatcher("get", MatchMode.STARTS_WITH) & ModifierMatcher(Modifier.PUBLIC)
    not_static = ~ModifierMatcher(Modifier.STATIC)

    getter.matches(description)

Every variant is a frozen dataclass. Trees are immutable once built, so one
tree can be evaluated for any number of descriptions, from any number of
threads, without locking.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from membermatch.core.description import MethodDescriptor


class MatchMode(Enum):
    """How a name matcher compares its text against a member name."""

    EQUALS_FULLY = auto()
    EQUALS_FULLY_IGNORE_CASE = auto()
    STARTS_WITH = auto()
    STARTS_WITH_IGNORE_CASE = auto()
    ENDS_WITH = auto()
    ENDS_WITH_IGNORE_CASE = auto()
    CONTAINS = auto()
    CONTAINS_IGNORE_CASE = auto()
    MATCHES = auto()  # regular expression, whole name


class Flag(Enum):
    """Boolean properties of a description."""

    VAR_ARGS = auto()
    SYNTHETIC = auto()
    BRIDGE = auto()
    CONSTRUCTOR = auto()


class Junction:
    """Composition surface shared by every matcher variant.

    Immutable - and_/or_ return new matchers, the operands are untouched.
    """

    __slots__ = ()

    def matches(self, description: MethodDescriptor) -> bool:
        """Evaluate this matcher against one description.

        Args:
            description: Method or constructor to test. Must not be None.

        Returns:
            True if the description satisfies this matcher.
        """
        return evaluate(self, description)  # type: ignore[arg-type]

    def __call__(self, description: MethodDescriptor) -> bool:
        """Allow a matcher to be passed wherever a predicate callable is expected."""
        return self.matches(description)

    def and_(self, other: Matcher) -> Conjunction:
        """Match only if this matcher and then other both match.

        other is not evaluated when this matcher already fails.
        """
        return Conjunction(self, other)  # type: ignore[arg-type]

    def or_(self, other: Matcher) -> Disjunction:
        """Match if this matcher or else other matches.

        other is not evaluated when this matcher already succeeds.
        """
        return Disjunction(self, other)  # type: ignore[arg-type]

    def __and__(self, other: Matcher) -> Conjunction:
        return self.and_(other)

    def __or__(self, other: Matcher) -> Disjunction:
        return self.or_(other)

    def __invert__(self) -> Negation:
        return Negation(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Constant(Junction):
    """Fixed verdict, ignoring the description."""

    value: bool


@dataclass(frozen=True, slots=True)
class Conjunction(Junction):
    left: Matcher
    right: Matcher


@dataclass(frozen=True, slots=True)
class Disjunction(Junction):
    left: Matcher
    right: Matcher


@dataclass(frozen=True, slots=True)
class Negation(Junction):
    matcher: Matcher


@dataclass(frozen=True, slots=True)
class NameMatcher(Junction):
    """Compare the member name against text using a match mode."""

    text: str
    mode: MatchMode = MatchMode.EQUALS_FULLY
    pattern: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.mode is MatchMode.MATCHES:
            object.__setattr__(self, "pattern", re.compile(self.text))


@dataclass(frozen=True, slots=True)
class ModifierMatcher(Junction):
    """Match if any bit of mask is set in the member's modifiers."""

    mask: int


@dataclass(frozen=True, slots=True)
class FlagMatcher(Junction):
    flag: Flag


@dataclass(frozen=True, slots=True)
class DeclaringTypeMatcher(Junction):
    """Match members declared in a type, or overriding one of its methods."""

    declaring_type: type


@dataclass(frozen=True, slots=True)
class ReturnTypeMatcher(Junction):
    return_type: Any


@dataclass(frozen=True, slots=True)
class ParameterTypesMatcher(Junction):
    parameter_types: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class ExceptionMatcher(Junction):
    """Match members with a declared exception type able to catch exception_type."""

    exception_type: type


@dataclass(frozen=True, slots=True)
class IdentityMatcher(Junction):
    """Match the description of one specific function or class."""

    handle: object


@dataclass(frozen=True, slots=True)
class PackageMatcher(Junction):
    package_name: str


@dataclass(frozen=True, slots=True)
class DefaultFinalizeMatcher(Junction):
    """Match only the no-argument finalize declared on object itself."""

    pass


@dataclass(frozen=True, slots=True)
class PredicateMatcher(Junction):
    """Delegate to a plain callable. The callable must be pure."""

    predicate: Callable[[MethodDescriptor], bool]


Matcher = (
    Constant
    | Conjunction
    | Disjunction
    | Negation
    | NameMatcher
    | ModifierMatcher
    | FlagMatcher
    | DeclaringTypeMatcher
    | ReturnTypeMatcher
    | ParameterTypesMatcher
    | ExceptionMatcher
    | IdentityMatcher
    | PackageMatcher
    | DefaultFinalizeMatcher
    | PredicateMatcher
)

# Evaluation dispatches over the variants above
from membermatch.core.matcher.operations import evaluate  # noqa: E402
