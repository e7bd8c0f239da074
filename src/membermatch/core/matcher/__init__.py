"""Matcher functionality: predicate variants, junction and evaluation."""

from membermatch.core.matcher.models import (
    Conjunction,
    Constant,
    DeclaringTypeMatcher,
    DefaultFinalizeMatcher,
    Disjunction,
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
from membermatch.core.matcher.operations import compare_name, evaluate

__all__ = [
    # Models
    "Matcher",
    "Junction",
    "MatchMode",
    "Flag",
    "Constant",
    "Conjunction",
    "Disjunction",
    "Negation",
    "NameMatcher",
    "ModifierMatcher",
    "FlagMatcher",
    "DeclaringTypeMatcher",
    "ReturnTypeMatcher",
    "ParameterTypesMatcher",
    "ExceptionMatcher",
    "IdentityMatcher",
    "PackageMatcher",
    "DefaultFinalizeMatcher",
    "PredicateMatcher",
    # Operations
    "evaluate",
    "compare_name",
]
