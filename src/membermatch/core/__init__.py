"""Core functionalities: immutable descriptions, matcher variants and evaluation.

Architecture Note:
    core/ contains pure, stateless functionality. Nothing here mutates a
    description or keeps state between evaluations. Building descriptions
    from live classes lives in adapters/; the declared_in and package
    matchers call into it at evaluation time.
"""

from membermatch.core.description import MethodDescription, MethodDescriptor, Modifier
from membermatch.core.matcher import (
    Conjunction,
    Constant,
    Disjunction,
    Flag,
    Junction,
    Matcher,
    MatchMode,
    Negation,
    evaluate,
)

__all__ = [
    # Description
    "MethodDescription",
    "MethodDescriptor",
    "Modifier",
    # Matcher
    "Matcher",
    "Junction",
    "MatchMode",
    "Flag",
    "Constant",
    "Conjunction",
    "Disjunction",
    "Negation",
    "evaluate",
]
