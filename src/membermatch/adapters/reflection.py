"""Reflection adapter: method descriptions from live Python classes.

Python has no modifier keywords or throws clauses, so they are derived:

- Access follows naming: ``__x__`` and plain names are public, ``_x`` is
  protected, name-mangled ``__x`` is private.
- ``staticmethod`` is STATIC, ``typing.final`` is FINAL,
  ``abc.abstractmethod`` is ABSTRACT and C-implemented routines are NATIVE.
- Declared exceptions come from the ``throws`` decorator.
- Code generated at runtime (dataclass methods, ``exec``) is synthetic.

Usage:
    class Repository:
        @throws(IOError)
        def save(self, record: Record) -> bool: ...

    description = describe_method(Repository, "save")
    public_savers = select(named("save") & is_public(), Repository)
"""

from __future__ import annotations

import inspect
import logging
import sys
import typing
from collections.abc import Callable, Iterable, Iterator
from functools import cache
from typing import TYPE_CHECKING, Any, TypeVar

from membermatch.config import ReflectionSettings
from membermatch.core.description.models import MethodDescription, Modifier

if TYPE_CHECKING:
    from membermatch.core.matcher.models import Matcher

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

CONSTRUCTOR_NAME = "__init__"
_THROWS_ATTRIBUTE = "__throws__"
_NOT_METHODS = frozenset({"__init__", "__new__", "__init_subclass__", "__class_getitem__"})
_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def throws(*exception_types: type[BaseException]) -> Callable[[F], F]:
    """Declare the exception types a function can raise.

    Apply directly to the function, below staticmethod/classmethod.
    """

    def decorate(func: F) -> F:
        setattr(func, _THROWS_ATTRIBUTE, frozenset(exception_types))
        return func

    return decorate


@cache
def _default_settings() -> ReflectionSettings:
    return ReflectionSettings()


@cache
def _lookup_settings() -> tuple[ReflectionSettings, ReflectionSettings]:
    """Resolved and raw annotation settings, so either form of a signature is found."""
    defaults = _default_settings()
    return (
        defaults.model_copy(update={"resolve_annotations": True}),
        defaults.model_copy(update={"resolve_annotations": False}),
    )


def package_of(tp: type) -> str:
    """Get the package of the module defining a type.

    Args:
        tp: Type to look up.

    Returns:
        Dotted package name, "" for top-level modules and builtins.
    """
    module_name = getattr(tp, "__module__", None) or ""
    module = sys.modules.get(module_name)
    package = getattr(module, "__package__", None)
    if package is not None:
        return package
    return module_name.rpartition(".")[0]


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _access_modifier(owner: type, name: str) -> Modifier:
    if _is_dunder(name):
        return Modifier.PUBLIC
    if name.startswith(f"_{owner.__name__.lstrip('_')}__"):
        return Modifier.PRIVATE
    if name.startswith("_"):
        return Modifier.PROTECTED
    return Modifier.PUBLIC


def _unwrap(raw: object) -> tuple[Any, Modifier] | None:
    if isinstance(raw, staticmethod):
        return raw.__func__, Modifier.STATIC
    if isinstance(raw, classmethod):
        return raw.__func__, Modifier(0)
    if inspect.isroutine(raw):
        return raw, Modifier(0)
    return None


def _annotations(func: Any, settings: ReflectionSettings) -> dict[str, Any]:
    if settings.resolve_annotations:
        try:
            return typing.get_type_hints(func)
        except Exception as e:  # any unresolvable forward reference
            logger.debug("Falling back to raw annotations of %r: %s", func, e)
    try:
        return dict(inspect.get_annotations(func))
    except Exception as e:
        logger.debug("No usable annotations on %r: %s", func, e)
        return {}


def _signature(
    func: Any, skip_first: bool, settings: ReflectionSettings
) -> tuple[tuple[Any, ...], Any, bool]:
    """Read parameter types, return type and varargs flag of a function.

    Args:
        func: Function or builtin routine.
        skip_first: Drop the leading self/cls parameter.
        settings: Annotation resolution settings.

    Returns:
        (parameter_types, return_type, is_var_args). Unannotated types are Any.
        *args and **kwargs are not part of parameter_types.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        logger.debug("No signature for %r, assuming no parameters: %s", func, e)
        return (), Any, False

    hints = _annotations(func, settings)
    parameters = list(signature.parameters.values())
    if skip_first and parameters and parameters[0].kind in _POSITIONAL:
        parameters = parameters[1:]

    parameter_types = tuple(
        hints.get(p.name, Any)
        for p in parameters
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )
    is_var_args = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters)
    return parameter_types, hints.get("return", Any), is_var_args


def _is_synthetic(func: Any) -> bool:
    code = getattr(func, "__code__", None)
    return code is not None and code.co_filename.startswith("<")


def describe_method(
    owner: type, name: str, settings: ReflectionSettings | None = None
) -> MethodDescription | None:
    """Describe a method declared directly in owner.

    Inherited members are not found; look them up on the declaring base.

    Args:
        owner: Class whose namespace holds the member.
        name: Attribute name as stored in the class (mangled for private members).
        settings: Reflection settings, defaults from the environment.

    Returns:
        MethodDescription if owner declares a routine under name, None otherwise.
    """
    if settings is None:
        settings = _default_settings()
    unwrapped = _unwrap(vars(owner).get(name))
    if unwrapped is None:
        return None
    func, modifiers = unwrapped

    parameter_types, return_type, is_var_args = _signature(
        func, skip_first=not modifiers & Modifier.STATIC, settings=settings
    )
    modifiers |= _access_modifier(owner, name)
    if getattr(func, "__final__", False):
        modifiers |= Modifier.FINAL
    if getattr(func, "__isabstractmethod__", False):
        modifiers |= Modifier.ABSTRACT
    if not inspect.isfunction(func):
        modifiers |= Modifier.NATIVE

    return MethodDescription(
        name=name,
        declaring_type=owner,
        modifiers=modifiers,
        parameter_types=parameter_types,
        return_type=return_type,
        exception_types=frozenset(getattr(func, _THROWS_ATTRIBUTE, ())),
        is_var_args=is_var_args,
        is_synthetic=_is_synthetic(func),
        handle=func,
    )


def describe_constructor(
    cls: type, settings: ReflectionSettings | None = None
) -> MethodDescription:
    """Describe the constructor of cls.

    The constructor is always declared by cls itself, even when __init__ is
    inherited. A class without any __init__ gets a no-argument constructor.
    The class is the constructor's handle.
    """
    if settings is None:
        settings = _default_settings()
    init = cls.__init__  # type: ignore[misc]
    if init is object.__init__:
        parameter_types: tuple[Any, ...] = ()
        is_var_args = False
    else:
        parameter_types, _, is_var_args = _signature(init, skip_first=True, settings=settings)

    return MethodDescription(
        name=CONSTRUCTOR_NAME,
        declaring_type=cls,
        modifiers=Modifier.PUBLIC,
        parameter_types=parameter_types,
        return_type=None,
        exception_types=frozenset(getattr(init, _THROWS_ATTRIBUTE, ())),
        is_var_args=is_var_args,
        is_synthetic=_is_synthetic(init),
        is_constructor=True,
        handle=cls,
    )


def describe_methods(
    cls: type, settings: ReflectionSettings | None = None
) -> Iterator[MethodDescription]:
    """Yield descriptions of the methods of cls, constructors excluded.

    Args:
        cls: Class to inspect.
        settings: Reflection settings, defaults from the environment.

    Yields:
        One description per method name, in declaration order. With
        include_inherited, the declaration closest to cls wins.
    """
    if settings is None:
        settings = _default_settings()
    owners: Iterable[type] = (
        [c for c in cls.__mro__ if c is not object] if settings.include_inherited else [cls]
    )
    seen: set[str] = set()
    for owner in owners:
        for name in vars(owner):
            if name in seen or name in _NOT_METHODS:
                continue
            seen.add(name)
            if not settings.include_dunder and _is_dunder(name):
                continue
            description = describe_method(owner, name, settings)
            if description is not None:
                yield description


def find_declared_method(
    owner: type, name: str, parameter_types: tuple[Any, ...]
) -> MethodDescription | None:
    """Look up a method owner declares with exactly this name and parameter types.

    Args:
        owner: Class to search (its own namespace only).
        name: Method name.
        parameter_types: Exact parameter type sequence, self excluded.
            Compared against both resolved and raw annotations, so
            descriptions built with either setting find their overrides.

    Returns:
        The matching description, or None if owner declares no such method.
    """
    parameter_types = tuple(parameter_types)
    for settings in _lookup_settings():
        description = describe_method(owner, name, settings)
        if description is None:
            return None
        if description.parameter_types == parameter_types:
            return description
    return None


def select(
    matcher: Matcher, cls: type, settings: ReflectionSettings | None = None
) -> list[MethodDescription]:
    """Describe the constructor and methods of cls and keep those matching.

    Args:
        matcher: Matcher tree to apply.
        cls: Class to inspect.
        settings: Reflection settings, defaults from the environment.

    Returns:
        Matching descriptions, constructor first.
    """
    candidates = [describe_constructor(cls, settings), *describe_methods(cls, settings)]
    selected = [d for d in candidates if matcher.matches(d)]
    logger.debug("Selected %d of %d members of %s", len(selected), len(candidates), cls.__qualname__)
    return selected
