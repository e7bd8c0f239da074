"""Tests for the matcher junction and evaluation.

Critical Invariants:
- and_/or_ short-circuit left to right
- Negation and constants behave as boolean algebra
- Trees are immutable and safe to share between threads
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from membermatch import (
    MethodDescription,
    Modifier,
    any_,
    evaluate,
    is_private,
    is_protected,
    is_public,
    is_static,
    name_contains,
    named,
    none,
    not_,
    satisfies,
    takes_arguments,
)
from membermatch.core.matcher import Conjunction, Disjunction, Negation


class Alpha:
    pass


class Beta:
    pass


@st.composite
def description_strategy(draw):
    """Generate random hand-built descriptions."""
    return MethodDescription(
        name=draw(st.sampled_from(["get", "getValue", "set", "run", "finalize", "x"])),
        declaring_type=draw(st.sampled_from([Alpha, Beta, object])),
        modifiers=draw(st.integers(min_value=0, max_value=0xFFF)),
        parameter_types=tuple(draw(st.lists(st.sampled_from([int, str, Alpha]), max_size=3))),
        return_type=draw(st.sampled_from([None, int, str])),
        is_var_args=draw(st.booleans()),
    )


leaf_matchers = [
    any_(),
    none(),
    named("get"),
    name_contains("Val"),
    is_public(),
    is_static(),
    takes_arguments(),
    takes_arguments(int),
]


matcher_strategy = st.recursive(
    st.sampled_from(leaf_matchers),
    lambda children: st.one_of(
        st.tuples(children, children).map(lambda pair: pair[0].and_(pair[1])),
        st.tuples(children, children).map(lambda pair: pair[0].or_(pair[1])),
        children.map(not_),
    ),
    max_leaves=8,
)


def recording(result):
    """Matcher returning result and recording every description it is asked about."""
    calls = []

    def predicate(description):
        calls.append(description)
        return result

    return satisfies(predicate), calls


# Constants


@given(d=description_strategy())
def test_any_matches_everything(d):
    """PROPERTY: any_() is true for every description."""
    assert any_().matches(d)


@given(d=description_strategy())
def test_none_matches_nothing(d):
    """PROPERTY: none() is false for every description."""
    assert not none().matches(d)


# Negation


@given(m=matcher_strategy, d=description_strategy())
def test_negation_inverts(m, d):
    """PROPERTY: not_(m) is the logical negation of m."""
    assert not_(m).matches(d) == (not m.matches(d))


@given(m=matcher_strategy, d=description_strategy())
def test_double_negation_is_identity(m, d):
    """PROPERTY: not_(not_(m)) behaves like m."""
    assert not_(not_(m)).matches(d) == m.matches(d)


def test_invert_operator_builds_negation():
    m = named("run")
    assert ~m == Negation(m)
    assert not_(m) == ~m


# Junction


@given(a=matcher_strategy, b=matcher_strategy, d=description_strategy())
def test_junction_agrees_with_boolean_operators(a, b, d):
    """PROPERTY: and_/or_ compute the same verdicts as Python's and/or."""
    assert a.and_(b).matches(d) == (a.matches(d) and b.matches(d))
    assert a.or_(b).matches(d) == (a.matches(d) or b.matches(d))


@given(a=matcher_strategy, b=matcher_strategy, d=description_strategy())
def test_de_morgan(a, b, d):
    """PROPERTY: not (a and b) == (not a) or (not b)."""
    assert not_(a.and_(b)).matches(d) == not_(a).or_(not_(b)).matches(d)


def test_operators_build_same_tree_as_methods():
    a, b = is_public(), named("run")
    assert (a & b) == a.and_(b) == Conjunction(a, b)
    assert (a | b) == a.or_(b) == Disjunction(a, b)


def test_public_or_private(make_description):
    """isPublic().or(isPrivate()) accepts public and private, rejects protected."""
    m = is_public().or_(is_private())

    assert m.matches(make_description(modifiers=Modifier.PUBLIC))
    assert m.matches(make_description(modifiers=Modifier.PRIVATE))
    assert not m.matches(make_description(modifiers=Modifier.PROTECTED))


def test_protected_and_static(make_description):
    m = is_protected().and_(is_static())

    assert m.matches(make_description(modifiers=Modifier.PROTECTED | Modifier.STATIC))
    assert not m.matches(make_description(modifiers=Modifier.PROTECTED))
    assert not m.matches(make_description(modifiers=Modifier.STATIC))


# Short-circuit - load-bearing for callers ordering cheap checks first


def test_and_skips_right_when_left_fails(description):
    """CRITICAL: X.and_(Y) never evaluates Y when X is false."""
    right, calls = recording(True)

    assert not none().and_(right).matches(description)
    assert calls == [], "right operand must not be evaluated"


def test_and_evaluates_right_when_left_holds(description):
    right, calls = recording(False)

    assert not any_().and_(right).matches(description)
    assert calls == [description]


def test_or_skips_right_when_left_holds(description):
    """CRITICAL: X.or_(Y) never evaluates Y when X is true."""
    right, calls = recording(False)

    assert any_().or_(right).matches(description)
    assert calls == [], "right operand must not be evaluated"


def test_or_evaluates_right_when_left_fails(description):
    right, calls = recording(True)

    assert none().or_(right).matches(description)
    assert calls == [description]


def test_left_operand_evaluated_first(description):
    """Evaluation order is left before right."""
    order = []
    left = satisfies(lambda d: order.append("left") or True)
    right = satisfies(lambda d: order.append("right") or True)

    assert left.and_(right).matches(description)
    assert order == ["left", "right"]


def test_nested_short_circuit(description):
    """A failing guard skips a whole nested subtree."""
    inner, calls = recording(True)
    m = named("nope").and_(inner.or_(inner).and_(inner))

    assert not m.matches(description)
    assert calls == []


# Referential transparency and sharing


def test_evaluation_is_repeatable(description):
    m = is_public().and_(named("save")).and_(not_(is_static()))

    assert m.matches(description)
    assert m.matches(description)


def test_matchers_are_immutable():
    m = named("save")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.text = "load"  # type: ignore[misc]


def test_matchers_are_hashable_values():
    """Equal trees compare and hash equal, so they can key caches owned by callers."""
    a = is_public().and_(named("save"))
    b = is_public().and_(named("save"))

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_matcher_is_callable_predicate(make_description):
    """Matchers can be used directly with filter()."""
    descriptions = [make_description(name="save"), make_description(name="load")]

    assert list(filter(named("load"), descriptions)) == [descriptions[1]]


def test_shared_tree_across_threads(make_description):
    """One tree evaluated from many threads gives the same verdicts as sequential use."""
    m = is_public().and_(name_contains("e")).or_(is_static())
    descriptions = [
        make_description(name=name, modifiers=modifiers)
        for name in ["save", "load", "evict", "run"]
        for modifiers in [Modifier.PUBLIC, Modifier.PRIVATE, Modifier.STATIC]
    ] * 25

    expected = [m.matches(d) for d in descriptions]
    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(m.matches, descriptions))

    assert actual == expected


def test_evaluate_rejects_non_matcher(description):
    with pytest.raises(TypeError, match="Not a matcher"):
        evaluate("save", description)  # type: ignore[arg-type]


def test_matches_delegates_to_evaluate(make_description):
    """Junction.matches and evaluate() share one dispatcher and agree on every variant."""
    from membermatch.core.matcher import models

    assert models.evaluate is evaluate
    m = named("save").and_(not_(is_static())).or_(none())
    for d in [make_description(name="save"), make_description(name="load")]:
        assert m.matches(d) is evaluate(m, d)
