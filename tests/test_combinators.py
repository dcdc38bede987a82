from dataclasses import FrozenInstanceError

import pytest

from tgfilters import Filter, FilterPort, and_, false, new_filter, not_, or_, text, true, with_prefix
from tgfilters.kernel import Update

from fakes import CountingFilter, callback_update, empty_update, inline_update, message_update

UPDATES = [
    message_update("hello"),
    message_update("/start 1"),
    message_update(caption="hello"),
    message_update(),
    callback_update("hello"),
    inline_update("/start"),
    empty_update(),
]

FILTERS = [
    true(),
    false(),
    text("hello"),
    with_prefix("/start"),
]


def test_constants():
    for update in UPDATES:
        assert true().check(update) is True
        assert false().check(update) is False


def test_empty_and_is_true():
    assert all(and_().check(u) for u in UPDATES)


def test_empty_or_is_false():
    assert not any(or_().check(u) for u in UPDATES)


@pytest.mark.parametrize("f", FILTERS)
def test_double_negation(f: Filter):
    g = not_(not_(f))
    for update in UPDATES:
        assert g.check(update) == f.check(update)


@pytest.mark.parametrize("a", FILTERS)
@pytest.mark.parametrize("b", FILTERS)
def test_de_morgan(a: Filter, b: Filter):
    lhs = and_(a, b)
    rhs = not_(or_(not_(a), not_(b)))
    for update in UPDATES:
        assert lhs.check(update) == rhs.check(update)


def test_and_short_circuits_on_first_false():
    first = CountingFilter(False)
    second = CountingFilter(True)

    assert and_(first, second).check(empty_update()) is False
    assert len(first.calls) == 1
    assert second.calls == []


def test_or_short_circuits_on_first_true():
    first = CountingFilter(True)
    second = CountingFilter(False)

    assert or_(first, second).check(empty_update()) is True
    assert len(first.calls) == 1
    assert second.calls == []


def test_not_checks_once():
    inner = CountingFilter(True)
    assert not_(inner).check(empty_update()) is False
    assert len(inner.calls) == 1


def test_operators():
    hello = text("hello")
    start = with_prefix("/start")

    assert (hello | start).check(message_update("/start 1"))
    assert not (hello & start).check(message_update("hello"))
    assert (~hello).check(message_update("bye"))


def test_nested_composition():
    f = and_(or_(text("a"), text("b")), not_(or_(false(), text("b"))))

    assert f.check(message_update("a"))
    assert not f.check(message_update("b"))
    assert not f.check(message_update("c"))


def test_rejects_non_filters():
    with pytest.raises(TypeError):
        and_(text("a"), "b")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        not_(None)  # type: ignore[arg-type]


def test_operators_defer_on_non_filters():
    hello = text("hello")

    assert hello.__and__("b") is NotImplemented  # type: ignore[operator]
    assert hello.__or__(None) is NotImplemented  # type: ignore[operator]
    with pytest.raises(TypeError):
        hello & "b"  # type: ignore[operator]
    with pytest.raises(TypeError):
        hello | 3  # type: ignore[operator]


def test_operators_accept_any_filter_port():
    counting = CountingFilter(True)

    assert isinstance(counting, FilterPort)
    assert (text("hello") | counting).check(message_update("bye"))
    assert len(counting.calls) == 1


def test_new_filter_wraps_predicate():
    def is_empty(update: Update) -> bool:
        return update.update_id == 5

    f = new_filter(is_empty)
    assert f.name == "is_empty"
    assert f.check(empty_update())
    assert not f.check(message_update("x"))


def test_new_filter_requires_callable():
    with pytest.raises(TypeError):
        new_filter("not a function")  # type: ignore[arg-type]


def test_filter_is_immutable():
    f = text("a")
    with pytest.raises(FrozenInstanceError):
        f.name = "b"  # type: ignore[misc]


def test_repr_names_the_tree():
    f = and_(text("a"), not_(with_prefix("/")))
    assert f.name == "and_(text('a'), not_(with_prefix('/')))"
