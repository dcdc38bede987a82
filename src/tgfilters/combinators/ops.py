"""Combinator primitives: true, false, and_, or_, not_."""

# The combinators form a boolean algebra over filters; see laws.py.

from __future__ import annotations

from collections.abc import Iterable

from tgfilters.kernel import Filter, FilterPort, Update, new_filter


def _require_filters(filters: Iterable[FilterPort]) -> tuple[FilterPort, ...]:
    captured = tuple(filters)
    for f in captured:
        if not isinstance(f, FilterPort):
            raise TypeError(f"expected a filter, got {type(f).__name__}")
    return captured


def _names(filters: tuple[FilterPort, ...]) -> str:
    return ", ".join(getattr(f, "name", type(f).__name__) for f in filters)


def true() -> Filter:
    """Filter that matches every update."""
    return new_filter(lambda update: True, "true()")


def false() -> Filter:
    """Filter that matches no update."""
    return new_filter(lambda update: False, "false()")


def and_(*filters: FilterPort) -> Filter:
    """Behave like ``and``: match only if every filter matches.

    Semantics:
        - Filters are checked left to right
        - Checking stops at the first filter that does not match
        - No filters at all matches everything

    Args:
        *filters: Filters to combine.

    Returns:
        Filter: A new filter over the same updates.
    """
    captured = _require_filters(filters)

    def _check(update: Update) -> bool:
        for f in captured:
            if not f.check(update):
                return False
        return True

    return new_filter(_check, f"and_({_names(captured)})")


def or_(*filters: FilterPort) -> Filter:
    """Behave like ``or``: match if at least one filter matches.

    Semantics:
        - Filters are checked left to right
        - Checking stops at the first filter that matches
        - No filters at all matches nothing

    Args:
        *filters: Filters to combine.

    Returns:
        Filter: A new filter over the same updates.
    """
    captured = _require_filters(filters)

    def _check(update: Update) -> bool:
        for f in captured:
            if f.check(update):
                return True
        return False

    return new_filter(_check, f"or_({_names(captured)})")


def not_(f: FilterPort) -> Filter:
    """Behave like ``not``: match exactly when ``f`` does not."""
    (inner,) = _require_filters((f,))

    def _check(update: Update) -> bool:
        return not inner.check(update)

    return new_filter(_check, f"not_({_names((inner,))})")
