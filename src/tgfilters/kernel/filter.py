"""Filter value - a named, reusable predicate over an Update."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from tgfilters.kernel.ports import FilterPort
from tgfilters.kernel.update import Update

Predicate = Callable[[Update], bool]


@dataclass(frozen=True)
class Filter:
    """Filter wrapping a pure predicate.

    Everything the predicate needs is captured when the filter is built, so
    one instance can be checked from any number of threads at once.

    Filters compose with ``&``, ``|`` and ``~`` as well as through the
    functions in ``tgfilters.combinators``.
    """

    _check: Predicate = field(repr=False)
    name: str = "filter"

    def check(self, update: Update) -> bool:
        return self._check(update)

    def __and__(self, other: FilterPort) -> Filter:
        if not isinstance(other, FilterPort):
            return NotImplemented
        from tgfilters.combinators.ops import and_
        return and_(self, other)

    def __or__(self, other: FilterPort) -> Filter:
        if not isinstance(other, FilterPort):
            return NotImplemented
        from tgfilters.combinators.ops import or_
        return or_(self, other)

    def __invert__(self) -> Filter:
        from tgfilters.combinators.ops import not_
        return not_(self)


def new_filter(predicate: Predicate, name: str | None = None) -> Filter:
    """Create a Filter from a predicate.

    Args:
        predicate: Function of an Update returning whether it matches
        name: Label shown in repr and debug logs, defaults to the
            predicate's ``__name__``

    Returns:
        Filter that delegates ``check`` to the predicate
    """
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
    return Filter(predicate, name or getattr(predicate, "__name__", "filter"))
