"""Ports - the capability combinators and dispatchers depend on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tgfilters.kernel.update import Update


@runtime_checkable
class FilterPort(Protocol):
    """Anything that can decide whether an update should be routed."""

    def check(self, update: Update) -> bool:
        ...
