"""Sender allow and deny lists."""

from __future__ import annotations

from tgfilters.combinators.ops import not_
from tgfilters.extract import extract_sender_id
from tgfilters.kernel import Filter, Update, new_filter


def whitelist(*ids: int) -> Filter:
    """Match messages and callback queries sent by one of ``ids``.

    Updates without a resolvable sender never match, not even an empty
    whitelist.
    """
    allowed = frozenset(ids)

    def _check(update: Update) -> bool:
        sender_id = extract_sender_id(update)
        if sender_id is None:
            return False
        return sender_id in allowed

    return new_filter(_check, f"whitelist({', '.join(map(str, ids))})")


def blacklist(*ids: int) -> Filter:
    """Match everything ``whitelist(*ids)`` does not.

    Updates without a resolvable sender pass the blacklist.
    """
    return not_(whitelist(*ids))
