"""Filters over the extracted update text.

The text is the message text (or caption), the callback query data, or
the inline query string. See ``tgfilters.extract.extract_update_text``.
"""

from __future__ import annotations

import logging
import re

from tgfilters.extract import extract_update_text
from tgfilters.kernel import Filter, Update, new_filter

logger = logging.getLogger(__name__)


def text(value: str) -> Filter:
    """Match updates whose text equals ``value`` exactly."""

    def _check(update: Update) -> bool:
        return extract_update_text(update) == value

    return new_filter(_check, f"text({value!r})")


def texts(*values: str) -> Filter:
    """Match updates whose text equals any of ``values``."""
    accepted = frozenset(values)

    def _check(update: Update) -> bool:
        return extract_update_text(update) in accepted

    return new_filter(_check, f"texts({', '.join(map(repr, values))})")


def with_prefix(prefix: str) -> Filter:
    """Match updates whose text starts with ``prefix``."""

    def _check(update: Update) -> bool:
        return extract_update_text(update).startswith(prefix)

    return new_filter(_check, f"with_prefix({prefix!r})")


def with_suffix(suffix: str) -> Filter:
    """Match updates whose text ends with ``suffix``."""

    def _check(update: Update) -> bool:
        return extract_update_text(update).endswith(suffix)

    return new_filter(_check, f"with_suffix({suffix!r})")


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> Filter:
    """Match updates whose text contains a match for ``pattern``.

    Args:
        pattern: Compiled pattern, or a pattern string compiled once here
        flags: ``re`` flags, only used when ``pattern`` is a string

    Raises:
        re.error: If ``pattern`` is a string that does not compile
    """
    if isinstance(pattern, str):
        compiled = re.compile(pattern, flags)
        logger.debug("compiled regex filter pattern %r", pattern)
    else:
        compiled = pattern

    def _check(update: Update) -> bool:
        return compiled.search(extract_update_text(update)) is not None

    return new_filter(_check, f"regex({compiled.pattern!r})")
