"""Combinators - boolean composition of filters."""

from tgfilters.combinators.ops import and_, false, not_, or_, true

__all__ = ["and_", "or_", "not_", "true", "false"]
