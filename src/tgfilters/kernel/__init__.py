"""Kernel layer - update model and the Filter value."""

from tgfilters.kernel.filter import Filter, Predicate, new_filter
from tgfilters.kernel.ports import FilterPort
from tgfilters.kernel.update import (
    CallbackQuery,
    Chat,
    ChatJoinRequest,
    ChatMemberUpdated,
    ChosenInlineResult,
    InlineQuery,
    Message,
    Payload,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ShippingQuery,
    Update,
    User,
)

__all__ = [
    "Filter",
    "FilterPort",
    "Predicate",
    "new_filter",
    # Update model
    "Update",
    "Payload",
    "Message",
    "CallbackQuery",
    "InlineQuery",
    "ChosenInlineResult",
    "ShippingQuery",
    "PreCheckoutQuery",
    "Poll",
    "PollAnswer",
    "ChatMemberUpdated",
    "ChatJoinRequest",
    "Chat",
    "User",
]
