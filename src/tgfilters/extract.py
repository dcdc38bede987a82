"""Text and sender extraction shared by the primitive filters.

None of these functions raise: an update without the requested data gives
an empty string or ``None``, which the filters treat as "no match".
"""

from __future__ import annotations

from tgfilters.kernel.update import (
    PAYLOAD_FIELDS,
    CallbackQuery,
    InlineQuery,
    Message,
    Payload,
    Update,
)


def extract_update(update: Update) -> Payload | None:
    """Return the populated payload of an update, or None if there is none."""
    for name in PAYLOAD_FIELDS:
        payload = getattr(update, name)
        if payload is not None:
            return payload
    return None


def extract_update_text(update: Update) -> str:
    """Return the text a filter should look at.

    - Message: text, falling back to caption
    - CallbackQuery: data
    - InlineQuery: query
    - anything else: empty string
    """
    match extract_update(update):
        case Message(text=text, caption=caption):
            return text or caption or ""
        case CallbackQuery(data=data):
            return data or ""
        case InlineQuery(query=query):
            return query
        case _:
            return ""


def extract_sender_id(update: Update) -> int | None:
    """Return the sender ID of a message or callback query."""
    match extract_update(update):
        case Message(from_=sender) if sender is not None:
            return sender.id
        case CallbackQuery(from_=sender):
            return sender.id
        case _:
            return None
