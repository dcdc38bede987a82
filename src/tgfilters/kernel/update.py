"""Update model - the incoming events filters are evaluated against.

Only the fields the filters read are modelled. Unknown fields in a raw
Bot API payload are ignored, so ``Update.model_validate(raw)`` accepts
whatever the platform sends.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class User(_Frozen):
    """Sender of a message or query."""
    id: int
    is_bot: bool = False
    first_name: str = ""
    username: str | None = None


class Chat(_Frozen):
    id: int
    type: str = "private"


class Message(_Frozen):
    """Message, edited message, channel post or business message."""
    message_id: int
    from_: User | None = Field(default=None, alias="from")
    chat: Chat | None = None
    text: str | None = None
    caption: str | None = None


class CallbackQuery(_Frozen):
    id: str
    from_: User = Field(alias="from")
    data: str | None = None


class InlineQuery(_Frozen):
    id: str
    from_: User = Field(alias="from")
    query: str = ""


class ChosenInlineResult(_Frozen):
    result_id: str
    from_: User = Field(alias="from")
    query: str = ""


class ShippingQuery(_Frozen):
    id: str
    from_: User = Field(alias="from")
    invoice_payload: str = ""


class PreCheckoutQuery(_Frozen):
    id: str
    from_: User = Field(alias="from")
    invoice_payload: str = ""


class Poll(_Frozen):
    id: str
    question: str = ""


class PollAnswer(_Frozen):
    poll_id: str
    user: User | None = None


class ChatMemberUpdated(_Frozen):
    """Shared shape of my_chat_member and chat_member updates."""
    chat: Chat
    from_: User = Field(alias="from")


class ChatJoinRequest(_Frozen):
    chat: Chat
    from_: User = Field(alias="from")


Payload = (
    Message
    | InlineQuery
    | ChosenInlineResult
    | CallbackQuery
    | ShippingQuery
    | PreCheckoutQuery
    | Poll
    | PollAnswer
    | ChatMemberUpdated
    | ChatJoinRequest
)


class Update(_Frozen):
    """One incoming event. At most one payload field is populated.

    Field order below is the order ``extract_update`` probes them in.
    """
    update_id: int = 0
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None
    edited_channel_post: Message | None = None
    business_message: Message | None = None
    edited_business_message: Message | None = None
    inline_query: InlineQuery | None = None
    chosen_inline_result: ChosenInlineResult | None = None
    callback_query: CallbackQuery | None = None
    shipping_query: ShippingQuery | None = None
    pre_checkout_query: PreCheckoutQuery | None = None
    poll: Poll | None = None
    poll_answer: PollAnswer | None = None
    my_chat_member: ChatMemberUpdated | None = None
    chat_member: ChatMemberUpdated | None = None
    chat_join_request: ChatJoinRequest | None = None


PAYLOAD_FIELDS: tuple[str, ...] = tuple(
    name for name in Update.model_fields if name != "update_id"
)
