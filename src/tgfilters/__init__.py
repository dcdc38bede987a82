from .combinators import and_, false, not_, or_, true
from .extract import extract_sender_id, extract_update, extract_update_text
from .filters import (
    CommandConfig,
    blacklist,
    command,
    commands,
    regex,
    text,
    texts,
    whitelist,
    with_prefix,
    with_suffix,
)
from .kernel import (
    CallbackQuery,
    Filter,
    FilterPort,
    InlineQuery,
    Message,
    Update,
    User,
    new_filter,
)

__all__ = [
    # Core
    "Filter",
    "FilterPort",
    "new_filter",
    # Update model
    "Update",
    "Message",
    "CallbackQuery",
    "InlineQuery",
    "User",
    # Extraction
    "extract_update",
    "extract_update_text",
    "extract_sender_id",
    # Combinators
    "true",
    "false",
    "and_",
    "or_",
    "not_",
    # Filters
    "text",
    "texts",
    "with_prefix",
    "with_suffix",
    "regex",
    "whitelist",
    "blacklist",
    "command",
    "commands",
    "CommandConfig",
]
