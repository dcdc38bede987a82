"""Primitive filters over update text, sender and commands."""

from tgfilters.filters.command import CommandConfig, command, commands
from tgfilters.filters.sender import blacklist, whitelist
from tgfilters.filters.text import regex, text, texts, with_prefix, with_suffix

__all__ = [
    # Text
    "text",
    "texts",
    "with_prefix",
    "with_suffix",
    "regex",
    # Sender
    "whitelist",
    "blacklist",
    # Commands
    "command",
    "commands",
    "CommandConfig",
]
