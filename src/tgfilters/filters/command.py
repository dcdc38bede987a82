"""Bot command matching, e.g. ``/start`` or ``/start@mybot 42``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tgfilters.extract import extract_update
from tgfilters.kernel import Filter, Message, Update, new_filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandConfig:
    """Configuration for command filters.

    Attributes:
        case_sensitive: Compare the incoming command as sent. Configured
            commands are always lower-cased, so with this set ``/Start``
            never matches. By default the command part of the text (before
            the first space) is lower-cased first; arguments are untouched.
    """
    case_sensitive: bool = False


def command(name: str, bot_username: str, *, config: CommandConfig | None = None) -> Filter:
    """Match the ``/name`` command. Shorthand for ``commands("/", bot_username, name)``."""
    return commands("/", bot_username, name, config=config)


def commands(
    prefix: str,
    bot_username: str,
    *names: str,
    config: CommandConfig | None = None,
) -> Filter:
    """Match messages that invoke one of the given commands.

    A message matches when its text (or caption) is ``cmd`` or
    ``cmd@bot``, optionally followed by a space and arguments, where
    ``cmd`` is ``prefix + name`` lower-cased. Other update kinds never
    match.

    Args:
        prefix: Command prefix, usually "/"
        bot_username: Bot username, with or without the leading "@"
        *names: Command names without the prefix
        config: Matching options, defaults to CommandConfig()

    Returns:
        Filter over message updates

    Raises:
        ValueError: If prefix is empty, or the prefix, bot username or a
            name contains a space
    """
    config = config or CommandConfig()
    if not prefix:
        raise ValueError("command prefix must not be empty")
    # Only a space ends the command, so none of its parts may contain one.
    if " " in prefix:
        raise ValueError(f"command prefix must not contain spaces: {prefix!r}")
    if " " in bot_username:
        raise ValueError(f"bot username must not contain spaces: {bot_username!r}")
    for name in names:
        if " " in name:
            raise ValueError(f"command name must not contain spaces: {name!r}")

    # New tuple; the caller's names are left as they were.
    normalized = tuple((prefix + name).lower() for name in names)

    if not bot_username.startswith("@"):
        bot_username = "@" + bot_username
    if not config.case_sensitive:
        bot_username = bot_username.lower()

    accepted = frozenset(
        head for cmd in normalized for head in (cmd, cmd + bot_username)
    )
    logger.debug(
        "command filter for %s (bot %s, case_sensitive=%s)",
        ", ".join(normalized),
        bot_username,
        config.case_sensitive,
    )

    def _check(update: Update) -> bool:
        message = extract_update(update)
        if not isinstance(message, Message):
            return False
        raw = message.text or message.caption or ""
        head = raw.partition(" ")[0]
        if not config.case_sensitive:
            head = head.lower()
        return head in accepted

    return new_filter(_check, f"commands({', '.join(normalized)})")
