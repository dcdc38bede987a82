from __future__ import annotations

import logging

from tgfilters import (
    Filter,
    Update,
    blacklist,
    command,
    or_,
    regex,
    texts,
    whitelist,
)

logging.basicConfig(level=logging.DEBUG)

ADMINS = (1001, 1002)
BANNED = (666,)

ROUTES: list[tuple[str, Filter]] = [
    ("admin_stats", command("stats", "mybot") & whitelist(*ADMINS)),
    ("start", command("start", "mybot") & blacklist(*BANNED)),
    ("order", regex(r"#\d+")),
    ("answer", or_(texts("yes", "no"), texts("y", "n"))),
]


def route(update: Update) -> str | None:
    for name, f in ROUTES:
        if f.check(update):
            return name
    return None


if __name__ == "__main__":
    samples = [
        {"update_id": 1, "message": {"message_id": 1, "from": {"id": 1001}, "text": "/stats@mybot"}},
        {"update_id": 2, "message": {"message_id": 2, "from": {"id": 666}, "text": "/start"}},
        {"update_id": 3, "message": {"message_id": 3, "from": {"id": 7}, "text": "/Start hi"}},
        {"update_id": 4, "callback_query": {"id": "q", "from": {"id": 7}, "data": "yes"}},
        {"update_id": 5, "inline_query": {"id": "i", "from": {"id": 7}, "query": "#42"}},
    ]
    for raw in samples:
        update = Update.model_validate(raw)
        print(update.update_id, route(update))
