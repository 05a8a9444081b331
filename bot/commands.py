# bot/commands.py
"""Command classifier: raw message text -> Start | About | Query(text)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from aiogram.types import BotCommand

START = "/start"
ABOUT = "/about"


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class About:
    pass


@dataclass(frozen=True)
class Query:
    text: str


Command = Union[Start, About, Query]


def classify(text: str) -> Command:
    """Exact, case-insensitive match against /start and /about; everything else is a query.

    No argument parsing: "/start now" or "/unknown" are queries, passed on verbatim.
    """
    lowered = text.lower()
    if lowered == START:
        return Start()
    if lowered == ABOUT:
        return About()
    return Query(text)


# Меню команд в клиенте Telegram
BOT_COMMANDS: List[BotCommand] = [
    BotCommand(command=START.lstrip("/"), description="Запустить бота."),
    BotCommand(command=ABOUT.lstrip("/"), description="Что делает бот и как им пользоваться?"),
]
