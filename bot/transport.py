# bot/transport.py
"""Chat transport: the two outbound calls the relay needs, on top of aiogram's Bot."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Protocol, TypeVar

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError, TelegramForbiddenError

from .errors import ChatUnreachable, SendFailed

T = TypeVar("T")


class ChatTransport(Protocol):
    async def send_text(self, chat_id: int, text: str) -> None:
        ...

    async def send_image(self, chat_id: int, url: str) -> None:
        ...


class AiogramTransport:
    """Sends through an aiogram Bot; every call is bounded by ``send_timeout`` seconds.

    Errors are mapped to SendFailed, or ChatUnreachable when Telegram answers 403.
    No retries here: a failed send is reported to the caller once.
    """

    def __init__(self, bot: Bot, send_timeout: float = 30.0) -> None:
        self._bot = bot
        self._send_timeout = send_timeout

    async def send_text(self, chat_id: int, text: str) -> None:
        await self._guarded(chat_id, "text", self._bot.send_message(chat_id, text))

    async def send_image(self, chat_id: int, url: str) -> None:
        # Telegram сам скачивает картинку по URL
        await self._guarded(chat_id, f"image {url}", self._bot.send_photo(chat_id, photo=url))

    async def _guarded(self, chat_id: int, what: str, call: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(call, timeout=self._send_timeout)
        except asyncio.TimeoutError as e:
            raise SendFailed(chat_id, what, f"timed out after {self._send_timeout}s", e) from e
        except TelegramForbiddenError as e:
            raise ChatUnreachable(chat_id, what, str(e), e) from e
        except TelegramAPIError as e:
            raise SendFailed(chat_id, what, str(e), e) from e
