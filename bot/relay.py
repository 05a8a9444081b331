# bot/relay.py
"""
Update relay: one inbound message -> exactly one outbound action.

- no text            -> "text only" hint
- /start, /about     -> static reply
- anything else      -> Flickr search -> photos, or "not found" / "search failed"

All failures end here: they are logged and turned into user messages,
never propagated to the polling loop.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from aiogram.types import Message

from photo_search import Failed, Found, PhotoResult

from .commands import About, Query, Start, classify
from .errors import ChatUnreachable, SendFailed
from .transport import ChatTransport

logger = logging.getLogger(__name__)

DEFAULT_RESULT_COUNT = 5
DEFAULT_MAX_CONCURRENCY = 32

# ─────────────────────────────────────────────────────────────
# Тексты
# ─────────────────────────────────────────────────────────────

START_MESSAGE = "Привет, я бот по поиску картинок. Введите ваш запрос."

ABOUT_MESSAGE = (
    "Данный бот возвращает до {count} картинок по запросу пользователя.\n"
    "Чтобы получить картинки, введите текстовый запрос."
)

TEXT_ONLY_MESSAGE = (
    "Данный бот принимает только текстовые сообщения.\n"
    "Введите ваш запрос правильно."
)

NOT_FOUND_MESSAGE = "Изображений не найдено."

SEARCH_FAILED_MESSAGE = "Не получилось выполнить поиск. Попробуйте ещё раз чуть позже 🙏"


class PhotoSearcher(Protocol):
    async def search(self, query: str, count: int) -> PhotoResult:
        ...


@dataclass(frozen=True)
class InboundEvent:
    chat_id: int
    text: Optional[str] = None

    @classmethod
    def from_message(cls, msg: Message) -> "InboundEvent":
        return cls(chat_id=msg.chat.id, text=msg.text)


@dataclass
class DispatchOutcome:
    """What a single dispatch did; kind is one of empty/start/about/found/not_found/failed/error."""

    kind: str
    attempted: int = 0
    delivered: int = 0


class UpdateRelay:
    """Maps inbound events to outbound sends.

    Holds no per-chat state; the transport and search client are shared and
    only read. A semaphore caps how many events are processed at once.
    """

    def __init__(
        self,
        transport: ChatTransport,
        search_client: PhotoSearcher,
        *,
        result_count: int = DEFAULT_RESULT_COUNT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        if result_count < 1:
            raise ValueError(f"result_count must be positive, got {result_count}")
        self._transport = transport
        self._search = search_client
        self._result_count = result_count
        self._slots = asyncio.Semaphore(max_concurrency)

    @property
    def about_message(self) -> str:
        return ABOUT_MESSAGE.format(count=self._result_count)

    async def dispatch(self, event: InboundEvent) -> DispatchOutcome:
        async with self._slots:
            try:
                return await self._dispatch(event)
            except Exception:
                logger.exception("Unhandled error while dispatching update from chat %s", event.chat_id)
                return DispatchOutcome("error")

    async def _dispatch(self, event: InboundEvent) -> DispatchOutcome:
        chat_id = event.chat_id

        if not event.text:
            return await self._reply(chat_id, "empty", TEXT_ONLY_MESSAGE)

        command = classify(event.text)
        if isinstance(command, Start):
            return await self._reply(chat_id, "start", START_MESSAGE)
        if isinstance(command, About):
            return await self._reply(chat_id, "about", self.about_message)
        if isinstance(command, Query):
            return await self._relay_photos(chat_id, command.text)

        raise TypeError(f"Unknown command: {command!r}")

    async def _relay_photos(self, chat_id: int, query: str) -> DispatchOutcome:
        try:
            result = await self._search.search(query, self._result_count)
        except Exception:
            # поиск не должен молча съедать запрос
            logger.exception("Search crashed for chat %s", chat_id)
            return await self._reply(chat_id, "failed", SEARCH_FAILED_MESSAGE)

        if isinstance(result, Failed):
            logger.error("Search failed for chat %s: %s", chat_id, result.error)
            return await self._reply(chat_id, "failed", SEARCH_FAILED_MESSAGE)

        if not isinstance(result, Found) or not result.urls:
            return await self._reply(chat_id, "not_found", NOT_FOUND_MESSAGE)

        outcome = DispatchOutcome("found")
        for url in result.urls:
            outcome.attempted += 1
            try:
                await self._transport.send_image(chat_id, url)
            except ChatUnreachable as e:
                # дальше слать бессмысленно
                logger.warning("%s; skipping %d remaining image(s)", e, len(result.urls) - outcome.attempted)
                break
            except SendFailed as e:
                logger.error("%s", e)
                continue
            outcome.delivered += 1

        return outcome

    async def _reply(self, chat_id: int, kind: str, text: str) -> DispatchOutcome:
        outcome = DispatchOutcome(kind, attempted=1)
        try:
            await self._transport.send_text(chat_id, text)
        except ChatUnreachable as e:
            logger.warning("%s", e)
            return outcome
        except SendFailed as e:
            logger.error("%s", e)
            return outcome
        outcome.delivered = 1
        return outcome
