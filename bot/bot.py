"""
PhotoBot — Telegram bot (aiogram 3)

Логика:
- /start, /about → короткий текст
- любой другой текст → поиск на Flickr → до N картинок в чат
- не текст (фото, стикер, голосовое) → подсказка, что нужен текст
"""

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramAPIError
from aiogram.types import ErrorEvent, Message

from photo_search import FlickrClient

from . import config
from .commands import BOT_COMMANDS
from .relay import InboundEvent, UpdateRelay
from .transport import AiogramTransport

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Handlers
# ─────────────────────────────────────────────────────────────

async def handle_message(msg: Message, relay: UpdateRelay):
    outcome = await relay.dispatch(InboundEvent.from_message(msg))
    logger.debug(
        "Chat %s: %s, %d/%d sent", msg.chat.id, outcome.kind, outcome.delivered, outcome.attempted
    )


async def handle_error(event: ErrorEvent) -> bool:
    # сюда попадает только то, что пролетело мимо relay
    update_id = event.update.update_id if event.update else None
    logger.error("Update %s failed: %r", update_id, event.exception, exc_info=event.exception)
    return True


async def on_startup(bot: Bot):
    try:
        await bot.set_my_commands(BOT_COMMANDS)
    except TelegramAPIError as e:
        # меню команд не критично, бот работает и без него
        logger.warning("Could not register bot commands: %s", e)


async def on_shutdown(flickr: FlickrClient):
    await flickr.aclose()
    logger.info("PhotoBot stopped")


# ─────────────────────────────────────────────────────────────
# Run
# ─────────────────────────────────────────────────────────────

def build_dispatcher(bot: Bot, flickr: FlickrClient) -> Dispatcher:
    relay = UpdateRelay(
        AiogramTransport(bot, send_timeout=config.SEND_TIMEOUT),
        flickr,
        result_count=config.RESULT_COUNT,
        max_concurrency=config.MAX_CONCURRENCY,
    )

    dp = Dispatcher(relay=relay, flickr=flickr)

    # все сообщения идут через один обработчик, команды разбирает classify()
    dp.message.register(handle_message)
    dp.errors.register(handle_error)

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)
    return dp


async def run_polling() -> None:
    bot = Bot(token=config.TELEGRAM_BOT_TOKEN)
    flickr = FlickrClient(
        config.FLICKR_API_KEY,
        candidates_per_page=config.CANDIDATES_PER_PAGE,
        timeout=config.SEARCH_TIMEOUT,
    )
    dp = build_dispatcher(bot, flickr)

    logger.info("PhotoBot started")
    await dp.start_polling(bot, allowed_updates=["message"])


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # в URL запросов к Flickr лежит api_key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not config.TELEGRAM_BOT_TOKEN:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set")
    if not config.FLICKR_API_KEY:
        raise RuntimeError("FLICKR_API_KEY is not set")

    asyncio.run(run_polling())


if __name__ == "__main__":
    main()
