"""Tests for the aiogram transport adapter."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.exceptions import TelegramBadRequest, TelegramForbiddenError, TelegramNetworkError
from aiogram.methods import SendMessage

from bot.errors import ChatUnreachable, SendFailed
from bot.transport import AiogramTransport


def telegram_error(cls, message):
    return cls(method=SendMessage(chat_id=1, text="x"), message=message)


@pytest.fixture
def bot():
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.send_photo = AsyncMock()
    return bot


class TestSend:
    @pytest.mark.asyncio
    async def test_send_text(self, bot):
        await AiogramTransport(bot).send_text(1, "hi")
        bot.send_message.assert_awaited_once_with(1, "hi")

    @pytest.mark.asyncio
    async def test_send_image_by_url(self, bot):
        await AiogramTransport(bot).send_image(1, "https://example.org/a.jpg")
        bot.send_photo.assert_awaited_once_with(1, photo="https://example.org/a.jpg")


class TestErrorMapping:
    @pytest.mark.asyncio
    async def test_forbidden_is_unreachable(self, bot):
        bot.send_photo.side_effect = telegram_error(TelegramForbiddenError, "Forbidden: bot was blocked by the user")
        with pytest.raises(ChatUnreachable) as exc_info:
            await AiogramTransport(bot).send_image(1, "https://example.org/a.jpg")
        assert exc_info.value.chat_id == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cls", [TelegramBadRequest, TelegramNetworkError])
    async def test_api_errors_are_send_failed(self, bot, cls):
        bot.send_photo.side_effect = telegram_error(cls, "Bad Request: wrong file identifier/HTTP URL specified")
        with pytest.raises(SendFailed) as exc_info:
            await AiogramTransport(bot).send_image(1, "https://example.org/a.jpg")
        assert not isinstance(exc_info.value, ChatUnreachable)

    @pytest.mark.asyncio
    async def test_timeout_is_send_failed(self, bot):
        async def slow(*args, **kwargs):
            await asyncio.sleep(1)

        bot.send_message = slow
        with pytest.raises(SendFailed) as exc_info:
            await AiogramTransport(bot, send_timeout=0.01).send_text(1, "hi")
        assert "timed out" in str(exc_info.value)
