# bot/errors.py
"""Errors raised by the chat transport."""

from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base class for PhotoBot delivery errors."""


class SendFailed(RelayError):
    """An outbound message could not be delivered (API error, network, timeout)."""

    def __init__(self, chat_id: int, what: str, reason: str, original: Optional[Exception] = None) -> None:
        self.chat_id = chat_id
        self.what = what
        self.reason = reason
        self.original = original
        super().__init__(f"Failed to send {what} to chat {chat_id}: {reason}")


class ChatUnreachable(SendFailed):
    """The chat will not accept messages from the bot any more (blocked, kicked, deactivated)."""
