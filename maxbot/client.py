"""Async client for the Max messaging-bot HTTP API."""

from __future__ import annotations

import httpx

from maxbot.config import ClientConfig
from maxbot.endpoints import (
    BotsMixin,
    ChatsMixin,
    MessagesMixin,
    SubscriptionsMixin,
    UpdatesMixin,
    UploadsMixin,
)

__all__ = ["MaxBotClient"]


class MaxBotClient(
    BotsMixin,
    ChatsMixin,
    MessagesMixin,
    SubscriptionsMixin,
    UpdatesMixin,
    UploadsMixin,
):
    """Max Bot API client.

    Every method performs a single HTTP call (uploads: two) and raises
    ``BotAPIError`` on failure. Methods accept ``deadline=`` to bound the call;
    without one the client's default ``timeout`` applies. The client holds no
    mutable state and may be shared between tasks.

    Example:
        async with MaxBotClient(token) as client:
            me = await client.get_bot()
            await client.send_message(chat_id, NewMessageBody(text=some("hi")))
    """

    @classmethod
    def from_config(cls, config: ClientConfig, *, http_client: httpx.AsyncClient | None = None) -> MaxBotClient:
        return cls(config.token, base_url=config.base_url, timeout=config.timeout, http_client=http_client)

    async def __aenter__(self) -> MaxBotClient:
        return self
