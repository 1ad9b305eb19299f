"""Shared test fixtures for the flag translator test suite."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

import models


BOT_ID = 1000
USER_ID = 2000
CHANNEL_ID = 3000
MESSAGE_ID = 4000


@pytest.fixture
def settings() -> models.Settings:
    return models.Settings(discord_bot_token="discord-token", openai_token="openai-token")


@pytest.fixture
def config() -> models.Config:
    return models.Config()


@pytest.fixture
def message() -> MagicMock:
    msg = MagicMock()
    msg.id = MESSAGE_ID
    msg.content = "Hello there"
    msg.author.display_name = "Alice"
    msg.author.display_avatar.url = "https://cdn.discordapp.com/embed/avatars/0.png"
    msg.author.mention = f"<@{USER_ID}>"
    msg.jump_url = f"https://discord.com/channels/1/{CHANNEL_ID}/{MESSAGE_ID}"
    return msg


@pytest.fixture
def channel(message) -> MagicMock:
    chan = MagicMock()
    chan.id = CHANNEL_ID
    chan.fetch_message = AsyncMock(return_value=message)
    chan.send = AsyncMock()
    return chan


@pytest.fixture
def client(channel) -> MagicMock:
    bot = MagicMock()
    bot.user.id = BOT_ID
    bot.get_channel.return_value = channel
    bot.fetch_channel = AsyncMock(return_value=channel)
    return bot


def make_payload(emoji: str, user_id: int = USER_ID) -> MagicMock:
    """Create a mock discord.RawReactionActionEvent."""
    payload = MagicMock()
    payload.user_id = user_id
    payload.emoji.name = emoji
    payload.channel_id = CHANNEL_ID
    payload.message_id = MESSAGE_ID
    return payload


def make_response(status_code: int = 200, body: dict | str | None = None) -> MagicMock:
    """Create a mock requests.Response."""
    if body is None:
        body = {"choices": [{"message": {"content": "Hola"}}]}
    response = MagicMock()
    response.status_code = status_code
    response.content = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")
    return response
