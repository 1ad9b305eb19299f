"""Pydantic models to represent data."""

import pydantic


class Settings(pydantic.BaseModel):
    """Settings model (secrets from the environment)."""
    discord_bot_token: str = pydantic.Field(min_length=1)
    openai_token: str = pydantic.Field(min_length=1)
    log_channel: int | None = None


class Config(pydantic.BaseModel):
    """Config model."""
    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-3.5-turbo"
    embed_colour: int = 0x00BFFF
    # no timeout unless configured
    request_timeout: float | None = None


class ChatMessage(pydantic.BaseModel):
    """Chat message model."""
    role: str
    content: str


class CompletionRequest(pydantic.BaseModel):
    """Chat completion request model."""
    model: str
    messages: list[ChatMessage]


class ChoiceMessage(pydantic.BaseModel):
    """Message of a completion choice."""
    content: str


class Choice(pydantic.BaseModel):
    """Completion choice model."""
    message: ChoiceMessage


class CompletionResponse(pydantic.BaseModel):
    """Chat completion response model."""
    choices: list[Choice]
