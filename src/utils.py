"""Utility stuff."""

import datetime
import logging
import os
import pathlib
import queue
import traceback
import types
import typing

import discord

import models


TRANSLATION: int = 21
FLAG_LANGUAGES: typing.Mapping[str, str] = types.MappingProxyType({
    "🇺🇸": "English",
    "🇬🇧": "English",
    "🇪🇸": "Spanish",
    "🇫🇷": "French",
    "🇩🇪": "German",
    "🇮🇹": "Italian",
    "🇯🇵": "Japanese",
    "🇰🇷": "Korean",
    "🇨🇳": "Chinese",
    "🇵🇹": "Portuguese",
    "🇷🇺": "Russian"
})
"""Flag emoji to the language a translation is requested in."""
PROMPT_TEXT: str = "Translate the following text to {language}. Only respond with the" \
    " translation, nothing else: {text}"
FOOTER_TEXT: str = "Translated to {language}"
LOG_LEVEL_COLOURS: dict[int, discord.Colour] = {
    logging.DEBUG: discord.Colour.yellow(),
    logging.INFO: discord.Colour.blue(),
    TRANSLATION: discord.Colour.green(),
    logging.WARNING: discord.Colour.orange(),
    logging.ERROR: discord.Colour.red(),
    logging.CRITICAL: discord.Colour.dark_red()
}
logging.addLevelName(TRANSLATION, "TRANSLATION")


class DiscordHandler(logging.Handler):
    """Discord logging handler."""

    def __init__(self, log_queue: queue.Queue[discord.Embed]) -> None:
        """Initialise the handler.

        Arguments:
            - log_queue: the queue to send logs to.
        """
        super().__init__()
        self.log_queue: queue.Queue[discord.Embed] = log_queue

    def emit(self, record: logging.LogRecord) -> None:
        """Log the record by adding it to the queue.

        Arguments:
            - record: the record to log.
        """
        message: str = record.getMessage()
        embed: discord.Embed = discord.Embed(
            colour=LOG_LEVEL_COLOURS.get(record.levelno, discord.Colour.default()),
            title=record.funcName,
            description=message if record.levelno == TRANSLATION else f"```{message}```",
            timestamp=datetime.datetime.fromtimestamp(record.created))
        embed.set_author(name=record.levelname)
        if record.exc_info and record.exc_info[1] is not None:
            # embed field values are capped at 1024 characters
            text: str = "".join(traceback.format_exception_only(record.exc_info[1]))
            embed.add_field(name="Traceback", value=f"```{text[-1000:]}```")
        try:
            self.log_queue.put_nowait(embed)
        except queue.Full:
            # log channel unreachable; newest records are dropped
            return


def load_settings() -> models.Settings:
    """Load the secrets from the environment.

    Returns:
        The validated settings.

    Raises:
        pydantic.ValidationError: a required variable is missing or invalid.
    """
    return models.Settings.model_validate({
        "discord_bot_token": os.environ.get("DISCORD_BOT_TOKEN"),
        "openai_token": os.environ.get("OPENAI_TOKEN"),
        "log_channel": os.environ.get("LOG_CHANNEL") or None
    })


def load_config(path: str) -> models.Config:
    """Load the config file, falling back to defaults if there is none.

    Arguments:
        - path: path of the json config file.

    Returns:
        The validated config.
    """
    file: pathlib.Path = pathlib.Path(path)
    if not file.is_file():
        return models.Config()
    return models.Config.model_validate_json(file.read_text(encoding="utf-8"))


def make_prompt(text: str, language: str) -> str:
    """Build the instruction prompt for a translation.

    Arguments:
        - text: the text to translate.
        - language: the language to translate to.

    Returns:
        The prompt.
    """
    return PROMPT_TEXT.format_map({"language": language, "text": text})


def build_embed(message: discord.Message, translation: str, language: str,
                colour: int) -> discord.Embed:
    """Build the reply embed for a translated message.

    Arguments:
        - message: the message that was translated.
        - translation: the translated text.
        - language: the language translated to.
        - colour: the accent colour of the embed.

    Returns:
        The embed.
    """
    embed: discord.Embed = discord.Embed(colour=colour, description=translation)
    embed.set_author(name=message.author.display_name,
                     icon_url=message.author.display_avatar.url)
    embed.set_footer(text=FOOTER_TEXT.format_map({"language": language}))
    return embed


def log_translation(message: discord.Message, language: str) -> None:
    """Log a posted translation.

    Arguments:
        - message: the message that was translated.
        - language: the language translated to.
    """
    logging.log(stacklevel=2, level=TRANSLATION, msg=f"Translated {message.jump_url} by "
                f"{message.author.mention} to {language}.")
