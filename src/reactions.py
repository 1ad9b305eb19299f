"""Translate messages when they get a flag reaction."""

import asyncio
import logging
import typing

import discord

import models
import translation
import utils


async def handle_reaction(client: discord.Client, payload: discord.RawReactionActionEvent,
                          settings: models.Settings, config: models.Config) -> None:
    """Translate the reacted message and post the translation to its channel.

    Every failure is logged and the event dropped, nothing is reported in the channel.

    Arguments:
        - client: the bot client.
        - payload: the reaction event.
        - settings: the bot settings (api token).
        - config: the bot config.
    """
    # ignore reactions of the bot itself
    if client.user is not None and payload.user_id == client.user.id:
        return
    language: str | None = utils.FLAG_LANGUAGES.get(typing.cast(str, payload.emoji.name))
    if language is None:
        return
    try:
        channel: discord.abc.Messageable = typing.cast(
            discord.abc.Messageable,
            client.get_channel(payload.channel_id)
            or await client.fetch_channel(payload.channel_id))
        message: discord.Message = await channel.fetch_message(payload.message_id)
    except discord.HTTPException as error:
        logging.exception(msg=f"Error fetching message {payload.message_id} in "
                          f"<#{payload.channel_id}>.", exc_info=error)
        return
    if not message.content:
        return
    try:
        text: str = await asyncio.to_thread(translation.translate, message.content, language,
                                            settings.openai_token, config)
    except translation.TranslationError as error:
        logging.exception(msg=f"Error translating {message.jump_url} to {language}.",
                          exc_info=error)
        return
    embed: discord.Embed = utils.build_embed(message, text, language, config.embed_colour)
    try:
        await channel.send(embed=embed)
    except discord.HTTPException as error:
        logging.exception(msg=f"Error sending translation of {message.jump_url}.",
                          exc_info=error)
        return
    utils.log_translation(message, language)
