"""Flag translator discord bot."""

import asyncio
import datetime
import logging
import os
import queue
import signal
import sys
import typing

import discord
import discord.ext.tasks
import dotenv
import pydantic

import models
import reactions
import utils


__VERSION__ = 1, 1, 0
"""Bot version as Major.Minor.Patch (semantic versioning)."""

# logging setup
LOG_FILE: str = f"log_{datetime.datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"
LOG_QUEUE_SIZE: int = 200
log_queue: queue.Queue[discord.Embed] = queue.Queue(maxsize=LOG_QUEUE_SIZE)
logging.basicConfig(level=logging.INFO, datefmt="%Y-%m-%d %H:%M:%S", style="{",
                    format="[{asctime}] [{levelname}] ({funcName}) {message}",
                    handlers=[logging.FileHandler(LOG_FILE), logging.StreamHandler(sys.stdout)])

# load environment variables
dotenv.load_dotenv()
try:
    SETTINGS: models.Settings = utils.load_settings()
except pydantic.ValidationError as env_error:
    logging.critical(f"Invalid environment: {env_error}")
    sys.exit(1)
if SETTINGS.log_channel:
    logging.getLogger().addHandler(utils.DiscordHandler(log_queue))

# config values
CONFIG_PATH: str = os.environ.get("CONFIG_PATH", "config.json")
CONFIG: models.Config = utils.load_config(CONFIG_PATH)

# bot setup
intents: discord.Intents = discord.Intents.default()
intents.message_content = True
bot: discord.Client = discord.Client(intents=intents)


# handling events
@bot.event
async def on_ready() -> None:
    """Do stuff on ready."""
    if SETTINGS.log_channel and not log_task.is_running():
        log_task.start()
    # called multiple times; not only when first started
    text: str = f"Bot running version {'.'.join(map(str, __VERSION__))}."
    logging.info(text)


@bot.event
async def on_raw_reaction_add(payload: discord.RawReactionActionEvent) -> None:
    """Do stuff on reaction added, cached message or not.

    Arguments:
        - payload: the reaction event.
    """
    await reactions.handle_reaction(bot, payload, SETTINGS, CONFIG)


# tasks
@discord.ext.tasks.loop(seconds=10)
async def log_task() -> None:
    """Log records by actually sending them to the log channel on discord."""
    log_channel = bot.get_channel(typing.cast(int, SETTINGS.log_channel))
    # not cached yet or not a text channel
    if not isinstance(log_channel, discord.abc.Messageable):
        return
    while not log_queue.empty():
        embed: discord.Embed = log_queue.get()
        await log_channel.send(embed=embed)


async def run() -> None:
    """Run the bot until it is interrupted or terminated."""
    shutdown: asyncio.Event = asyncio.Event()
    loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, shutdown.set)
    async with bot:
        start: asyncio.Task = asyncio.create_task(bot.start(SETTINGS.discord_bot_token))
        stop: asyncio.Task = asyncio.create_task(shutdown.wait())
        await asyncio.wait({start, stop}, return_when=asyncio.FIRST_COMPLETED)
        stop.cancel()
        if start.done():
            # raises login and connection errors
            start.result()
        else:
            logging.info("Shutting down.")
            if log_task.is_running():
                log_task.cancel()
            await bot.close()
            await start


def main() -> None:
    """Run the bot, exiting with status 1 if it cannot connect to discord."""
    try:
        asyncio.run(run())
    except (discord.LoginFailure, discord.GatewayNotFound, discord.ConnectionClosed) as error:
        logging.critical(msg="Could not connect to discord.", exc_info=error)
        sys.exit(1)


if __name__ == "__main__":
    main()
