from __future__ import annotations

import asyncio

from .adapters.remote import HTTPRemoteSource
from .bot import FollowBot
from .commands.register import register_commands
from .config import load_settings
from .logging_config import setup_logging
from .service import ServiceRegistry


def main() -> int:
    settings = load_settings()
    log = setup_logging(settings.log_level)
    if not settings.token:
        log.error(
            "DISCORD_BOT_TOKEN is not set. "
            "Export it in your environment before running."
        )
        return 2
    registry = ServiceRegistry(settings.data_dir)
    remote = None
    if settings.remote_url:
        remote = HTTPRemoteSource(settings.remote_url, timeout=settings.remote_timeout)
    else:
        log.info("FOLLOW_REMOTE_URL is not set; /analyze_session is disabled.")
    bot = FollowBot(sync_per_guild=settings.sync_per_guild, remote=remote)
    register_commands(bot, registry, settings, remote)

    async def runner():
        try:
            async with bot:
                await bot.start(settings.token)
        except KeyboardInterrupt:
            log.info("Shutting down...")
        return 0

    return asyncio.run(runner())


if __name__ == "__main__":
    raise SystemExit(main())
