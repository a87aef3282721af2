"""Discord bot front end for Follow Manager.

The bot only handles presentation: slash commands hand the uploaded files or
the session id to :class:`~follow_manager.service.FollowService` and render
the resulting :class:`~follow_manager.core.models.FollowData`.
"""

from __future__ import annotations

from typing import Any

import discord
from discord.ext import commands

from .adapters.base import RemoteSource
from .logging_config import setup_logging


class FollowBot(commands.Bot):
    """Small ``discord.py`` based bot serving follow analyses."""

    def __init__(self, **kwargs: Any) -> None:  # pragma: no cover - trivial
        """Initialize the bot with the minimal intents required."""
        intents = kwargs.pop("intents", None) or discord.Intents.default()
        # We use slash commands and components; message content intent not
        # needed.
        intents.message_content = False
        self.sync_per_guild: bool = kwargs.pop("sync_per_guild", False)
        self.remote: RemoteSource | None = kwargs.pop("remote", None)
        super().__init__(
            command_prefix=kwargs.pop("command_prefix", "!"),
            intents=intents,
        )
        self.log = setup_logging()

    async def setup_hook(self) -> None:
        """Sync slash commands so new ones show up for users."""
        await self.tree.sync()
        await super().setup_hook()

    async def on_ready(self) -> None:  # pragma: no cover - requires discord
        """Log a short confirmation once the bot connected successfully."""
        await self.change_presence(activity=discord.Game(name="Follow Manager"))
        if self.sync_per_guild:
            for guild in self.guilds:
                try:
                    self.tree.copy_global_to(guild=guild)
                    await self.tree.sync(guild=guild)
                except discord.HTTPException:
                    self.log.exception("Failed to sync commands for guild %s", guild.id)
        self.log.info(
            "Logged in as %s (%s)",
            self.user,
            self.user.id if self.user else "?",
        )

    async def close(self) -> None:
        if self.remote is not None:
            await self.remote.close()
        await super().close()


__all__ = ["FollowBot"]
