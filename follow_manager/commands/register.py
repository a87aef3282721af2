"""Registration of slash commands for the bot."""

from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands

from ..adapters.base import RemoteSource
from ..config import Settings
from ..core.errors import FollowDataError
from ..core.models import TABS
from ..i18n import Language, language_for, translate
from ..service import ServiceRegistry
from ..ui.modals import SessionModal
from ..ui.views import ResultsView, summary_embed

log = logging.getLogger(__name__)


def register_commands(
    bot: commands.Bot,
    registry: ServiceRegistry,
    settings: Settings,
    remote: RemoteSource | None = None,
) -> None:
    """Register the follow analysis commands on ``bot``."""
    tree = bot.tree

    def lang_of(interaction: discord.Interaction) -> Language:
        return language_for(getattr(interaction, "locale", None), settings.language)

    @tree.command(name="analyze", description="Compare your followers and following export files")
    @discord.app_commands.describe(
        followers="followers_1.json from your Instagram data export",
        following="following.json from your Instagram data export",
    )
    async def analyze(
        interaction: discord.Interaction,
        followers: discord.Attachment | None = None,
        following: discord.Attachment | None = None,
    ) -> None:
        lang = lang_of(interaction)
        service = registry.for_user(interaction.user.id)
        await interaction.response.defer(ephemeral=True, thinking=True)
        try:
            followers_raw = await followers.read() if followers else None
            following_raw = await following.read() if following else None
            data = await asyncio.to_thread(service.analyze_files, followers_raw, following_raw)
        except FollowDataError as exc:
            log.warning("File analysis for %s failed: %s", interaction.user.id, exc.message)
            await interaction.followup.send(translate(exc.code, lang), ephemeral=True)
            return
        await interaction.followup.send(
            embed=summary_embed(data, lang),
            view=ResultsView(data, lang),
            ephemeral=True,
        )

    @tree.command(
        name="analyze_session",
        description="Analyze your account with an Instagram session id",
    )
    async def analyze_session(interaction: discord.Interaction) -> None:
        lang = lang_of(interaction)
        if remote is None:
            await interaction.response.send_message(
                translate("remoteDisabled", lang), ephemeral=True
            )
            return
        service = registry.for_user(interaction.user.id)
        await interaction.response.send_modal(SessionModal(service, remote, lang))

    @tree.command(name="results", description="Show your last analysis")
    @discord.app_commands.describe(
        tab="Which list to show",
        search="Only show usernames containing this text",
    )
    @discord.app_commands.choices(
        tab=[discord.app_commands.Choice(name=translate(t), value=t) for t in TABS]
    )
    async def results(
        interaction: discord.Interaction,
        tab: str = "not_mutual",
        search: str | None = None,
    ) -> None:
        lang = lang_of(interaction)
        data = registry.for_user(interaction.user.id).load()
        if data is None:
            await interaction.response.send_message(translate("noData", lang), ephemeral=True)
            return
        view = ResultsView(data, lang, tab=tab, query=search)
        await interaction.response.send_message(embed=view.embed(), view=view, ephemeral=True)

    @tree.command(name="reset", description="Forget your cached follow data")
    async def reset(interaction: discord.Interaction) -> None:
        registry.for_user(interaction.user.id).reset()
        await interaction.response.send_message(
            translate("reset", lang_of(interaction)), ephemeral=True
        )

    @tree.error
    async def on_app_command_error(
        interaction: discord.Interaction, error: discord.app_commands.AppCommandError
    ) -> None:
        command = getattr(interaction, "command", None)
        log.error(
            "Command %s failed",
            getattr(command, "name", "?"),
            exc_info=error,
        )
        message = translate("unexpectedError", lang_of(interaction))
        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)
