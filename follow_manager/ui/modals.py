from __future__ import annotations
import logging
import discord
from ..adapters.base import RemoteSource
from ..core.errors import FollowDataError
from ..i18n import Language, translate
from ..service import FollowService
from .views import ResultsView, summary_embed

log = logging.getLogger(__name__)

class SessionModal(discord.ui.Modal, title="Auto Follow Analysis"):
    def __init__(self, service: FollowService, source: RemoteSource, lang: Language | str = Language.EN) -> None:
        super().__init__(title=translate("sessionTitle", lang))
        self.service = service
        self.source = source
        self.lang = lang
        self.session_input = discord.ui.TextInput(
            label=translate("sessionLabel", lang),
            style=discord.TextStyle.short,
            placeholder=translate("sessionPlaceholder", lang),
            required=True,
            max_length=512,
        )
        self.add_item(self.session_input)

    async def on_submit(self, interaction: discord.Interaction) -> None:
        await self.submit(interaction, self.session_input.value)

    async def submit(self, interaction: discord.Interaction, session_id: str) -> None:
        await interaction.response.defer(ephemeral=True, thinking=True)
        try:
            data = await self.service.analyze_remote(self.source, session_id)
        except FollowDataError as exc:
            log.warning("Session analysis failed: %s", exc.message)
            await interaction.followup.send(translate(exc.code, self.lang), ephemeral=True)
            return
        await interaction.followup.send(
            embed=summary_embed(data, self.lang),
            view=ResultsView(data, self.lang),
            ephemeral=True,
        )

    async def on_error(self, interaction: discord.Interaction, error: Exception) -> None:
        log.error("Session modal failed", exc_info=error)
        message = translate("unexpectedError", self.lang)
        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)
