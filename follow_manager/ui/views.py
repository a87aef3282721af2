from __future__ import annotations
import discord
from ..core.models import TABS, FollowData
from ..i18n import Language, translate
from .render import filter_users, format_user_line, page_count, paginate, summary_lines

TAB_COLORS = {
    "not_mutual": discord.Color.orange(),
    "not_following": discord.Color.blue(),
    "mutuals": discord.Color.green(),
    "following": discord.Color.purple(),
    "followers": discord.Color.magenta(),
}

def summary_embed(data: FollowData, lang: Language | str = Language.EN) -> discord.Embed:
    e = discord.Embed(
        title=translate("appTitle", lang),
        description=translate("dataLoaded", lang),
        color=discord.Color.blurple(),
    )
    if data.username:
        e.set_author(name=f"@{data.username}")
    e.add_field(name="\u200b", value="\n".join(summary_lines(data, lang)), inline=False)
    return e

def results_embed(
    data: FollowData,
    tab: str,
    lang: Language | str = Language.EN,
    query: str | None = None,
    page: int = 0,
) -> discord.Embed:
    users = filter_users(data.tab(tab), query)
    pages = page_count(len(users))
    page = min(max(page, 0), pages - 1)
    lines = [format_user_line(u, lang) for u in paginate(users, page)]
    e = discord.Embed(
        title=f"{translate(tab, lang)} ({len(users)})",
        description="\n".join(lines) or translate("emptyList", lang),
        color=TAB_COLORS.get(tab, discord.Color.blurple()),
    )
    if data.username:
        e.set_author(name=f"@{data.username}")
    footer = f"{translate('page', lang)} {page + 1}/{pages}"
    if query:
        footer += f" • \"{query}\""
    e.set_footer(text=footer)
    return e

class ResultsView(discord.ui.View):
    """Tabs and paging over one :class:`FollowData`."""

    _TAB_BUTTONS = {
        "not_mutual": "tab_not_mutual",
        "not_following": "tab_not_following",
        "mutuals": "tab_mutuals",
        "following": "tab_following",
        "followers": "tab_followers",
    }

    def __init__(
        self,
        data: FollowData,
        lang: Language | str = Language.EN,
        tab: str = "not_mutual",
        query: str | None = None,
    ) -> None:
        super().__init__(timeout=600)
        if tab not in TABS:
            raise ValueError(f"Unknown tab {tab!r}")
        self.data = data
        self.lang = lang
        self.tab = tab
        self.query = query
        self.page = 0
        for name, attr in self._TAB_BUTTONS.items():
            getattr(self, attr).label = translate(name, lang)
        self.prev_page.label = translate("previous", lang)
        self.next_page.label = translate("next", lang)
        self._sync_buttons()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def pages(self) -> int:
        return page_count(len(filter_users(self.data.tab(self.tab), self.query)))

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab {tab!r}")
        self.tab = tab
        self.page = 0
        self._sync_buttons()

    def turn_page(self, delta: int) -> None:
        self.page = min(max(self.page + delta, 0), self.pages() - 1)
        self._sync_buttons()

    def embed(self) -> discord.Embed:
        return results_embed(self.data, self.tab, self.lang, self.query, self.page)

    def _sync_buttons(self) -> None:
        for name, attr in self._TAB_BUTTONS.items():
            button = getattr(self, attr)
            button.style = (
                discord.ButtonStyle.primary if name == self.tab else discord.ButtonStyle.secondary
            )
        self.prev_page.disabled = self.page <= 0
        self.next_page.disabled = self.page >= self.pages() - 1

    async def _show(self, interaction: discord.Interaction) -> None:
        await interaction.response.edit_message(embed=self.embed(), view=self)

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------
    @discord.ui.button(label="Not Mutual", style=discord.ButtonStyle.secondary, row=0)
    async def tab_not_mutual(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.select_tab("not_mutual")
        await self._show(interaction)

    @discord.ui.button(label="I Don't Follow", style=discord.ButtonStyle.secondary, row=0)
    async def tab_not_following(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.select_tab("not_following")
        await self._show(interaction)

    @discord.ui.button(label="Mutuals", style=discord.ButtonStyle.secondary, row=0)
    async def tab_mutuals(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.select_tab("mutuals")
        await self._show(interaction)

    @discord.ui.button(label="Following", style=discord.ButtonStyle.secondary, row=0)
    async def tab_following(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.select_tab("following")
        await self._show(interaction)

    @discord.ui.button(label="Followers", style=discord.ButtonStyle.secondary, row=0)
    async def tab_followers(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.select_tab("followers")
        await self._show(interaction)

    @discord.ui.button(label="Previous", style=discord.ButtonStyle.secondary, row=1)
    async def prev_page(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.turn_page(-1)
        await self._show(interaction)

    @discord.ui.button(label="Next", style=discord.ButtonStyle.secondary, row=1)
    async def next_page(self, interaction: discord.Interaction, button: discord.ui.Button) -> None:
        self.turn_page(+1)
        await self._show(interaction)
