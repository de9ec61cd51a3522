"""
/spell: look a spell up by id or name and show its card.

Output uses the components layout: text displays, a media gallery for
the card image and rows of buttons when the search is ambiguous.
"""

import logging
from typing import Any, Dict, List
from app.commands.base import BaseCommand, CommandContext
from app.discord.models import FollowUp, MessageFlags
from app.errors import UpstreamError
from app.spells.client import Spell, SpellServiceClient

logger = logging.getLogger(__name__)

TEXT_DISPLAY = 10
MEDIA_GALLERY = 12
ACTION_ROW = 1
BUTTON = 2
BUTTON_SECONDARY = 2

BUTTONS_PER_ROW = 5
MAX_CANDIDATES = 25
MAX_LABEL_LENGTH = 80


def text_display(content: str) -> Dict[str, Any]:
    return {"type": TEXT_DISPLAY, "content": content}


def spell_selector_id(short_token: str, spell_id: str) -> str:
    return f"spell:{short_token}:{spell_id}"


class SpellCommand(BaseCommand):

    name = "spell"
    uses_components = True

    def __init__(self, spell_client: SpellServiceClient):
        self.spell_client = spell_client

    def reply(self, text: str) -> FollowUp:
        return FollowUp(components=[text_display(text)], flags=int(MessageFlags.IS_COMPONENTS_V2))

    def upstream_error(self, error: UpstreamError) -> FollowUp:
        return self.reply("**Spell lookup failed.**\nThe spell service did not answer, try again later.")

    async def handle(self, ctx: CommandContext) -> FollowUp:
        term = ctx.data.get_string("name")
        if term is None:
            return self.reply("No spell name given.")

        result = await self.spell_client.search(term)

        if result.exact is not None:
            return self.card(result.exact)

        if not result.matches:
            return self.reply(f"No spell found matching **{term}**.")

        if len(result.matches) == 1:
            return self.card(result.matches[0])

        logger.info(f"[{ctx.short_token}] {len(result.matches)} spells match {term!r}, asking to pick one")
        return self.disambiguation(ctx, term, result.matches)

    def card(self, spell: Spell) -> FollowUp:
        components = [
            text_display(f"### {spell.name}"),
            {
                "type": MEDIA_GALLERY,
                "items": [
                    {
                        "media": {"url": self.spell_client.image_url(spell)},
                        "description": spell.name,
                    }
                ],
            },
        ]
        return FollowUp(components=components, flags=int(MessageFlags.IS_COMPONENTS_V2))

    def disambiguation(self, ctx: CommandContext, term: str, candidates: List[Spell]) -> FollowUp:
        shown = candidates[:MAX_CANDIDATES]
        buttons = [
            {
                "type": BUTTON,
                "style": BUTTON_SECONDARY,
                "label": spell.name[:MAX_LABEL_LENGTH],
                "custom_id": spell_selector_id(ctx.short_token, spell.id),
            }
            for spell in shown
        ]
        rows = [
            {"type": ACTION_ROW, "components": buttons[i:i + BUTTONS_PER_ROW]}
            for i in range(0, len(buttons), BUTTONS_PER_ROW)
        ]

        header = f"Found {len(candidates)} spells matching **{term}**. Which one did you mean?"
        if len(candidates) > len(shown):
            header += f"\n-# Showing the first {len(shown)}."

        return FollowUp(components=[text_display(header), *rows], flags=int(MessageFlags.IS_COMPONENTS_V2))
