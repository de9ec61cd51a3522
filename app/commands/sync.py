import logging
from app.commands.base import BaseCommand, CommandContext
from app.discord.models import FollowUp
from app.errors import SheetNotFoundError, UpstreamError
from app.sheets.cache import SheetCache

logger = logging.getLogger(__name__)

FAILED_WITH_ID = "**Failed to sync.**\nAre you sure the ID is correct and the sheet is public?"
FAILED_REFRESH = "**Failed to sync.**\nMake sure your sheet still exists and is public."


class SyncCommand(BaseCommand):
    """Link a character sheet to the invoking user, or refresh the linked one."""

    name = "sync"
    always_private = True

    def __init__(self, sheet_cache: SheetCache):
        self.sheet_cache = sheet_cache

    async def handle(self, ctx: CommandContext) -> FollowUp:
        sheet_id = ctx.data.get_string("id")
        failure = FAILED_WITH_ID if sheet_id is not None else FAILED_REFRESH

        try:
            if sheet_id is None:
                sheet = await self.sheet_cache.get(ctx.user_id)
            else:
                sheet = await self.sheet_cache.put(ctx.user_id, sheet_id)
        except (SheetNotFoundError, UpstreamError) as e:
            logger.warning(f"[{ctx.short_token}] Sync failed for user {ctx.user_id}: {e.message}")
            return self.reply(failure)

        if sheet is None:
            return self.reply(failure)

        return self.reply(f"Synced character **{sheet.name}**.")
