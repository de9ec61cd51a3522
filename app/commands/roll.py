import logging
from typing import Dict, Union
from app.commands.base import BaseCommand, CommandContext
from app.dice.engine import DiceEngine
from app.dice.renderer import format_number, render_calculation
from app.discord.models import FollowUp
from app.errors import DiceRollError, UpstreamError, UserFacingError
from app.sheets.cache import SheetCache

logger = logging.getLogger(__name__)


class RollCommand(BaseCommand):
    """Evaluate dice notation, with the invoker's synced sheet stats as variables."""

    name = "roll"
    aliases = ("r",)

    def __init__(self, engine: DiceEngine, sheet_cache: SheetCache):
        self.engine = engine
        self.sheet_cache = sheet_cache

    async def handle(self, ctx: CommandContext) -> FollowUp:
        dice = ctx.data.get_string("dice")
        if dice is None:
            return self.reply("No dice notation given.")

        variables = await self._load_variables(ctx)

        try:
            rolled = self.engine.roll(dice, variables)
        except DiceRollError as e:
            return self.reply("\n```diff\n- " + e.message + "\n```")
        except Exception:
            logger.exception(f"[{ctx.short_token}] Dice engine failed on {dice!r}")
            return self.reply("**_An unexpected error occurred._**")

        trail = render_calculation(rolled.calculation)
        return self.reply(f"### {format_number(rolled.result)}\n = `{rolled.normalized}` = {trail}")

    async def _load_variables(self, ctx: CommandContext) -> Dict[str, Union[int, float]]:
        try:
            sheet = await self.sheet_cache.get(ctx.user_id)
        except (UserFacingError, UpstreamError) as e:
            logger.warning(f"[{ctx.short_token}] Rolling without sheet variables: {e.message}")
            return {}
        if sheet is None:
            return {}
        return sheet.variables()
