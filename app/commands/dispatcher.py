import logging
from typing import Optional
from app.commands.base import BaseCommand, CommandContext, CommandRegistry
from app.discord.models import CommandInteraction, FollowUp
from app.errors import UpstreamError, UserFacingError

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Routes a command interaction to its handler by exact name.

    User-facing and upstream failures become reply text here. Anything
    else propagates to the follow-up boundary.
    """

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def get_command(self, name: str) -> Optional[BaseCommand]:
        return self.registry.get_command(name)

    async def dispatch(self, interaction: CommandInteraction) -> Optional[FollowUp]:
        command = self.get_command(interaction.data.name)
        if command is None:
            logger.warning(f"[{interaction.short_token}] Unknown command '{interaction.data.name}', no follow-up")
            return None

        ctx = CommandContext.from_interaction(interaction)
        try:
            return await command.handle(ctx)
        except UserFacingError as e:
            logger.info(f"[{ctx.short_token}] {command.name} failed for user: {e.message}")
            return command.user_error(e)
        except UpstreamError as e:
            logger.error(f"[{ctx.short_token}] {command.name} upstream failure: {e.message}")
            return command.upstream_error(e)
