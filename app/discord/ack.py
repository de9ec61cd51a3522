from typing import Optional
from app.commands.base import BaseCommand, CommandContext
from app.discord.models import (
    AckData,
    CommandInteraction,
    InteractionCallbackType,
    InteractionResponse,
    MessageFlags,
)

PLACEHOLDER = "-# _Working on it..._"


class AckResponder:
    """Builds the immediate responses sent inside the platform's reply window."""

    def pong(self) -> InteractionResponse:
        return InteractionResponse(type=InteractionCallbackType.PONG)

    def flags_for(self, interaction: CommandInteraction, command: Optional[BaseCommand]) -> MessageFlags:
        flags = MessageFlags.NONE
        if interaction.data.get_bool("whisper"):
            flags |= MessageFlags.EPHEMERAL
        if command is not None:
            if command.is_private(CommandContext.from_interaction(interaction)):
                flags |= MessageFlags.EPHEMERAL
            flags |= command.layout_flags()
        return flags

    def deferred(self, interaction: CommandInteraction, command: Optional[BaseCommand]) -> InteractionResponse:
        return InteractionResponse(
            type=InteractionCallbackType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE,
            data=AckData(content=PLACEHOLDER, flags=int(self.flags_for(interaction, command))),
        )
