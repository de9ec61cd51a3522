from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterable, Optional
from app.discord.models import CommandData, CommandInteraction, FollowUp, MessageFlags
from app.errors import UpstreamError, UserFacingError


@dataclass
class CommandContext:
    interaction: CommandInteraction
    user_id: str

    @property
    def data(self) -> CommandData:
        return self.interaction.data

    @property
    def short_token(self) -> str:
        return self.interaction.short_token

    @classmethod
    def from_interaction(cls, interaction: CommandInteraction) -> "CommandContext":
        return cls(interaction=interaction, user_id=interaction.invoking_user.id)


class BaseCommand(ABC):

    name: str = ""
    aliases: Iterable[str] = ()
    # sync output is always whispered, whatever the options say
    always_private: bool = False
    uses_components: bool = False

    @abstractmethod
    async def handle(self, ctx: CommandContext) -> FollowUp:
        pass

    def is_private(self, ctx: CommandContext) -> bool:
        return self.always_private or ctx.data.get_bool("whisper")

    def layout_flags(self) -> MessageFlags:
        return MessageFlags.IS_COMPONENTS_V2 if self.uses_components else MessageFlags.NONE

    def reply(self, text: str) -> FollowUp:
        return FollowUp(content=text)

    def user_error(self, error: UserFacingError) -> FollowUp:
        return self.reply(error.message)

    def upstream_error(self, error: UpstreamError) -> FollowUp:
        return self.reply("**Something went wrong.**\nThe upstream service did not answer, try again later.")


class CommandRegistry:

    def __init__(self):
        self._commands: Dict[str, BaseCommand] = {}

    def register(self, command: BaseCommand):
        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

    def get_command(self, name: str) -> Optional[BaseCommand]:
        return self._commands.get(name)
