"""
Wire models for the Discord interaction protocol.

Inbound payloads are a tagged union keyed on the numeric ``type`` field.
Outbound bodies are built from the response models at the bottom.
"""

from enum import IntEnum, IntFlag
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class InteractionCallbackType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class OptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class MessageFlags(IntFlag):
    NONE = 0
    EPHEMERAL = 1 << 6
    IS_COMPONENTS_V2 = 1 << 15


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class User(_Payload):
    id: str
    username: str = ""


class Member(_Payload):
    user: User


class Option(_Payload):
    name: str
    type: OptionType
    value: Union[bool, int, float, str, None] = None


class CommandData(_Payload):
    id: Optional[str] = None
    name: str
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    options: List[Option] = Field(default_factory=list)

    def get_option(self, name: str) -> Optional[Option]:
        """Exact-name lookup. ``None`` means the option was not provided."""
        for option in self.options:
            if option.name == name:
                return option
        return None

    def get_string(self, name: str) -> Optional[str]:
        option = self.get_option(name)
        if option is None or option.type != OptionType.STRING:
            return None
        return str(option.value)

    def get_bool(self, name: str) -> bool:
        option = self.get_option(name)
        return option is not None and option.type == OptionType.BOOLEAN and option.value is True


class PingInteraction(_Payload):
    type: Literal[1]
    id: Optional[str] = None
    application_id: Optional[str] = None
    token: str = ""


class CommandInteraction(_Payload):
    type: Literal[2]
    id: Optional[str] = None
    application_id: Optional[str] = None
    token: str
    data: CommandData
    user: Optional[User] = None
    member: Optional[Member] = None

    @property
    def short_token(self) -> str:
        return self.token[:8]

    @property
    def invoking_user(self) -> Optional[User]:
        """Guild invocations nest the user under ``member``; DMs carry it at top level."""
        if self.member is not None:
            return self.member.user
        return self.user


Interaction = Annotated[
    Union[PingInteraction, CommandInteraction],
    Field(discriminator="type"),
]

interaction_adapter: TypeAdapter = TypeAdapter(Interaction)


class FollowUp(BaseModel):
    """Final message delivered by editing the deferred original response."""

    content: Optional[str] = None
    embeds: Optional[List[Dict[str, Any]]] = None
    components: Optional[List[Dict[str, Any]]] = None
    flags: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class AckData(BaseModel):
    content: str
    flags: int = 0


class InteractionResponse(BaseModel):
    type: InteractionCallbackType
    data: Optional[AckData] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
