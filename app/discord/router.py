"""
Classification of verified interaction payloads.
"""

import json
import logging
from typing import Union
from pydantic import ValidationError
from app.discord.models import (
    ApplicationCommandType,
    CommandInteraction,
    PingInteraction,
    interaction_adapter,
)
from app.errors import InteractionValidationError

logger = logging.getLogger(__name__)


class InteractionRouter:
    """Turns authenticated body text into a ping or a chat-input command.

    Only called after the signature check has passed, so nothing here ever
    looks at unauthenticated structure.
    """

    def parse(self, body: str) -> Union[PingInteraction, CommandInteraction]:
        try:
            raw = json.loads(body)
        except json.JSONDecodeError as e:
            raise InteractionValidationError("Body is not valid JSON") from e

        try:
            interaction = interaction_adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Rejected interaction payload: {e.error_count()} validation error(s)")
            raise InteractionValidationError("Unsupported interaction payload") from e

        if isinstance(interaction, PingInteraction):
            return interaction

        if interaction.user is not None and interaction.member is not None:
            raise InteractionValidationError("Interaction carries both a user and a member")

        if interaction.invoking_user is None:
            raise InteractionValidationError("Interaction carries no invoking user")

        if interaction.data.type != ApplicationCommandType.CHAT_INPUT:
            raise InteractionValidationError(
                f"Unsupported command type: {int(interaction.data.type)}"
            )

        return interaction
