"""
Request-level flow for the interaction endpoint.

verify -> parse -> (ping: pong) | (command: deferred ack, then a detached
handler task started once the ack has gone out)
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Optional
from app.commands.dispatcher import CommandDispatcher
from app.discord.ack import AckResponder
from app.discord.followup import FollowUpPublisher
from app.discord.models import CommandInteraction, InteractionResponse, PingInteraction
from app.discord.router import InteractionRouter
from app.discord.signature import SIGNATURE_HEADER, TIMESTAMP_HEADER, SignatureVerifier
from app.errors import InteractionValidationError

logger = logging.getLogger(__name__)


@dataclass
class InteractionOutcome:
    response: InteractionResponse
    # called after the response is sent; starts the follow-up task and returns at once
    start_followup: Optional[Callable[[], Awaitable[asyncio.Task]]] = None


class InteractionHandler:

    def __init__(
        self,
        verifier: SignatureVerifier,
        dispatcher: CommandDispatcher,
        publisher: FollowUpPublisher,
        router: Optional[InteractionRouter] = None,
        ack_responder: Optional[AckResponder] = None,
    ):
        self.verifier = verifier
        self.dispatcher = dispatcher
        self.publisher = publisher
        self.router = router or InteractionRouter()
        self.ack_responder = ack_responder or AckResponder()

    async def handle(self, headers: Mapping[str, str], body: bytes) -> InteractionOutcome:
        signature = headers.get(SIGNATURE_HEADER)
        timestamp = headers.get(TIMESTAMP_HEADER)
        if not signature or not timestamp:
            raise InteractionValidationError("Missing signature headers", status_code=400)

        verification = self.verifier.verify(signature, timestamp, body)
        if not verification.valid:
            logger.warning("Rejected interaction with invalid signature")
            raise InteractionValidationError("Invalid request", status_code=401)

        interaction = self.router.parse(verification.body)

        if isinstance(interaction, PingInteraction):
            return InteractionOutcome(response=self.ack_responder.pong())

        short_token = interaction.short_token
        user = interaction.invoking_user
        logger.info(
            f"[{short_token}] User \"{user.username}\" issued command "
            f"`{json.dumps(interaction.data.model_dump(mode='json'))}`"
        )

        command = self.dispatcher.get_command(interaction.data.name)
        ack = self.ack_responder.deferred(interaction, command)
        logger.info(f"[{short_token}] Working on it...")

        return InteractionOutcome(response=ack, start_followup=self._starter(interaction))

    def _starter(self, interaction: CommandInteraction) -> Callable[[], Awaitable[asyncio.Task]]:
        async def start() -> asyncio.Task:
            return self.publisher.schedule(interaction, self.dispatcher.dispatch(interaction))

        return start
