"""
Delivery of the final message for a deferred interaction.

Each command runs as its own asyncio task, detached from the HTTP
response. The task is the error boundary: whatever the handler does,
at most one PATCH is made for the interaction token, and a handler
crash means no follow-up at all.
"""

import asyncio
import logging
from typing import Awaitable, Optional, Set
import httpx
from app.config import get_settings
from app.discord.models import CommandInteraction, FollowUp

logger = logging.getLogger(__name__)


class FollowUpPublisher:

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._tasks: Set[asyncio.Task] = set()

    def followup_url(self, token: str) -> str:
        return (
            f"{self.settings.discord_api_base}/webhooks/"
            f"{self.settings.discord_application_id}/{token}/messages/@original"
        )

    def schedule(self, interaction: CommandInteraction, work: Awaitable[Optional[FollowUp]]) -> asyncio.Task:
        """Start the handler-then-follow-up continuation without awaiting it."""
        task = asyncio.create_task(self.run(interaction, work), name=f"followup-{interaction.short_token}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every scheduled follow-up. Used at shutdown and in tests."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def run(self, interaction: CommandInteraction, work: Awaitable[Optional[FollowUp]]) -> bool:
        short_token = interaction.short_token
        try:
            follow_up = await work
        except Exception:
            logger.exception(f"[{short_token}] Command handler failed, no follow-up will be sent")
            return False

        if follow_up is None:
            logger.info(f"[{short_token}] Nothing to follow up with")
            return False

        return await self.publish(interaction.token, follow_up, short_token)

    async def publish(self, token: str, follow_up: FollowUp, short_token: Optional[str] = None) -> bool:
        short_token = short_token or token[:8]
        payload = follow_up.to_payload()
        logger.info(f"[{short_token}] Following up with: {payload}")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bot {self.settings.discord_bot_token}",
        }

        try:
            async with httpx.AsyncClient(timeout=self.settings.http_timeout) as client:
                response = await client.patch(self.followup_url(token), json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"[{short_token}] Error while following up: {e}")
            return False

        if response.is_success:
            logger.info(f"[{short_token}] Followed up.")
            return True

        logger.error(f"[{short_token}] Error while following up: HTTP {response.status_code} {response.text}")
        return False
