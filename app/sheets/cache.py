"""
Single-slot-per-user cache of the last synced character sheet.

The store durably keeps the sheet *identity*; content is revalidated
against the sheet service on every read and the slot rewritten. There is
no expiry and no locking: the last write for a user wins.
"""

import logging
from typing import Optional
from app.core.storage.redis_storage import RedisSheetStorage
from app.sheets.client import SheetServiceClient
from app.sheets.models import Sheet

logger = logging.getLogger(__name__)


class SheetCache:

    def __init__(self, storage: RedisSheetStorage, client: SheetServiceClient):
        self.storage = storage
        self.client = client

    async def get_cached_id(self, user_id: str) -> Optional[str]:
        entry = await self.storage.get(user_id)
        if entry is None:
            return None
        return entry.get("id")

    async def get(self, user_id: str) -> Optional[Sheet]:
        """Return the user's sheet freshly fetched, or ``None`` if nothing was ever synced.

        Fetch failures propagate and leave the stored entry untouched.
        """
        sheet_id = await self.get_cached_id(user_id)
        if sheet_id is None:
            return None
        return await self.put(user_id, sheet_id)

    async def put(self, user_id: str, sheet_id: str) -> Sheet:
        sheet = await self.client.fetch(sheet_id)
        entry = sheet.to_storage()
        # the slot is keyed by the id used to fetch it, whatever the payload says
        entry["id"] = sheet_id
        await self.storage.set(user_id, entry)
        logger.info(f"Stored sheet {sheet_id} ({sheet.name}) for user {user_id}")
        return sheet
