import json
import logging
from typing import Any, Dict, Optional
import redis.asyncio as redis
from app.config import get_settings

logger = logging.getLogger(__name__)


class RedisSheetStorage:
    """Namespaced key-value store holding one synced sheet per user.

    Falls back to an in-process dict when no Redis host is configured.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self.redis_client = None
        self.prefix = self.settings.redis_prefix
        self.use_redis = bool(self.settings.redis_host)
        self._memory: Dict[str, str] = {}

    async def connect(self):
        if not self.use_redis:
            logger.info("No Redis host configured, synced sheets are kept in memory")
            return
        try:
            self.redis_client = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                decode_responses=True
            )
            await self.redis_client.ping()
            logger.info("Connected to Redis")
        except Exception as e:
            logger.error(f"Failed to connect to Redis, falling back to memory: {e}")
            self.redis_client = None
            self.use_redis = False

    async def disconnect(self):
        if self.redis_client:
            await self.redis_client.aclose()
            self.redis_client = None

    def _get_key(self, user_id: str) -> str:
        return f"{self.prefix}{user_id}"

    async def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        key = self._get_key(user_id)
        if self.redis_client:
            data = await self.redis_client.get(key)
        else:
            data = self._memory.get(key)
        if data is None:
            return None
        return json.loads(data)

    async def set(self, user_id: str, value: Dict[str, Any]) -> None:
        key = self._get_key(user_id)
        data = json.dumps(value)
        if self.redis_client:
            await self.redis_client.set(key, data)
        else:
            self._memory[key] = data
