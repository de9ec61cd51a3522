import logging
from typing import List, Optional
import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from app.config import get_settings
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

# exact-id lookup and fuzzy name search in one round trip
SPELL_SEARCH_QUERY = """
query SpellSearch($query: String!) {
  spell(id: $query) {
    id
    name
    level
    school
  }
  spells(search: $query) {
    id
    name
    level
    school
  }
}
"""


class Spell(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    level: Optional[int] = None
    school: Optional[str] = None


class SpellSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exact: Optional[Spell] = Field(default=None, alias="spell")
    matches: List[Spell] = Field(default_factory=list, alias="spells")

    @field_validator("matches", mode="before")
    @classmethod
    def _null_matches(cls, value):
        return value or []


class SpellServiceClient:

    service_name = "spell service"

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.settings = get_settings()
        self.url = url or self.settings.spell_api_url
        self.timeout = timeout if timeout is not None else self.settings.http_timeout

    async def search(self, term: str) -> SpellSearchResult:
        request_data = {
            "query": SPELL_SEARCH_QUERY,
            "variables": {"query": term},
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=request_data)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Spell search for {term!r} failed: {e}")
            raise UpstreamError(self.service_name, str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(self.service_name, "Response is not JSON") from e

        if payload.get("errors"):
            logger.error(f"Spell search for {term!r} returned errors: {payload['errors']}")
            raise UpstreamError(self.service_name, "GraphQL query failed", details={"errors": payload["errors"]})

        try:
            return SpellSearchResult.model_validate(payload.get("data") or {})
        except ValidationError as e:
            raise UpstreamError(self.service_name, f"Malformed search payload: {e}") from e

    def image_url(self, spell: Spell) -> str:
        return self.settings.spell_image_url_template.format(id=spell.id)
