import logging
from typing import Optional
import httpx
from pydantic import ValidationError
from app.config import get_settings
from app.errors import SheetNotFoundError, UpstreamError
from app.sheets.models import Sheet

logger = logging.getLogger(__name__)


class SheetServiceClient:
    """Reads character sheets from the external sheet service."""

    service_name = "sheet service"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.settings = get_settings()
        self.base_url = (base_url or self.settings.sheet_api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.http_timeout

    async def fetch(self, sheet_id: str) -> Sheet:
        url = f"{self.base_url}/characters/{sheet_id}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach {self.service_name} for sheet {sheet_id}: {e}")
            raise UpstreamError(self.service_name, str(e)) from e

        if response.status_code in (403, 404):
            raise SheetNotFoundError(sheet_id, details={"status_code": response.status_code})

        if not response.is_success:
            logger.error(f"Sheet {sheet_id} fetch returned HTTP {response.status_code}")
            raise UpstreamError(
                self.service_name,
                f"HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            sheet = Sheet.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(self.service_name, f"Malformed sheet payload: {e}") from e

        if not sheet.publicly_visible:
            raise SheetNotFoundError(sheet_id, details={"reason": "not public"})

        return sheet
