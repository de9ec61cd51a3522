import pytest
from unittest.mock import AsyncMock, Mock
from nacl.signing import SigningKey
from app.core.storage.redis_storage import RedisSheetStorage
from app.sheets.models import Sheet


@pytest.fixture
def mock_settings():
    """Mock settings for testing."""
    settings = Mock()
    settings.discord_public_key = ""
    settings.discord_application_id = "123456789012345678"
    settings.discord_bot_token = "test-bot-token"
    settings.discord_api_base = "https://discord.test/api/v10"
    settings.sheet_api_base = "https://sheets.test/api"
    settings.spell_api_url = "https://spells.test/graphql"
    settings.spell_image_url_template = "https://spells.test/cards/{id}.png"
    settings.http_timeout = None
    settings.redis_host = None
    settings.redis_port = 6379
    settings.redis_db = 0
    settings.redis_prefix = "test:synced_sheet:"
    settings.log_level = "INFO"
    return settings


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def public_key_hex(signing_key):
    return signing_key.verify_key.encode().hex()


@pytest.fixture
def sign(signing_key):
    """Return headers carrying a valid signature for ``body``."""
    def _sign(body: bytes, timestamp: str = "1700000000") -> dict:
        signature = signing_key.sign(timestamp.encode() + body).signature.hex()
        return {
            "x-signature-ed25519": signature,
            "x-signature-timestamp": timestamp,
        }
    return _sign


@pytest.fixture
def storage(mock_settings):
    return RedisSheetStorage(settings=mock_settings)


@pytest.fixture
def sheet_payload():
    return {
        "id": "sheet-abc",
        "owner": {"id": "owner-1", "name": "Ash", "picture": "https://example.test/ash.png"},
        "publiclyVisible": True,
        "name": "Brynja Stormhold",
        "species": "Dwarf",
        "class": "Fighter",
        "level": 5,
        "abilityScores": {
            "str": {"base": 15, "bonus": 2, "tempBonus": 0, "proficient": True},
            "dex": {"base": 12, "bonus": 0, "tempBonus": 0, "proficient": False},
            "con": {"base": 14, "bonus": 1, "tempBonus": 1, "proficient": True},
            "int": {"base": 8, "bonus": 0, "tempBonus": 0, "proficient": False},
            "wis": {"base": 10, "bonus": 0, "tempBonus": 0, "proficient": False},
            "cha": {"base": 9, "bonus": 0, "tempBonus": 0, "proficient": False},
        },
    }


@pytest.fixture
def sheet(sheet_payload):
    return Sheet.model_validate(sheet_payload)

@pytest.fixture
def mock_sheet_client(sheet):
    client = Mock()
    client.fetch = AsyncMock(return_value=sheet)
    return client
