import pytest
from unittest.mock import AsyncMock, Mock
from fastapi.testclient import TestClient
from app.api.interaction_routes import get_interaction_handler
from app.commands import build_dispatcher
from app.dice.engine import DiceEngine
from app.discord.handler import InteractionHandler
from app.discord.signature import SignatureVerifier
from app.main import app
from app.sheets.cache import SheetCache
from tests.helpers import command_payload, string_option, to_body


class TestAPIEndpoints:
    @pytest.fixture
    def publisher(self):
        publisher = Mock()
        publisher.schedule = Mock()
        return publisher

    @pytest.fixture
    def client(self, public_key_hex, storage, mock_sheet_client, publisher):
        spell_client = Mock()
        spell_client.search = AsyncMock()
        handler = InteractionHandler(
            verifier=SignatureVerifier(public_key=public_key_hex),
            dispatcher=build_dispatcher(SheetCache(storage, mock_sheet_client), DiceEngine(), spell_client),
            publisher=publisher,
        )
        app.dependency_overrides[get_interaction_handler] = lambda: handler
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_health_endpoint(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"

    def test_ping(self, client, sign, publisher):
        body = b'{"type": 1, "token": "t"}'

        response = client.post("/", content=body, headers=sign(body))

        assert response.status_code == 200
        assert response.json() == {"type": 1}
        publisher.schedule.assert_not_called()

    def test_command_gets_deferred_ack_and_schedules_follow_up(self, client, sign, publisher):
        body = to_body(command_payload("roll", [string_option("dice", "1d20")]))

        response = client.post("/", content=body, headers=sign(body))

        assert response.status_code == 200
        assert response.json() == {"type": 5, "data": {"content": "-# _Working on it..._", "flags": 0}}
        publisher.schedule.assert_called_once()
        scheduled = publisher.schedule.call_args[0][1]
        scheduled.close()

    def test_invalid_signature(self, client, sign, publisher, mock_sheet_client):
        body = to_body(command_payload("sync", [string_option("id", "sheet-abc")]))

        response = client.post("/", content=body, headers=sign(b"forged"))

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid request"}
        publisher.schedule.assert_not_called()
        mock_sheet_client.fetch.assert_not_called()

    def test_missing_headers(self, client, publisher):
        response = client.post("/", content=b'{"type": 1}')

        assert response.status_code == 400
        publisher.schedule.assert_not_called()

    def test_malformed_payload(self, client, sign):
        body = b'{"type": 2, "token": "t"}'

        response = client.post("/", content=body, headers=sign(body))

        assert response.status_code == 400

    @pytest.mark.parametrize("method", ["get", "head", "options", "put", "patch", "delete"])
    def test_non_post_is_rejected(self, client, method):
        response = getattr(client, method)("/")

        assert response.status_code == 400
