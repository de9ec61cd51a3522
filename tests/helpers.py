import json
from app.discord.models import CommandInteraction, interaction_adapter


def command_payload(name, options=None, user_id="U1", token="tok_abcdefghijklmnop", member=True):
    user = {"id": user_id, "username": "tester"}
    payload = {
        "type": 2,
        "id": "interaction-1",
        "application_id": "123456789012345678",
        "token": token,
        "data": {"id": "cmd-1", "name": name, "type": 1, "options": options or []},
    }
    if member:
        payload["member"] = {"user": user}
    else:
        payload["user"] = user
    return payload


def make_interaction(name, options=None, **kwargs) -> CommandInteraction:
    return interaction_adapter.validate_python(command_payload(name, options, **kwargs))


def to_body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


def string_option(name, value):
    return {"name": name, "type": 3, "value": value}


def bool_option(name, value=True):
    return {"name": name, "type": 5, "value": value}


