#!/usr/bin/env python3
"""
One-shot registration of the slash commands.

Replaces the application's whole global command list in a single PUT.
"""

import sys
import httpx
from app.config import get_settings
from app.commands.definitions import COMMAND_DEFINITIONS


def register_commands() -> int:
    settings = get_settings()

    if not settings.discord_application_id or not settings.discord_bot_token:
        print("CLIENT_ID and BOT_TOKEN must be defined.", file=sys.stderr)
        return 1

    url = f"{settings.discord_api_base}/applications/{settings.discord_application_id}/commands"
    response = httpx.put(
        url,
        json=COMMAND_DEFINITIONS,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bot {settings.discord_bot_token}",
        },
        timeout=30.0,
    )

    if not response.is_success:
        print(f"Registration failed: HTTP {response.status_code} {response.text}", file=sys.stderr)
        return 1

    names = ", ".join(f"/{command['name']}" for command in response.json())
    print(f"Registered {names}")
    return 0


if __name__ == "__main__":
    sys.exit(register_commands())
