"""
Command definitions uploaded by ``register_commands.py``.
"""

from typing import Any, Dict, List
from app.discord.models import ApplicationCommandType, OptionType

WHISPER_OPTION = {
    "name": "whisper",
    "description": "If set, only you will see the result",
    "type": int(OptionType.BOOLEAN),
}

ROLL_OPTIONS = [
    {
        "name": "dice",
        "description": "The dice notation to evaluate, e.g. 4d6kh3 or 1d20+dex",
        "type": int(OptionType.STRING),
        "required": True,
    },
    WHISPER_OPTION,
]

COMMAND_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": "roll",
        "type": int(ApplicationCommandType.CHAT_INPUT),
        "description": "Evaluate dice notation",
        "options": ROLL_OPTIONS,
    },
    {
        "name": "r",
        "type": int(ApplicationCommandType.CHAT_INPUT),
        "description": "Evaluate dice notation (short for /roll)",
        "options": ROLL_OPTIONS,
    },
    {
        "name": "sync",
        "type": int(ApplicationCommandType.CHAT_INPUT),
        "description": "Sync your character sheet, or refresh the one already synced",
        "options": [
            {
                "name": "id",
                "description": "The ID of a public character sheet",
                "type": int(OptionType.STRING),
            },
        ],
    },
    {
        "name": "spell",
        "type": int(ApplicationCommandType.CHAT_INPUT),
        "description": "Look up a spell",
        "options": [
            {
                "name": "name",
                "description": "Spell name or ID",
                "type": int(OptionType.STRING),
                "required": True,
            },
            WHISPER_OPTION,
        ],
    },
]
