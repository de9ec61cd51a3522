from app.commands.base import BaseCommand, CommandContext, CommandRegistry
from app.commands.dispatcher import CommandDispatcher
from app.commands.roll import RollCommand
from app.commands.spell import SpellCommand
from app.commands.sync import SyncCommand
from app.dice.engine import DiceEngine
from app.sheets.cache import SheetCache
from app.spells.client import SpellServiceClient


def build_dispatcher(
    sheet_cache: SheetCache,
    engine: DiceEngine,
    spell_client: SpellServiceClient,
) -> CommandDispatcher:
    registry = CommandRegistry()
    registry.register(RollCommand(engine, sheet_cache))
    registry.register(SyncCommand(sheet_cache))
    registry.register(SpellCommand(spell_client))
    return CommandDispatcher(registry)


__all__ = [
    "BaseCommand",
    "CommandContext",
    "CommandDispatcher",
    "CommandRegistry",
    "RollCommand",
    "SpellCommand",
    "SyncCommand",
    "build_dispatcher",
]
