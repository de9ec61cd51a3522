from app.dice.calculation import Binary, Calculation, DiceRoll, DieResult, Literal, RollResult, Unary, Variable
from app.dice.engine import DiceEngine, get_dice_engine
from app.dice.renderer import render_calculation

__all__ = [
    "Binary",
    "Calculation",
    "DiceRoll",
    "DieResult",
    "Literal",
    "RollResult",
    "Unary",
    "Variable",
    "DiceEngine",
    "get_dice_engine",
    "render_calculation",
]
