from typing import Union
from app.dice.calculation import Binary, Calculation, DiceRoll, Literal, Unary, Variable


def format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_dice(roll: DiceRoll) -> str:
    """Bracketed die values in engine order, dropped ones struck through."""
    parts = []
    for die in roll.results:
        text = format_number(die.value)
        parts.append(text if die.kept else f"~~{text}~~")
    return "[" + ", ".join(parts) + "]"


def render_calculation(calc: Calculation) -> str:
    """Stringify a calculation tree into the trail shown after a roll.

    No parentheses are reinserted; the normalized expression printed next
    to the trail already shows grouping.
    """
    if isinstance(calc, Literal):
        return format_number(calc.value)
    if isinstance(calc, Variable):
        return format_number(calc.value)
    if isinstance(calc, DiceRoll):
        return render_dice(calc)
    if isinstance(calc, Unary):
        return calc.op + render_calculation(calc.operand)
    if isinstance(calc, Binary):
        return render_calculation(calc.lhs) + " " + calc.op + " " + render_calculation(calc.rhs)
    raise TypeError(f"Unknown calculation node: {type(calc).__name__}")
