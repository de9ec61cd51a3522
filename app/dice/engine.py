"""
Adapter around the d20 dice engine.

d20 owns the grammar and the rolling. This module only feeds it an
expression with the caller's named variables substituted in, and turns
d20's expression tree into the service's own calculation tree.
"""

import logging
import re
from typing import Mapping, Optional, Union
import d20
from app.dice.calculation import Binary, Calculation, DiceRoll, DieResult, Literal, RollResult, Unary, Variable
from app.dice.renderer import format_number
from app.errors import DiceRollError

logger = logging.getLogger(__name__)

# annotations are matched first so identifiers inside them are left alone
_TOKEN = re.compile(r"\[[^\]]*\]|(?<![\w.])[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)?(?![\w.])")
# substituted variables carry this as their first annotation; user annotations may follow
_VARIABLE_TAG = "var:"
_VARIABLE_ANNOTATION = re.compile(r"^\[" + re.escape(_VARIABLE_TAG) + r"([^\]]*)\]")

Number = Union[int, float]


class DiceEngine:

    def substitute(self, expression: str, variables: Mapping[str, Number]) -> str:
        """Replace known variable names with parenthesised, tagged literals.

        ``str`` with value -1 becomes ``(-1) [var:str]``, so a minus typed by
        the user stays a separate unary operator.
        """
        if not variables:
            return expression

        def replace(match: "re.Match[str]") -> str:
            token = match.group(0)
            if token in variables:
                return f"({format_number(variables[token])}) [{_VARIABLE_TAG}{token}]"
            return token

        return _TOKEN.sub(replace, expression)

    def roll(self, expression: str, variables: Optional[Mapping[str, Number]] = None) -> RollResult:
        variables = dict(variables or {})
        source = self.substitute(expression, variables)

        # d20 evaluates totals lazily, so reading them can raise too
        try:
            rolled = d20.roll(source)
            root = rolled.expr.roll
            return RollResult(
                result=rolled.total,
                normalized=self._normalize(root, variables),
                calculation=self._convert(root, variables),
            )
        except d20.RollError as e:
            logger.info(f"Dice engine rejected {expression!r}: {e}")
            raise DiceRollError(str(e), details={"expression": expression}) from e

    def _variable_name(self, node: d20.Number, variables: Mapping[str, Number]) -> Optional[str]:
        match = _VARIABLE_ANNOTATION.match(node.annotation or "")
        if match and match.group(1) in variables:
            return match.group(1)
        return None

    def _convert(self, node: d20.Number, variables: Mapping[str, Number]) -> Calculation:
        if isinstance(node, (d20.Literal, d20.Parenthetical)):
            name = self._variable_name(node, variables)
            if name is not None:
                return Variable(name=name, value=node.total)

        if isinstance(node, d20.Literal):
            return Literal(value=node.number)

        if isinstance(node, d20.UnOp):
            return Unary(op=node.op, operand=self._convert(node.value, variables))

        if isinstance(node, d20.BinOp):
            return Binary(
                op=node.op,
                lhs=self._convert(node.left, variables),
                rhs=self._convert(node.right, variables),
            )

        if isinstance(node, d20.Parenthetical):
            return self._convert(node.value, variables)

        if isinstance(node, d20.Set):
            # Dice is a Set of Die; plain sets keep their members in order as well
            return DiceRoll(
                results=tuple(DieResult(value=value.number, kept=value.kept) for value in node.values),
            )

        raise DiceRollError(f"Unsupported expression node: {type(node).__name__}")

    def _normalize(self, node: d20.Number, variables: Mapping[str, Number]) -> str:
        if isinstance(node, (d20.Literal, d20.Parenthetical)):
            name = self._variable_name(node, variables)
            if name is not None:
                return name

        if isinstance(node, d20.Literal):
            return format_number(node.number)

        if isinstance(node, d20.UnOp):
            return f"{node.op}{self._normalize(node.value, variables)}"

        if isinstance(node, d20.BinOp):
            return f"{self._normalize(node.left, variables)} {node.op} {self._normalize(node.right, variables)}"

        if isinstance(node, d20.Parenthetical):
            return f"({self._normalize(node.value, variables)})" + self._operations(node)

        if isinstance(node, d20.Dice):
            return f"{node.num}d{node.size}" + self._operations(node)

        if isinstance(node, d20.Set):
            inner = ", ".join(self._normalize(value, variables) for value in node.values)
            if len(node.values) == 1:
                inner += ","
            return f"({inner})" + self._operations(node)

        return str(node.number)

    @staticmethod
    def _operations(node: d20.Number) -> str:
        return "".join(str(op) for op in getattr(node, "operations", None) or [])


dice_engine = DiceEngine()


def get_dice_engine() -> DiceEngine:
    return dice_engine
