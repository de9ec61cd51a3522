"""
Calculation tree produced by evaluating a dice expression.

The tree is a read-only trace used for explaining results; it is never
re-evaluated.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Literal:
    value: Union[int, float]


@dataclass(frozen=True)
class Variable:
    name: str
    value: Union[int, float]


@dataclass(frozen=True)
class DieResult:
    value: Union[int, float]
    kept: bool = True


@dataclass(frozen=True)
class DiceRoll:
    # every die in the order the engine produced it, kept and dropped interleaved
    results: Tuple[DieResult, ...] = ()

    @property
    def kept(self) -> List[Union[int, float]]:
        return [r.value for r in self.results if r.kept]

    @property
    def dropped(self) -> List[Union[int, float]]:
        return [r.value for r in self.results if not r.kept]

    @property
    def total(self) -> Union[int, float]:
        return sum(self.kept)


@dataclass(frozen=True)
class Unary:
    op: str
    operand: "Calculation"


@dataclass(frozen=True)
class Binary:
    op: str
    lhs: "Calculation"
    rhs: "Calculation"


Calculation = Union[Literal, Variable, DiceRoll, Unary, Binary]


@dataclass(frozen=True)
class RollResult:
    result: Union[int, float]
    normalized: str
    calculation: Calculation
