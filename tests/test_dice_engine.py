import pytest
from app.dice.calculation import Binary, DiceRoll, Literal, Unary, Variable
from app.dice.engine import DiceEngine
from app.dice.renderer import render_calculation
from app.errors import DiceRollError, UserFacingError


class TestDiceEngine:
    @pytest.fixture
    def engine(self):
        return DiceEngine()

    def test_single_sided_die_is_deterministic(self, engine):
        rolled = engine.roll("1d1")

        assert rolled.result == 1
        assert rolled.normalized == "1d1"
        assert isinstance(rolled.calculation, DiceRoll)
        assert render_calculation(rolled.calculation) == "[1]"

    def test_arithmetic_tree(self, engine):
        rolled = engine.roll("2d1+3")

        assert rolled.result == 5
        assert rolled.normalized == "2d1 + 3"
        assert isinstance(rolled.calculation, Binary)
        assert rolled.calculation.op == "+"
        assert rolled.calculation.rhs == Literal(3)
        assert render_calculation(rolled.calculation) == "[1, 1] + 3"

    def test_keep_highest_marks_dropped_dice(self, engine):
        rolled = engine.roll("4d1kh3")

        assert rolled.result == 3
        assert rolled.normalized == "4d1kh3"
        assert len(rolled.calculation.kept) == 3
        assert len(rolled.calculation.dropped) == 1
        assert render_calculation(rolled.calculation).count("~~1~~") == 1

    def test_parentheses_stay_in_normalized_but_not_in_trail(self, engine):
        rolled = engine.roll("(1d1+1)*2")

        assert rolled.result == 4
        assert rolled.normalized == "(1d1 + 1) * 2"
        assert render_calculation(rolled.calculation) == "[1] + 1 * 2"

    def test_variables_become_variable_nodes(self, engine):
        rolled = engine.roll("1d1+str", {"str": 3})

        assert rolled.result == 4
        assert rolled.normalized == "1d1 + str"
        assert rolled.calculation.rhs == Variable(name="str", value=3)
        assert render_calculation(rolled.calculation) == "[1] + 3"

    def test_dotted_variable_names(self, engine):
        rolled = engine.roll("1d1 + dex.save + pb", {"dex.save": 2, "dex": 1, "pb": 3})

        assert rolled.result == 6
        assert rolled.normalized == "1d1 + dex.save + pb"

    def test_negative_variable_value(self, engine):
        rolled = engine.roll("1d1+cha", {"cha": -1})

        assert rolled.result == 0
        assert rolled.calculation.rhs == Variable(name="cha", value=-1)
        assert render_calculation(rolled.calculation) == "[1] + -1"

    def test_variable_names_inside_dice_notation_are_untouched(self, engine):
        assert engine.substitute("4d6kh3", {"kh": 1, "d": 2}) == "4d6kh3"

    def test_unknown_variable_is_a_roll_error(self, engine):
        with pytest.raises(DiceRollError):
            engine.roll("1d20+str")

    def test_syntax_error_is_user_facing(self, engine):
        with pytest.raises(UserFacingError) as exc_info:
            engine.roll("1d")

        assert exc_info.value.message
        assert exc_info.value.details["expression"] == "1d"

    def test_user_negation_of_variable_is_kept(self, engine):
        rolled = engine.roll("-str", {"str": 2})

        assert rolled.result == -2
        assert rolled.normalized == "-str"
        assert rolled.calculation == Unary(op="-", operand=Variable(name="str", value=2))
        assert render_calculation(rolled.calculation) == "-2"

    def test_user_negation_of_negative_variable(self, engine):
        rolled = engine.roll("1d1-cha", {"cha": -1})

        assert rolled.result == 2
        assert rolled.normalized == "1d1 - cha"
        assert render_calculation(rolled.calculation) == "[1] - -1"

    def test_user_annotation_after_variable(self, engine):
        rolled = engine.roll("1d1+str [strength]", {"str": 2})

        assert rolled.result == 3
        assert rolled.normalized == "1d1 + str"
        assert rolled.calculation.rhs == Variable(name="str", value=2)

    def test_evaluation_error_is_a_roll_error(self, engine):
        with pytest.raises(DiceRollError) as exc_info:
            engine.roll("1d1/0")

        assert "zero" in exc_info.value.message.lower()
