from app.dice.calculation import Binary, DiceRoll, DieResult, Literal, Unary, Variable
from app.dice.renderer import render_calculation


class TestRenderCalculation:
    def test_literal(self):
        assert render_calculation(Literal(7)) == "7"

    def test_integral_float_renders_without_decimals(self):
        assert render_calculation(Literal(3.0)) == "3"
        assert render_calculation(Literal(1.5)) == "1.5"

    def test_variable_renders_its_value(self):
        assert render_calculation(Variable(name="dex", value=3)) == "3"

    def test_dice_keeps_engine_order_and_strikes_dropped(self):
        roll = DiceRoll(
            results=(DieResult(4), DieResult(1, kept=False), DieResult(6), DieResult(3)),
        )

        assert render_calculation(roll) == "[4, ~~1~~, 6, 3]"
        assert roll.kept == [4, 6, 3]
        assert roll.dropped == [1]
        assert roll.total == 13

    def test_binary_recurses_without_parentheses(self):
        tree = Binary(
            op="*",
            lhs=Binary(op="+", lhs=DiceRoll((DieResult(2),)), rhs=Literal(1)),
            rhs=Variable(name="pb", value=3),
        )

        assert render_calculation(tree) == "[2] + 1 * 3"

    def test_unary(self):
        assert render_calculation(Unary(op="-", operand=DiceRoll((DieResult(3),)))) == "-[3]"

    def test_rendering_is_pure(self):
        tree = Binary(
            op="+",
            lhs=DiceRoll((DieResult(5, kept=False), DieResult(17))),
            rhs=Variable(name="str.save", value=6),
        )

        first = render_calculation(tree)
        second = render_calculation(tree)

        assert first == second == "[~~5~~, 17] + 6"
