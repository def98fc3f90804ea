"""End to end tests for the evaluate pipeline."""

import pickle

import pytest

import sansu
from sansu import (
    evaluate,
    evaluate_isolated,
    format_result,
    EvaluateError,
    EvaluationTimeoutError,
    ExpressionError,
    ParseError,
    TokenizationError,
)
from sansu.config import Settings


class TestEvaluate:
    @pytest.mark.parametrize("n", [0, 1, 7, 42, 1000, 123456789, 10 ** 30])
    def test_literals(self, n):
        assert evaluate(str(n)) == n

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2 + 3", 5),
            ("4 * 5", 20),
            ("6 - 2", 4),
            ("8 / 2", 4),
            ("2+3*4", 14),
            ("8-6/2", 5),
            ("4 + 2 * 3 - 6 / 2", 7),
            ("10-3-2", 5),
            ("100/10/5", 2),
            ("(2+3)*4", 20),
            ("8 - (6 / 2)", 5),
            ("(4 + 2) * (3 - 6 / 2)", 0),
            ("-5", -5),
            ("2 * -3", -6),
            ("-2*3", -6),
            ("-2+3", 1),
            ("-(2+3)", -5),
            ("--3", 3),
            ("(4+8)*(6-5)/((3-2)*(2+2))", 3),
            ("-2 + (3 * 4)", 10),
            ("(2 + 2) * (2 + 2) - 2", 14),
            ("7/2", 3.5),
            ("1/4*4", 1),
        ],
    )
    def test_arithmetic(self, expression, expected):
        assert evaluate(expression) == expected

    def test_idempotent(self):
        expression = "(4+8)*(6-5)/((3-2)*(2+2))"
        assert evaluate(expression) == evaluate(expression) == 3

    def test_division_by_zero(self):
        with pytest.raises(EvaluateError):
            evaluate("5 / 0")

    @pytest.mark.parametrize(
        "expression, error",
        [
            ("2 +", ParseError),
            ("4 * ", ParseError),
            ("(2+3", ParseError),
            ("", ParseError),
            ("abc", TokenizationError),
            ("2 + x", TokenizationError),
            ("5/(3-3)", EvaluateError),
        ],
    )
    def test_error_kinds(self, expression, error):
        with pytest.raises(error):
            evaluate(expression)

    def test_errors_share_a_base(self):
        for expression in ["abc", "2+", "1/0"]:
            with pytest.raises(ExpressionError):
                evaluate(expression)

    def test_settings_bound_length(self):
        with pytest.raises(TokenizationError, match="too long"):
            evaluate("1+1+1", Settings(max_length=3))

    def test_settings_bound_depth(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            evaluate("((((1))))", Settings(max_depth=2))

    def test_env_settings(self, monkeypatch):
        monkeypatch.setenv("SANSU_MAX_LENGTH", "2")
        with pytest.raises(TokenizationError):
            evaluate("123")

    def test_long_flat_chain(self):
        assert evaluate("-".join(["1"] * 1500)) == -1498

    def test_chain_at_length_limit(self):
        expression = "+".join(["1"] * 5000)
        assert len(expression) == 9999
        assert evaluate(expression) == 5000

    @pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
    def test_blank_input(self, expression):
        with pytest.raises(ParseError, match="Empty expression"):
            evaluate(expression)

    def test_depth_above_interpreter_limit(self):
        expression = "(" * 3000 + "1" + ")" * 3000
        with pytest.raises(ParseError, match="nested too deeply"):
            evaluate(expression, Settings(max_depth=5000))


class TestErrors:
    def test_to_dict(self):
        with pytest.raises(ParseError) as exc_info:
            evaluate("(2+3")
        assert exc_info.value.to_dict() == {
            "code": "PARSE_ERROR",
            "message": "Expected closing parenthesis",
            "details": {},
            "error_class": "ParseError",
        }

    @pytest.mark.parametrize(
        "error, code",
        [
            (TokenizationError, "TOKENIZATION_ERROR"),
            (ParseError, "PARSE_ERROR"),
            (EvaluateError, "EVALUATE_ERROR"),
            (EvaluationTimeoutError, "EVALUATION_TIMEOUT"),
        ],
    )
    def test_codes_and_default_messages(self, error, code):
        instance = error()
        assert instance.code == code
        assert str(instance) == instance.message
        assert instance.details == {}

    def test_pickle_keeps_details(self):
        error = TokenizationError("bad", details={"position": 3}, diagnostic="x\n^\n")
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is TokenizationError
        assert restored.message == "bad"
        assert restored.details == {"position": 3}
        assert restored.diagnostic == "x\n^\n"


class TestEvaluateIsolated:
    def test_result(self):
        assert evaluate_isolated("(2+3)*4", timeout=30) == 20

    def test_error_propagates(self):
        with pytest.raises(ParseError):
            evaluate_isolated("2+", timeout=30)

    def test_timeout(self):
        # Millions of tokens take seconds to lex, far past the timeout
        expression = "1+" * 2_500_000 + "1"
        settings = Settings(max_length=len(expression))
        with pytest.raises(EvaluationTimeoutError) as exc_info:
            evaluate_isolated(expression, timeout=0.2, settings=settings)
        assert exc_info.value.details == {"timeout": 0.2}


class TestFormatResult:
    @pytest.mark.parametrize(
        "value, expected",
        [(14, "14"), (-6, "-6"), (3.0, "3"), (3.5, "3.5"), (-0.0, "0"), (0.25, "0.25")],
    )
    def test_format(self, value, expected):
        assert format_result(value) == expected

    def test_package_exports(self):
        assert sansu.evaluate is evaluate
        assert sansu.format_result(sansu.evaluate("7/2")) == "3.5"
