"""
Tests for the calculation engine.
"""

import logging

import pytest

from backend.stackcalc import (
    CalculationEngine,
    ConfigError,
    EngineConfig,
    ErrorKind,
)


class TestCalculationEngine:
    """Tests for CalculationEngine."""

    def test_calculate_valid(self):
        """A valid expression yields a valid result with its tokens."""
        result = CalculationEngine().calculate("3ae4c66fb32")
        assert result.valid is True
        assert result.value == 235.0
        assert result.error is None
        assert result.stage is None
        assert len(result.expression) == 9

    def test_tokenize_failure(self):
        """Lexical errors are reported at the tokenize stage."""
        result = CalculationEngine().calculate("3g4")
        assert result.valid is False
        assert result.error_kind == ErrorKind.UNEXPECTED_CHARACTER
        assert result.stage == "tokenize"
        assert result.expression is None

    def test_evaluate_failure(self):
        """Semantic errors keep the tokens and report the evaluate stage."""
        result = CalculationEngine().calculate("a3")
        assert result.valid is False
        assert result.error_kind == ErrorKind.OPERATOR_WITHOUT_OPERANDS
        assert result.stage == "evaluate"
        assert result.expression is not None

    def test_dialect_override(self):
        """A dialect name can be passed per call."""
        engine = CalculationEngine()
        assert engine.calculate("3+2*4", dialect="symbolic").value == 20.0
        result = engine.calculate("3a2", dialect="symbolic")
        assert result.error_kind == ErrorKind.UNEXPECTED_CHARACTER

    def test_unknown_dialect_override(self):
        with pytest.raises(ConfigError):
            CalculationEngine().calculate("1", dialect="klingon")

    def test_configured_dialect(self):
        config = EngineConfig(dialect="mnemonic")
        engine = CalculationEngine(config)
        assert engine.parser.dialect.name == "mnemonic"
        assert engine.calculate("1+1").valid is False

    def test_calculate_many(self):
        results = CalculationEngine().calculate_many(["3a2c4", "32a2d2", "e3"])
        assert [r.valid for r in results] == [True, True, False]
        assert results[2].error_kind == ErrorKind.UNMATCHED_LEFT_PARENTHESIS

    def test_validate(self):
        engine = CalculationEngine()
        assert engine.validate("1a2") == (True, None)
        valid, error = engine.validate("")
        assert valid is False
        assert "Malformed expression" in error

    def test_from_file(self, tmp_path):
        path = tmp_path / "stackcalc.yaml"
        path.write_text("dialect: symbolic\n", encoding="utf-8")
        engine = CalculationEngine.from_file(path)
        assert engine.calculate("(1+2)*3").value == 9.0

    def test_trace_config(self, caplog):
        """trace: true turns on evaluator step logging."""
        engine = CalculationEngine(EngineConfig(trace=True))
        with caplog.at_level(logging.DEBUG, logger="backend.stackcalc"):
            engine.calculate("1a2")
        assert "result=3.0" in caplog.text

    def test_failure_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="backend.stackcalc.engine"):
            CalculationEngine().calculate("3ae4")
        assert "evaluate failed" in caplog.text


class TestCalculationResult:
    """Tests for CalculationResult output."""

    def test_to_dict_valid(self):
        data = CalculationEngine().calculate("3a2c4").to_dict()
        assert data["valid"] is True
        assert data["value"] == 20.0
        assert data["tokens"] == ["3", "+", "2", "*", "4"]
        assert data["error_kind"] is None

    def test_to_dict_invalid(self):
        data = CalculationEngine().calculate("f").to_dict()
        assert data["valid"] is False
        assert data["error_kind"] == "unexpected_right_parenthesis"
        assert data["stage"] == "evaluate"

    def test_summary(self):
        engine = CalculationEngine()
        assert engine.calculate("32a2d2").summary() == "32a2d2 = 17"
        assert engine.calculate("3x").summary().startswith("3x: Unexpected character")
