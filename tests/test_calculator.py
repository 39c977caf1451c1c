import logging

import pytest

from siconvert import calculate, calculate_formatted
from siconvert.errors import ConvertError, EvaluateError, LexError, ParseError
from siconvert.observability import current_run_id, run_scope
from siconvert.units.algebra import Dimension


def test_calculate_runs_the_full_pipeline():
    result = calculate("60 mile / hr")
    assert result.dims == Dimension(meter=1, second=-1)
    assert result.magnitude == pytest.approx(60 * 0.44704)


def test_calculate_formatted_renders_units():
    assert calculate_formatted("1 km") == "1000 m1"
    assert calculate_formatted("2 N") == "2 m1 s-2 kg1"


@pytest.mark.parametrize(
    "text, error",
    [("1 $ 2", LexError), ("(1 + 2", ParseError), ("1 m + 1 s", EvaluateError), ("2 parsec", EvaluateError)],
)
def test_calculate_surfaces_stage_errors(text, error):
    with pytest.raises(error) as excinfo:
        calculate(text)
    assert isinstance(excinfo.value, ConvertError)


def test_calculate_logs_outcome_with_run_id(caplog):
    with run_scope("run-123"), caplog.at_level(logging.INFO, logger="siconvert.observability"):
        calculate("1 + 1")
        with pytest.raises(ParseError):
            calculate("1 +")

    payloads = [record.payload for record in caplog.records]
    assert payloads[0] == {"run_id": "run-123", "expression": "1 + 1", "ok": True}
    assert payloads[1]["ok"] is False
    assert payloads[1]["stage"] == "parse"


def test_run_scope_generates_and_restores_ids():
    assert current_run_id() is None
    with run_scope() as outer:
        assert outer and current_run_id() == outer
        with run_scope("inner") as inner:
            assert inner == "inner"
            assert current_run_id() == "inner"
        assert current_run_id() == outer
    assert current_run_id() is None
