from __future__ import annotations

import pytest

from seqfilter import examples
from seqfilter.config import OutputConfig


def test_example_results() -> None:
    assert examples.filter_small_numbers() == [1, 10]
    assert examples.filter_exact_true() == [True]


def test_examples_leave_module_data_untouched() -> None:
    examples.filter_small_numbers()
    examples.filter_exact_true()

    assert examples.NUMBERS == [1, 10, 15, 18, 20, 34]
    assert examples.MIXED_VALUES == [1, None, None, 0, True]


def test_main_prints_both_results(monkeypatch, capsys) -> None:
    monkeypatch.setattr(examples, "OUTPUT_CONFIG", OutputConfig(output_format="python"))

    examples.main()

    assert capsys.readouterr().out == "[1, 10]\n[True]\n"


def test_main_json_output(monkeypatch, capsys) -> None:
    monkeypatch.setattr(examples, "OUTPUT_CONFIG", OutputConfig(output_format="json"))

    examples.main()

    assert capsys.readouterr().out == "[1, 10]\n[true]\n"


def test_format_result_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown output format"):
        examples.format_result([1], OutputConfig(output_format="yaml"))


def test_example_functions_accept_other_inputs() -> None:
    assert examples.filter_small_numbers([14, 15, -3]) == [14, -3]
    assert examples.filter_exact_true((True, 1, "true", True)) == [True, True]
