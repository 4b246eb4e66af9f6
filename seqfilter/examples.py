"""Two worked examples of :func:`seqfilter.core.filter_sequence`.

Run with::

    python -m seqfilter.examples

which prints::

    [1, 10]
    [True]

Set ``SEQFILTER_OUTPUT_FORMAT=json`` to print JSON arrays instead.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from seqfilter.config import OUTPUT_CONFIG, OUTPUT_FORMATS, OutputConfig
from seqfilter.core import filter_sequence

NUMBERS = [1, 10, 15, 18, 20, 34]

# ``None`` stands in for both ``undefined`` and ``null``.
MIXED_VALUES = [1, None, None, 0, True]


def filter_small_numbers(numbers: Optional[List[Any]] = None) -> List[Any]:
    if numbers is None:
        numbers = NUMBERS
    return filter_sequence(numbers, lambda value: value < 15)


def filter_exact_true(values: Optional[List[Any]] = None) -> List[Any]:
    if values is None:
        values = MIXED_VALUES
    # ``is``, not ``==``: ``1 == True`` holds in Python.
    return filter_sequence(values, lambda value: value is True)


def format_result(values: List[Any], config: OutputConfig | None = None) -> str:
    cfg = config or OUTPUT_CONFIG
    if cfg.output_format == "python":
        return repr(values)
    if cfg.output_format == "json":
        return json.dumps(values, ensure_ascii=False)
    raise ValueError(
        f"Unknown output format {cfg.output_format!r}; expected one of {list(OUTPUT_FORMATS)}"
    )


def main() -> None:
    print(format_result(filter_small_numbers()))
    print(format_result(filter_exact_true()))


if __name__ == "__main__":
    main()
