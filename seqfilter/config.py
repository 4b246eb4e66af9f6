# seqfilter/config.py

import os
from dataclasses import dataclass, field

OUTPUT_FORMATS = ("python", "json")

_FALSE_STRINGS = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_STRINGS


# ---------------------------
# Structured configuration
# ---------------------------

@dataclass(frozen=True)
class FilterConfig:
    """How predicates are invoked.

    Values can be overridden via environment variables:
    - SEQFILTER_ADAPT_ARITY
    """

    # When enabled, predicates declaring fewer than three positional
    # parameters only receive the leading (element, index, sequence) args.
    adapt_arity: bool = field(
        default_factory=lambda: _env_flag("SEQFILTER_ADAPT_ARITY", True)
    )


@dataclass(frozen=True)
class OutputConfig:
    """Rendering of the example results printed by :mod:`seqfilter.examples`.

    Values can be overridden via environment variables:
    - SEQFILTER_OUTPUT_FORMAT ("python" or "json")
    """

    output_format: str = field(
        default_factory=lambda: os.getenv("SEQFILTER_OUTPUT_FORMAT", "python").strip().lower()
    )


FILTER_CONFIG = FilterConfig()
OUTPUT_CONFIG = OutputConfig()
