"""Predicate filtering for ordered sequences.

- :mod:`seqfilter.core` - ``filter_sequence`` and ``FilterableList`` (pure, no deps)
- :mod:`seqfilter.frames` - numpy / pandas flavoured filters
- :mod:`seqfilter.examples` - console examples (``python -m seqfilter.examples``)
"""

from seqfilter.core import FilterableList, InvalidPredicate, filter_sequence

__all__ = ["FilterableList", "InvalidPredicate", "filter_sequence"]
