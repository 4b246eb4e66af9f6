"""Predicate filtering over ordered, indexable sequences.

The single operation here walks a sequence once, front to back, and keeps
every element for which the predicate returns a truthy value::

    filter_sequence([1, 10, 15, 18, 20, 34], lambda value: value < 15)
    # -> [1, 10]

Predicates are called with ``(element, index, sequence)``. Callables that
declare fewer positional parameters only receive the leading ones, so a plain
``lambda value: ...`` works. An optional ``context`` (anything but ``None``) is
bound in front of those arguments, the same way an instance is bound to a method.

The input is never mutated and the elements are not copied.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Sequence

from seqfilter.config import FILTER_CONFIG, FilterConfig

__all__ = ["FilterableList", "InvalidPredicate", "filter_sequence", "make_caller"]

_MAX_ARGS = 3


class InvalidPredicate(TypeError):
    """Raised when the predicate passed to a filter is not callable."""

    def __init__(self, predicate: Any) -> None:
        self.predicate = predicate
        super().__init__(f"predicate must be callable, got {type(predicate).__name__}")


def _positional_arity(func: Callable[..., Any]) -> int:
    """Return how many of ``(element, index, sequence)`` ``func`` accepts.

    ``*args`` counts as accepting all of them. Callables without an
    inspectable signature (builtins such as ``bool`` or ``int``) get the
    element only.
    """

    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 1

    n = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return _MAX_ARGS
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            n += 1
    return min(n, _MAX_ARGS)


def make_caller(
    predicate: Callable[..., Any],
    context: Any = None,
    *,
    config: FilterConfig | None = None,
) -> Callable[[Any, int, Any], bool]:
    """Validate ``predicate`` and return ``call(element, index, sequence) -> bool``.

    Shared by every filter flavour so they agree on binding, argument
    adaptation and truthiness.
    """

    if not callable(predicate):
        raise InvalidPredicate(predicate)

    cfg = config or FILTER_CONFIG
    bound = predicate if context is None else functools.partial(predicate, context)
    n_args = _positional_arity(bound) if cfg.adapt_arity else _MAX_ARGS

    def call(element: Any, index: int, sequence: Any) -> bool:
        return bool(bound(*(element, index, sequence)[:n_args]))

    return call


def filter_sequence(
    sequence: Sequence[Any],
    predicate: Callable[..., Any],
    context: Any = None,
    *,
    config: FilterConfig | None = None,
) -> list[Any]:
    """Return a new list of the elements of ``sequence`` accepted by ``predicate``.

    Every index from ``0`` to ``len(sequence) - 1`` is visited exactly once, in
    order. Each verdict is interpreted with ``bool()``. ``None`` elements get
    no special treatment.

    Raises:
        InvalidPredicate: ``predicate`` is not callable. Checked before the
            sequence is touched.

    Any exception raised by the predicate propagates as-is; the elements
    collected so far are discarded.
    """

    call = make_caller(predicate, context, config=config)

    kept: list[Any] = []
    n = len(sequence)
    for i in range(n):
        element = sequence[i]
        if call(element, i, sequence):
            kept.append(element)
    return kept


class FilterableList(list):
    """``list`` with a :meth:`filter` method.

    >>> FilterableList([1, None, 0, True]).filter(lambda v: v is True)
    [True]
    """

    def filter(
        self,
        predicate: Callable[..., Any],
        context: Any = None,
        *,
        config: FilterConfig | None = None,
    ) -> "FilterableList":
        return FilterableList(filter_sequence(self, predicate, context, config=config))
