# -*- coding: utf-8 -*-
"""Per-element transforms, and accumulation (a lazy running fold).

``accumulate`` is a scan in the sense of Haskell's ``scanl1`` (or ``scanl``,
when an initial value is given), and of ``itertools.accumulate``.
"""

__all__ = ["transform", "star_transform", "accumulate"]

from operator import add

from .lazy import lazy

@lazy
def transform(iterable, func):
    """Yield ``func(x)`` for each element ``x``, in order.

    One output element per input element.
    """
    for x in iterable:
        yield func(x)

@lazy
def star_transform(iterable, func):
    """Like ``transform``, but spread each element into the arguments of ``func``.

    Yield ``func(*x)`` for each element ``x``. Useful when the elements are
    composites, such as the pairs from ``zip``::

        from operator import mul
        partial_dots = accumulate(star_transform(zip((1., 2., 3.), (3., 2., 1.)), mul))
        assert tuple(partial_dots) == (3., 7., 10.)

    One output element per input element, as for ``transform``.
    """
    for x in iterable:
        yield func(*x)

_noinit = object()  # sentinel; `None` is a valid initial value
@lazy
def accumulate(iterable, func=add, initial=_noinit):
    """Running fold. Yield the accumulator before each update, and once at the end.

    Without ``initial``, the first element is the initial accumulator, and the
    fold starts from the second element. With ``initial``, that is the initial
    accumulator, and the fold starts from the first element. Then, for each
    element ``e``, yield the accumulator, and only after that (on the next
    pull) update it to ``func(acc, e)``. When the input runs out, yield the
    final accumulator.

    So for an input of length ``n``, the output has ``n`` values without
    ``initial`` (the first is the first element, unchanged; the last is the
    full fold), and ``n + 1`` values with it::

        from operator import mul
        assert tuple(accumulate(range(5, 10))) == (5, 11, 18, 26, 35)
        assert tuple(accumulate(range(5, 9), mul, initial=1)) == (1, 5, 30, 210, 1680)

    Empty input gives an empty output when there is no ``initial`` (no default
    value, no error); with ``initial``, it gives just ``initial``.

    The default ``func`` is ``operator.add``, so strings and other
    concatenables accumulate too::

        assert tuple(accumulate(("AB", "CD", "AB"))) == ("AB", "ABCD", "ABCDAB")

    If ``func`` raises, the exception surfaces from the pull that would have
    produced the updated accumulator.
    """
    it = iter(iterable)
    if initial is _noinit:
        try:
            acc = next(it)
        except StopIteration:
            return
    else:
        acc = initial
    for e in it:
        yield acc
        acc = func(acc, e)
    yield acc
