# -*- coding: utf-8 -*-
"""Sequences made from scratch, or replayed from an existing iterable.

``count`` and ``repeat`` need no input. ``cycle`` replays an input forever,
either by re-walking it (if it can be restarted), or from a private buffer
filled during the first pass (if it can't).
"""

__all__ = ["count", "repeat",
           "cycle", "cycle_buffered", "cycle_unbuffered",
           "ismultipass"]

from collections.abc import Iterable, Iterator
from warnings import warn

from .lazy import LazySequence, lazy

@lazy
def count(start=0, step=1):
    """Yield start, start + step, start + 2*step, ... forever.

    The kth term is computed as ``start + k * step`` rather than by adding
    ``step`` to the previous term, so floating-point roundoff does not
    accumulate::

        assert tuple(islice(count(1.0, 2.0), 4)) == (1.0, 3.0, 5.0, 7.0)

    Anything that supports ``start + int * step`` works, e.g. ``Fraction``,
    ``Decimal``, ``complex``, or a ``datetime`` with a ``timedelta`` step.

    Overflow follows the rules of the numeric type; Python integers don't
    overflow.
    """
    k = 0
    while True:
        yield start + k * step
        k += 1

def repeat(value, times=None):
    """Yield value, either forever, or exactly ``times`` times.

    ``times=0`` gives an empty sequence. The same object is yielded each time;
    no copies are made.
    """
    if times is None:
        def forever():
            while True:
                yield value
        return LazySequence(forever())
    if not isinstance(times, int):
        raise TypeError(f"expected integer times, got {type(times)} with value {repr(times)}")
    if times < 0:
        raise ValueError(f"expected times >= 0, got {times}")
    def finitely():
        for _ in range(times):
            yield value
    return LazySequence(finitely())

def ismultipass(iterable):
    """Return whether iterable can be walked from its start any number of times.

    Iterators (generators, file objects, ``LazySequence`` instances, ...)
    are single-pass: iterating over them consumes them. Any other iterable
    (a list, tuple, str, range, dict, set, or a custom class whose
    ``__iter__`` returns a fresh iterator) is taken to be multi-pass.
    """
    return isinstance(iterable, Iterable) and not isinstance(iterable, Iterator)

def cycle(iterable):
    """Yield the elements of iterable, then again from the start, forever.

    Dispatch on the capabilities of ``iterable``: if it is multi-pass (see
    ``ismultipass``), re-walk it each time (``cycle_unbuffered``, no extra
    memory). Otherwise, buffer it during the first pass (``cycle_buffered``,
    memory O(n)).

    In both cases, an empty input gives an empty sequence.

    Examples::

        assert tuple(islice(cycle("ab"), 5)) == ("a", "b", "a", "b", "a")
        assert tuple(islice(cycle(x for x in "ab"), 5)) == ("a", "b", "a", "b", "a")
        assert tuple(cycle(())) == ()
    """
    if not isinstance(iterable, Iterable):
        raise TypeError(f"expected an iterable, got {type(iterable)} with value {repr(iterable)}")
    if ismultipass(iterable):
        return cycle_unbuffered(iterable)
    return cycle_buffered(iterable)

@lazy
def cycle_buffered(iterable):
    """Cycle through iterable, remembering the first pass.

    Each element is yielded, and copied into a private buffer, as the input is
    walked for the first (and only) time. Once the input runs out, the buffer
    is replayed forever.

    Good for single-pass inputs. The input is consumed exactly once.

    If the input is empty, the result is empty (it does not spin forever
    looking for elements).
    """
    buffer = []
    for x in iterable:
        yield x
        buffer.append(x)
    if not buffer:
        return
    while True:
        yield from buffer

def cycle_unbuffered(iterable):
    """Cycle through a multi-pass iterable, re-walking it from the start each time.

    No buffer is allocated. ``iterable`` must be restartable (see
    ``ismultipass``); an iterator raises ``TypeError``, use ``cycle_buffered``
    (or just ``cycle``) for those.

    The input is re-read on each pass, so changes made to it between passes
    are seen. Don't mutate it in the middle of a pass.

    If a pass produces no elements, the sequence ends, instead of looping
    forever doing nothing. An empty input thus gives an empty sequence. If
    the empty pass follows a non-empty one, the input was not restartable
    after all; a ``RuntimeWarning`` is emitted in that case.
    """
    if not isinstance(iterable, Iterable):
        raise TypeError(f"expected an iterable, got {type(iterable)} with value {repr(iterable)}")
    if not ismultipass(iterable):
        raise TypeError(f"expected a multi-pass iterable, got {type(iterable)} with value {repr(iterable)}; use cycle_buffered")
    def cycler():
        passes = 0
        while True:
            empty = True
            for x in iterable:
                empty = False
                yield x
            if empty:
                if passes:
                    warn(f"cycle_unbuffered: {type(iterable)} produced nothing on pass {passes + 1}, though it was not empty before; stopping.",
                         RuntimeWarning, stacklevel=3)
                return
            passes += 1
    return LazySequence(cycler())
