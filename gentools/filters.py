# -*- coding: utf-8 -*-
"""Filtering and slicing combinators.

Each of these consumes one input (``compress`` consumes two) and yields a
possibly shorter sequence of the same elements, in the original order.

The argument order is input first, then the function, for all combinators
in ``gentools``. Note ``filter`` shadows the builtin when star-imported.
"""

__all__ = ["filter", "take_while", "drop_while", "compress"]

from .lazy import lazy

@lazy
def filter(iterable, predicate=None):
    """Yield only those elements for which ``predicate(x)`` is truthy.

    ``predicate=None`` tests the truth value of each element itself, like the
    builtin ``filter``.

    Nothing beyond the next match is looked at; on an infinite input, a match
    that never comes means the pull never returns.
    """
    if predicate is None:
        predicate = bool
    for x in iterable:
        if predicate(x):
            yield x

@lazy
def take_while(iterable, predicate):
    """Yield elements as long as ``predicate(x)`` holds; stop at the first that fails.

    The failing element is discarded, and the input is not pulled again::

        assert "".join(take_while("take while", lambda c: c != " ")) == "take"

    See also ``drop_while``; on two copies of the same input, the two are
    complementary: their outputs, concatenated, give back the input.
    """
    for x in iterable:
        if not predicate(x):
            return
        yield x

@lazy
def drop_while(iterable, predicate):
    """Skip elements as long as ``predicate(x)`` holds, then yield everything.

    The first failing element is yielded, and so is the rest of the input,
    without calling ``predicate`` again::

        assert "".join(drop_while("drop while", lambda c: c != "w")) == "while"
    """
    it = iter(iterable)
    for x in it:
        if not predicate(x):
            yield x
            break
    yield from it

@lazy
def compress(data, selectors):
    """Yield the elements of data whose corresponding selector is truthy.

    ``data[i]`` is paired with ``selectors[i]``. The output stops as soon as
    either input runs out, so they don't need to have the same length, and one
    (but not both) of them may be infinite::

        assert tuple(compress(range(1, 10), cycle((True, False)))) == (1, 3, 5, 7, 9)

    Selectors can be anything that has a truth value.
    """
    for x, selected in zip(data, selectors):
        if selected:
            yield x
