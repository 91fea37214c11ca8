# -*- coding: utf-8 -*-
"""The lazy sequence: a single-consumer, pull-based stream of values.

Every combinator in ``gentools`` returns a ``LazySequence``. It is a thin
wrapper around a Python iterator (almost always a generator), so the
suspension and resumption are those of the generator: execution pauses at
each ``yield``, and resumes right there on the next pull, with all locals
preserved.

What the wrapper adds on top of a bare generator:

  - ``pull``, which returns ``Some(x)`` or ``None`` instead of raising
    ``StopIteration``, so a consumer can step through the sequence in an
    expression position.

  - An explicit, sticky terminal state (``exhausted``). Once the end has been
    seen, every further pull reports the end again, also for underlying
    iterators that would not behave that way by themselves.

  - ``close``, for releasing the underlying iterator (and anything it holds,
    such as a ``cycle`` buffer) before the sequence object itself goes away.

A ``LazySequence`` is also an iterator, so sequences stack into pipelines,
and work with ``for``, ``tuple``, ``itertools`` and friends.

A sequence is not rewindable. To iterate again, build a new sequence from the
same source.
"""

__all__ = ["LazySequence", "lazy", "to_generator"]

from functools import wraps

from .collections import Some

class LazySequence:
    """Pull-based lazy view over an iterable.

    Construction does not evaluate anything; in particular, wrapping a
    generator does not start it, so infinite sources are fine.

    If the underlying iterator raises (typically, because a user-supplied
    predicate or transform failed), the exception propagates to the consumer
    from the pull that would have produced the failing element. Elements
    already produced are not affected.

    Not thread-safe; one consumer at a time.
    """
    def __init__(self, iterable):
        self._iterable = iterable
        self._it = None
        self._exhausted = False
    def __repr__(self):  # pragma: no cover
        state = "exhausted" if self._exhausted else "live"
        name = getattr(self._it or self._iterable, "__name__", type(self._iterable).__name__)
        return f"<LazySequence {name} ({state}) at 0x{id(self):x}>"
    def __iter__(self):
        return self
    def __next__(self):
        if self._exhausted:
            raise StopIteration
        if self._it is None:
            self._it = iter(self._iterable)
            self._iterable = None
        try:
            return next(self._it)
        except StopIteration:
            self._release()
            raise

    def pull(self):
        """Return ``Some(x)`` for the next element ``x``, or ``None`` at the end.

        After the end has been reached, keep returning ``None``.
        """
        try:
            return Some(next(self))
        except StopIteration:
            return None

    @property
    def exhausted(self):
        """Whether the end of the sequence has been reached (or it was closed).

        This does not look ahead: a sequence whose last element has just been
        pulled is still live until the next pull finds the end.
        """
        return self._exhausted

    def close(self):
        """Release the underlying iterator, and mark the sequence exhausted.

        If the underlying iterator is a generator, it is closed, so its
        ``finally`` blocks run. Closing an exhausted sequence does nothing.
        """
        if self._exhausted:
            return
        it = self._it
        self._release()
        if hasattr(it, "close"):
            it.close()

    def _release(self):
        self._exhausted = True
        self._it = None
        self._iterable = None

def lazy(gfunc):
    """Decorator: make a generator function return a ``LazySequence``.

    Calling the decorated function creates the generator (which does not run
    any of its body yet), and wraps it::

        @lazy
        def naturals():
            n = 0
            while True:
                yield n
                n += 1

        s = naturals()
        assert isinstance(s, LazySequence)
        assert s.pull() == Some(0)
    """
    @wraps(gfunc)
    def lazified(*args, **kwargs):
        return LazySequence(gfunc(*args, **kwargs))
    return lazified

@lazy
def to_generator(iterable):
    """Bridge any iterable into a lazy sequence.

    Yield the elements of ``iterable`` in order, unchanged. ``iter`` is not
    called on the input until the first pull.
    """
    yield from iterable
