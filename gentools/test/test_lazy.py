# -*- coding: utf-8 -*-

from itertools import islice

from ..lazy import LazySequence, lazy, to_generator
from ..collections import Some

def test():
    # pull-style access; None signals the end, and keeps signaling it.
    s = LazySequence([1, 2])
    assert not s.exhausted
    assert s.pull() == Some(1)
    assert s.pull() == Some(2)
    assert not s.exhausted  # no look-ahead
    assert s.pull() is None
    assert s.exhausted
    assert s.pull() is None
    assert s.pull() is None

    # a produced None is not the end
    s = LazySequence([None])
    r = s.pull()
    assert isinstance(r, Some) and r.get() is None
    assert s.pull() is None

    # iterator protocol; sequences compose with each other and with the stdlib
    s = LazySequence(range(5))
    assert iter(s) is s
    assert next(s) == 0
    assert tuple(s) == (1, 2, 3, 4)
    assert tuple(s) == ()  # not rewindable

    # sticky end, even for an iterator that would resume after signaling the end
    class Flaky:
        def __init__(self):
            self.calls = 0
        def __iter__(self):
            return self
        def __next__(self):
            self.calls += 1
            if self.calls == 2:
                raise StopIteration
            return self.calls
    flaky = Flaky()
    s = LazySequence(flaky)
    assert tuple(s) == (1,)
    assert s.pull() is None
    assert flaky.calls == 2

    # construction is lazy; infinite sources are fine
    started = False
    def naturals():
        nonlocal started
        started = True
        n = 0
        while True:
            yield n
            n += 1
    s = LazySequence(naturals())
    assert not started
    assert tuple(islice(s, 3)) == (0, 1, 2)
    assert started

    # iter() is not called on the source until the first pull
    class Counted:
        def __init__(self):
            self.iters = 0
        def __iter__(self):
            self.iters += 1
            return iter((10, 20))
    c = Counted()
    s = LazySequence(c)
    assert c.iters == 0
    assert s.pull() == Some(10)
    assert c.iters == 1

    # an exception from the source surfaces at the failing element;
    # elements before it are intact, and the sequence then ends.
    def fails_at_third():
        yield 1
        yield 2
        raise ZeroDivisionError("boom")
    s = LazySequence(fails_at_third())
    assert s.pull() == Some(1)
    assert s.pull() == Some(2)
    try:
        s.pull()
    except ZeroDivisionError:
        pass
    else:
        assert False, "the exception should have propagated"
    assert s.pull() is None
    assert s.exhausted

    # close() releases early, running the generator's cleanup
    cleaned_up = False
    def resource():
        nonlocal cleaned_up
        try:
            yield from range(100)
        finally:
            cleaned_up = True
    s = LazySequence(resource())
    assert s.pull() == Some(0)
    s.close()
    assert cleaned_up
    assert s.exhausted
    assert s.pull() is None
    s.close()  # closing twice is fine
    LazySequence([1]).close()  # so is closing a sequence that never started

    # the decorator
    @lazy
    def evens(n):
        """Even numbers below n."""
        yield from range(0, n, 2)
    s = evens(7)
    assert isinstance(s, LazySequence)
    assert tuple(s) == (0, 2, 4, 6)
    assert evens.__name__ == "evens"
    assert evens.__doc__ == "Even numbers below n."

    # to_generator bridges any iterable
    s = to_generator("abc")
    assert isinstance(s, LazySequence)
    assert tuple(s) == ("a", "b", "c")
    assert tuple(to_generator({1: "one", 2: "two"})) == (1, 2)
    assert tuple(to_generator(())) == ()
    c = Counted()
    s = to_generator(c)
    assert c.iters == 0
    assert tuple(s) == (10, 20)
    assert c.iters == 1

    print("All tests PASSED")

if __name__ == '__main__':
    test()
