# -*- coding: utf-8 -*-

from itertools import islice
from fractions import Fraction
from datetime import date, timedelta
import warnings

from ..sources import count, repeat, cycle, cycle_buffered, cycle_unbuffered, ismultipass
from ..lazy import LazySequence, to_generator
from ..collections import Some

def test():
    # count
    assert tuple(islice(count(), 5)) == (0, 1, 2, 3, 4)
    assert tuple(islice(count(10), 3)) == (10, 11, 12)
    assert tuple(islice(count(1.0, 2.0), 4)) == (1.0, 3.0, 5.0, 7.0)
    assert tuple(islice(count(5, -2), 4)) == (5, 3, 1, -1)
    assert tuple(islice(count(Fraction(1, 3), Fraction(1, 3)), 3)) == (Fraction(1, 3), Fraction(2, 3), Fraction(1))
    assert tuple(islice(count(date(2020, 2, 28), timedelta(days=1)), 2)) == (date(2020, 2, 28), date(2020, 2, 29))
    # no accumulated roundoff: the kth term is start + k * step
    tenths = tuple(islice(count(0.0, 0.1), 1001))
    assert tenths[1000] == 1000 * 0.1
    assert isinstance(count(), LazySequence)

    # repeat
    assert tuple(repeat(2.4, 3)) == (2.4, 2.4, 2.4)
    assert tuple(repeat("x", 0)) == ()
    assert tuple(islice(repeat(2.4), 3)) == (2.4, 2.4, 2.4)
    thing = []
    assert all(x is thing for x in repeat(thing, 4))  # same object, no copies
    s = repeat(1, 1)
    assert s.pull() == Some(1)
    assert s.pull() is None
    assert s.pull() is None
    try:
        repeat(1, -1)
    except ValueError:
        pass
    else:
        assert False, "negative times should be rejected"
    try:
        repeat(1, 1.5)
    except TypeError:
        pass
    else:
        assert False, "non-integer times should be rejected"

    # capability detection
    assert ismultipass([1, 2])
    assert ismultipass("ab")
    assert ismultipass(range(3))
    assert ismultipass({1: 2})
    assert not ismultipass(iter([1, 2]))
    assert not ismultipass(x for x in "ab")
    assert not ismultipass(to_generator([1, 2]))
    assert not ismultipass(17)

    # cycle over a restartable input re-walks it
    assert tuple(islice(cycle([1, 2, 3]), 7)) == (1, 2, 3, 1, 2, 3, 1)
    assert tuple(islice(cycle("ab"), 5)) == ("a", "b", "a", "b", "a")
    assert tuple(islice(cycle(range(1, 3)), 6)) == (1, 2, 1, 2, 1, 2)
    # ...and over a single-pass input buffers it
    assert tuple(islice(cycle(x for x in "ab"), 5)) == ("a", "b", "a", "b", "a")
    assert tuple(islice(cycle(iter([True, False])), 4)) == (True, False, True, False)

    # the unbuffered variant really re-reads the input on each pass
    class Restartable:
        def __init__(self, items):
            self.items = items
            self.passes = 0
        def __iter__(self):
            self.passes += 1
            return iter(self.items)
    r = Restartable([1, 2])
    assert tuple(islice(cycle(r), 5)) == (1, 2, 1, 2, 1)
    assert r.passes == 3

    # the buffered variant reads the input exactly once
    pulls = 0
    def source():
        nonlocal pulls
        for x in (1, 2, 3):
            pulls += 1
            yield x
    assert tuple(islice(cycle_buffered(source()), 10)) == (1, 2, 3, 1, 2, 3, 1, 2, 3, 1)
    assert pulls == 3
    # it is lazy: the first element comes out before the input has been read further
    pulls = 0
    c = cycle_buffered(source())
    assert pulls == 0
    assert c.pull() == Some(1)
    assert pulls == 1
    # it works also for restartable inputs, when explicitly requested
    assert tuple(islice(cycle_buffered([4, 5]), 3)) == (4, 5, 4)

    # empty inputs give empty sequences; no infinite loop doing nothing
    assert tuple(cycle(())) == ()
    assert tuple(cycle([])) == ()
    assert tuple(cycle(x for x in ())) == ()
    assert tuple(cycle_buffered([])) == ()
    assert tuple(cycle_unbuffered("")) == ()
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        assert tuple(cycle_unbuffered(Restartable([]))) == ()
    assert not ws

    # an input that claims to be restartable, but isn't: warn and stop
    class Liar:
        def __init__(self):
            self.it = iter((1, 2))
        def __iter__(self):
            return self.it
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        assert tuple(cycle_unbuffered(Liar())) == (1, 2)
    assert len(ws) == 1
    assert issubclass(ws[0].category, RuntimeWarning)
    assert ws[0].filename == __file__  # attributed to the consumer, not to the library

    # the unbuffered variant refuses single-pass inputs up front
    try:
        cycle_unbuffered(x for x in "ab")
    except TypeError:
        pass
    else:
        assert False, "cycle_unbuffered should reject iterators"

    # non-iterables are rejected at the call, not at the first pull
    for f in (cycle, cycle_unbuffered):
        try:
            f(17)
        except TypeError as err:
            assert "expected an iterable" in str(err)
        else:
            assert False, f"{f.__name__} should reject a non-iterable"

    print("All tests PASSED")

if __name__ == '__main__':
    test()
