# -*- coding: utf-8 -*-
"""Structural combinators: chaining several inputs, and grouping one.

``chain`` concatenates inputs of the same element type. ``chain_heterogeneous``
concatenates inputs of different element types, wrapping each element into a
``Variant`` (a tagged union) so the consumer can tell where it came from.

``group_by`` partitions a key-sorted input into runs of equal key.
"""

__all__ = ["chain", "chain_heterogeneous", "group_by"]

import typing

from .collections import Variant
from .lazy import LazySequence, lazy
from .typecheck import isoftype

@lazy
def chain(*iterables):
    """Yield all elements of the first input, then of the second, and so on.

    Each input is drained completely before the next one is started; ``iter``
    is not called on an input until it is reached. Inputs are never
    interleaved.

    All inputs are expected to have the same element type. This is not
    checked; for inputs of different types, see ``chain_heterogeneous``.
    """
    for iterable in iterables:
        yield from iterable

def chain_heterogeneous(*iterables, types=None):
    """Like chain, but wrap each element into a ``Variant``.

    The alternatives of the union are fixed here, at the call site:

      - If ``types`` is given, it must have one type specification (anything
        ``isoftype`` understands) per input. Equal specifications collapse
        into one alternative, so the union is exactly the set of distinct
        element types. Each element is checked against the specification of
        its input; a mismatch raises ``TypeError`` from the pull that would
        have produced it.

      - If ``types`` is not given, each input gets an alternative of its own
        (``typing.Any``), so ``which`` is the index of the producing input.

    The active alternative of each element is that of the input it came from.
    Example::

        out = tuple(chain_heterogeneous(range(8, 11), "ab", types=(int, str)))
        assert [v.value for v in out if v.holds(int)] == [8, 9, 10]
        assert [v.value for v in out if v.holds(str)] == ["a", "b"]

    Ordering and draining are exactly as in ``chain``.
    """
    if types is None:
        alternatives = (typing.Any,) * len(iterables)
        whiches = tuple(range(len(iterables)))
    else:
        types = tuple(types)
        if len(types) != len(iterables):
            raise ValueError(f"expected one type per input ({len(iterables)}), got {len(types)} types: {types}")
        alternatives = []
        for T in types:
            if T not in alternatives:
                alternatives.append(T)
        alternatives = tuple(alternatives)
        whiches = tuple(alternatives.index(T) for T in types)
    def chainer():
        for j, (iterable, which) in enumerate(zip(iterables, whiches)):
            T = alternatives[which]
            for x in iterable:
                if types is not None and not isoftype(x, T):
                    raise TypeError(f"input {j} was declared as {T}, but produced {type(x)} with value {repr(x)}")
                yield Variant(x, which, alternatives)
    return LazySequence(chainer())

def group_by(iterable, key=None, *, strict=False):
    """Partition a key-sorted iterable into runs of equal key.

    Yield pairs ``(k, members)``, where ``members`` is a lazy sequence over
    one maximal run of consecutive elements ``x`` with ``key(x) == k``.
    ``key=None`` means the identity. ``key`` is called once per element.

    **Precondition**: ``iterable`` is sorted by ``key``. No sorting is done.
    This is a single linear pass; a new group starts whenever the key of an
    element differs from that of the previous one. On unsorted input, equal
    keys separated by a different key produce separate groups::

        groups = [(k, tuple(g)) for k, g in group_by([1, 1, 2, 1])]
        assert groups == [(1, (1, 1)), (2, (2,)), (1, (1,))]

    Pass ``strict=True`` to have a ``ValueError`` raised instead, from the
    pull that would start the second group with an already seen key. The keys
    must then be hashable.

    **Caution**: all groups share the cursor into ``iterable``, so ``members``
    is valid only until the next group is pulled. Advancing to the next group
    skips whatever is left of the current one, after which the old
    ``members`` yields nothing more. To keep a group, copy it first, e.g.
    ``tuple(members)``.

    Empty input gives no groups.
    """
    return LazySequence(_GroupBy(iterable, key, strict))

_nokey = object()  # sentinel
class _GroupBy:
    """Iterator behind ``group_by``. Owns the cursor shared by the member views."""
    def __init__(self, iterable, key, strict):
        self.iterable = iterable
        self.it = None
        self.keyfunc = key if key is not None else (lambda x: x)
        self.tgtkey = self.currkey = self.currvalue = _nokey
        self.token = None  # identifies the current group; stale member views stop
        self.seen = set() if strict else None
        self.exhausted = False
    def __iter__(self):
        return self
    def __next__(self):
        self.token = object()
        if self.exhausted:
            raise StopIteration
        if self.it is None:
            self.it = iter(self.iterable)
            self.iterable = None
        # skip to the start of the next run
        while self.currkey is self.tgtkey or self.currkey == self.tgtkey:
            self._advance()
        if self.seen is not None:
            if self.currkey in self.seen:
                self.exhausted = True
                raise ValueError(f"key {repr(self.currkey)} appears in two non-adjacent groups; input not sorted by key")
            self.seen.add(self.currkey)
        self.tgtkey = self.currkey
        return (self.currkey, LazySequence(self._members(self.tgtkey, self.token)))
    def _advance(self):
        if self.exhausted:
            raise StopIteration
        # any failure, of the input or of the key function, ends all groups
        try:
            self.currvalue = next(self.it)
            self.currkey = self.keyfunc(self.currvalue)
        except BaseException:
            self.exhausted = True
            raise
    def _members(self, tgtkey, token):
        while self.token is token and self.currkey == tgtkey:
            yield self.currvalue
            if self.token is not token:  # the outer sequence moved on while we were suspended
                return
            try:
                self._advance()
            except StopIteration:
                return
