# -*- coding: utf-8 -*-
"""Small value containers used by the sequence protocol.

``Some`` is the option type returned by ``LazySequence.pull``, and ``Variant``
is the tagged union produced by ``chain_heterogeneous``.
"""

__all__ = ["Some", "unbox", "Variant"]

import typing

class Some:
    """Explicitly represent thing-ness as opposed to nothingness.

    This is what ``LazySequence.pull`` returns when it produced a value. When
    the sequence is exhausted, ``pull`` returns a bare ``None`` instead, so the
    presence of a ``None`` element can be told apart from the end of the
    sequence::

        x = Some(42)    # we have a value, it's `42`
        x = Some(None)  # we have a value, it's `None`
        x = None        # we don't have a value

    A ``Some`` is an immutable single-item container. It supports ``.get``
    and ``unbox``. It compares equal only to another ``Some`` with an equal
    value, never to a bare value, so ``Some(None) != None``.
    """
    __slots__ = ("x",)
    def __init__(self, x=None):
        object.__setattr__(self, "x", x)
    def __setattr__(self, k, v):
        raise AttributeError(f"Some is immutable; cannot set {repr(k)}")
    def __repr__(self):  # pragma: no cover
        return f"Some({repr(self.x)})"
    def __contains__(self, x):
        return self.x == x
    def __iter__(self):
        return (x for x in (self.x,))
    def __len__(self):
        return 1
    def __eq__(self, other):
        if not isinstance(other, Some):
            return NotImplemented
        return other.x == self.x
    def __hash__(self):
        return hash((Some, self.x))
    def get(self):
        """Return the value inside the `Some`.

        The syntactic sugar for `b.get()` is `unbox(b)`.
        """
        return self.x

def unbox(b):
    """Return the value from inside b.

    Syntactic sugar for `b.get()`.

    If `b` is not a `Some` or a `Variant`, raises `TypeError`.
    """
    if not isinstance(b, (Some, Variant)):
        raise TypeError(f"Expected Some or Variant, got {type(b)} with value {repr(b)}")
    return b.get()

class Variant:
    """A value that is exactly one of a closed set of alternatives.

    ``alternatives`` is the tuple of type specifications making up the union,
    fixed when the union is created (see ``chain_heterogeneous``).
    ``which`` is the index of the active alternative, and ``value`` the
    payload. The active alternative comes from which input produced the
    value, not from inspecting the value, so two alternatives may well
    hold values of the same Python type.

    To recover the value, inspect the tag::

        for v in chain_heterogeneous(range(3), "ab", types=(int, str)):
            if v.holds(int):
                ...
            else:
                ...

    or dispatch on it, with one handler per alternative, in order::

        v.visit(lambda n: n + 1,
                lambda c: c.upper())

    Equality compares the active alternative and the value.
    """
    __slots__ = ("value", "which", "alternatives")
    def __init__(self, value, which, alternatives):
        if not isinstance(which, int):
            raise TypeError(f"expected integer which, got {type(which)} with value {repr(which)}")
        if not 0 <= which < len(alternatives):
            raise ValueError(f"which must index into the {len(alternatives)} alternatives; got {which}")
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "which", which)
        object.__setattr__(self, "alternatives", tuple(alternatives))
    def __setattr__(self, k, v):
        raise AttributeError(f"Variant is immutable; cannot set {repr(k)}")
    def __repr__(self):
        return f"Variant({repr(self.value)}, which={self.which}, type={_typename(self.type)})"
    def __eq__(self, other):
        if not isinstance(other, Variant):
            return NotImplemented
        return self.which == other.which and self.value == other.value
    def __hash__(self):
        return hash((self.which, self.value))

    @property
    def type(self):
        """The type specification of the active alternative."""
        return self.alternatives[self.which]

    def get(self):
        """Return the payload, whichever alternative is active."""
        return self.value

    def holds(self, T):
        """Return whether the alternative `T` is the active one.

        `T` is compared against the declared alternatives, not against the
        run-time type of the payload.
        """
        return self.type == T

    def visit(self, *handlers):
        """Call the handler of the active alternative on the payload.

        Exactly one handler per alternative is required, in the order of
        ``alternatives``. Return the handler's return value.
        """
        if len(handlers) != len(self.alternatives):
            raise TypeError(f"expected {len(self.alternatives)} handlers (one per alternative), got {len(handlers)}")
        return handlers[self.which](self.value)

def _typename(T):
    if T is typing.Any:
        return "Any"
    return getattr(T, "__qualname__", None) or repr(T)
