# -*- coding: utf-8; -*-
"""Simplistic run-time type checker.

This implements just the feature set needed for validating the declared
alternatives of a heterogeneous chain (see `gentools.combine.chain_heterogeneous`).
That said, it supports the commonly used parts of the `typing` stdlib module.

We provide `isoftype` (cf. `isinstance`), but no `issubtype` (cf. `issubclass`).

Element types of iterators are never checked, because that would consume them.
"""

__all__ = ["isoftype"]

import collections.abc
import typing

try:
    from types import UnionType as _UnionType  # Python 3.10+, `int | str`
except ImportError:  # pragma: no cover
    _UnionType = None

def isoftype(value, T):
    """Perform a type check at run time.

    Like `isinstance`, but check `value` against a *type specification* `T`.

        value: The run-time value whose type to check.

        T:     When `T` is a concrete type (e.g. `int`, `somemodule.MyClass`),
               we just delegate to the builtin `isinstance`.

               Additionally, the following `typing` meta-utilities are supported:

                 - `Any`
                 - `TypeVar` (constrained or bound; an unconstrained one matches anything)
                 - `NewType` (any instance of the underlying actual type will match)
                 - `Union[T1, T2, ..., TN]`, `Optional[T]`, and `T1 | T2` (3.10+)
                 - `Literal[v1, v2, ...]`
                 - `Tuple`, `Tuple[T, ...]`, `Tuple[T1, T2, ..., TN]`
                 - `List[T]`, `Sequence[T]`, `Set[T]`, `FrozenSet[T]`, and the
                   other single-argument collection generics
                 - `Dict[K, V]`, `Mapping[K, V]`, `MutableMapping[K, V]`
                 - `Iterable`, `Iterator`, `Callable` (only the outer type is checked)

               Checks on the type arguments are performed recursively using
               `isoftype`, so compound specifications work.

    Returns `True` if `value` matches the type specification; `False` if not.

    Raises `NotImplementedError` for `typing` constructs not listed above.
    """
    if T is typing.Any:
        return True

    if isinstance(T, typing.TypeVar):
        if T.__constraints__:
            return any(isoftype(value, U) for U in T.__constraints__)
        if T.__bound__ is not None:
            return isoftype(value, T.__bound__)
        return True  # just an abstract type name

    # `typing.NewType` is a class since Python 3.10; before that, a closure.
    supertype = getattr(T, "__supertype__", None)
    if supertype is not None:
        return isoftype(value, supertype)

    origin = typing.get_origin(T)
    args = typing.get_args(T)

    if origin is typing.Union or (_UnionType is not None and isinstance(T, _UnionType)):
        return any(isoftype(value, U) for U in args)

    if origin is typing.Literal:
        return any(type(value) is type(v) and value == v for v in args)

    if origin is None:
        if isinstance(T, type):
            return isinstance(value, T)
        raise NotImplementedError(f"This run-time type checker doesn't currently support {repr(T)}")

    # From here on, `T` is a parameterized (or bare) generic, e.g. `List[int]`.
    if not isinstance(origin, type):  # `ClassVar`, `Final`, ...
        raise NotImplementedError(f"This run-time type checker doesn't currently support {repr(T)}")
    if not isinstance(value, origin):
        return False

    if origin is tuple:
        if not args:  # bare `Tuple`, no restrictions on length or element type
            return True
        # homogeneous element type, arbitrary length
        if len(args) == 2 and args[1] is Ellipsis:
            return all(isoftype(elt, args[0]) for elt in value)
        # heterogeneous element types, exact length
        if len(value) != len(args):
            return False
        return all(isoftype(elt, U) for elt, U in zip(value, args))

    if not args or isinstance(value, collections.abc.Iterator):  # can't non-destructively check element type
        return True

    if issubclass(origin, collections.abc.Mapping) and len(args) == 2:
        K, V = args
        return all(isoftype(k, K) and isoftype(v, V) for k, v in value.items())

    if issubclass(origin, collections.abc.Callable):  # argument and return value types are not checked
        return True

    if issubclass(origin, collections.abc.Iterable) and len(args) == 1:
        U = args[0]
        return all(isoftype(elt, U) for elt in value)

    raise NotImplementedError(f"This run-time type checker doesn't currently support {repr(T)}")
