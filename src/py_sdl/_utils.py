# -*- coding: utf-8 -*-
""" Some generic laguage level utilities for internal use. """

from typing import Any, Callable, Mapping, Type, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound=Callable[..., Any])
TType = TypeVar("TType", bound=Type[Any])


def classdispatch(
    value: Any, registry: Mapping[TType, C], *args: Any, **kwargs: Any
) -> Any:
    """
    Poor man's singledispatch to be used inline.

    Only exact classes are matched so that every node kind must be handled
    explicitly.

    >>> class A:
    ...     pass

    >>> class B(A):
    ...     pass

    >>> registry = {A: lambda _: 1}

    >>> classdispatch(A(), registry)
    1

    >>> classdispatch(B(), registry)
    Traceback (most recent call last):
        ...
    TypeError: <class 'py_sdl._utils.B'>

    >>> classdispatch(A(), {
    ...     A: lambda _, *a, **kw: (a, sorted(kw.items()))
    ... }, 0, 1, foo=2)
    ((0, 1), [('foo', 2)])
    """
    try:
        impl = registry[value.__class__]
    except KeyError:
        raise TypeError(value.__class__)

    return impl(value, *args, **kwargs)
