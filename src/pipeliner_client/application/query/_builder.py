"""Query builders – class-or-instance builder methods."""
from __future__ import annotations

import functools
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class builder_method(Generic[T]):  # noqa: N801
    """Descriptor for builder methods callable on both the class and an instance.

    Accessed on an instance it behaves like a normal bound method. Accessed on
    the class it binds to a freshly constructed builder, so that
    ``Filter.eq("NAME", "Joe")`` is equivalent to ``Filter().eq("NAME", "Joe")``.
    """

    def __init__(self, func: Callable[..., T]) -> None:
        self._func = func
        functools.update_wrapper(self, func)  # type: ignore[arg-type]

    def __get__(self, instance: Any, owner: type) -> Callable[..., T]:
        if instance is None:
            instance = owner()
        return functools.partial(self._func, instance)


__all__ = ["builder_method"]
