"""Lazily computed, cached values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

__all__ = ["CachedMethod", "CachedSelfRefMethod"]

S = TypeVar("S")
T = TypeVar("T")

_UNSET: Any = object()


@dataclass
class CachedMethod(Generic[T]):
    """Calls ``func`` on first access and returns the cached result afterwards."""

    func: Callable[[], T]
    _cache: Any = field(default=_UNSET, init=False, repr=False)

    def get(self) -> T:
        if self._cache is _UNSET:
            self._cache = self.func()
        return self._cache


@dataclass
class CachedSelfRefMethod(Generic[S, T]):
    """Calls ``func(s)`` on first access and returns the cached result afterwards.

    Later calls return the first result whatever ``s`` they are given.
    """

    func: Callable[[S], T]
    _cache: Any = field(default=_UNSET, init=False, repr=False)

    def get(self, s: S) -> T:
        if self._cache is _UNSET:
            self._cache = self.func(s)
        return self._cache