from collections import deque
from typing import TypeVar, Generic, Iterator, Iterable, Self


T = TypeVar("T")
U = TypeVar("U")

# Distinct from any value a caller can pass as ``default``, None included
_NO_DEFAULT = object()


class Peekable(Generic[T], Iterator[T]):
    """Token cursor: one item of lookahead over any iterable."""

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._cache = deque(maxlen=1)

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        try:
            self.peek()
        except StopIteration:
            return False
        return True

    def peek(self, default: U = _NO_DEFAULT) -> T | U:
        """Return the next item without consuming it.

        At the end of input, ``default`` is returned when given, otherwise
        ``StopIteration`` is raised.
        """
        if not self._cache:
            try:
                self._cache.append(next(self._it))
            except StopIteration:
                if default is _NO_DEFAULT:
                    raise
                return default
        return self._cache[0]

    def __next__(self) -> T:
        if self._cache:
            return self._cache.popleft()
        return next(self._it)
