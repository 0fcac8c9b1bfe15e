from __future__ import annotations

from collections import deque
from functools import partial
from itertools import islice
from typing import (
    Any,
    Callable,
    Iterator,
    Literal,
    TypeVar,
    overload,
)

from .stream import FnTransformer, Transformer, transformer

_T = TypeVar("_T")


@transformer
def partition_by_element(iterator: Iterator[_T], separator: _T) -> Iterator[list[_T]]:
    """Split the stream into lists, using `separator` as the boundary.

    Separators are dropped, and so are the empty groups produced by consecutive separators.

    Examples:
        >>> lines = ["1", "2", "", "3", "", "", "4"]
        >>> list(lines / partition_by_element(""))
        [['1', '2'], ['3'], ['4']]
    """
    group: list[_T] = []
    for item in iterator:
        if item == separator:
            if group:
                yield group
                group = []
        else:
            group.append(item)
    if group:
        yield group


@transformer
def batched(iterator: Iterator[_T], n: int) -> Iterator[tuple[_T, ...]]:
    """Group items into tuples of `n`. The last tuple may be shorter.

    Examples:
        >>> list(range(5) / batched(2))
        [(0, 1), (2, 3), (4,)]
    """
    if n < 1:
        raise ValueError("n must be at least one")
    while batch := tuple(islice(iterator, n)):
        yield batch


@transformer
def take(iterator: Iterator[_T], n: int) -> Iterator[_T]:
    """Take the first `n` items from the stream.

    Examples:
        >>> list(range(3) / take(2))
        [0, 1]
    """
    yield from islice(iterator, n)


@transformer
def unique(iterator: Iterator[_T], key: Callable[[_T], Any] = lambda x: x) -> Iterator[_T]:
    """Yields only items that are unique across the stream.

    Examples:
        >>> list(range(50, 103, 6) / unique(lambda x: str(x)[0]))
        [50, 62, 74, 80, 92]
    """
    seen: set[Any] = set()
    for item in iterator:
        if (new_key := key(item)) not in seen:
            seen.add(new_key)
            yield item


def _nwise(iterator: Iterator[_T], n: int) -> Iterator[tuple[_T, ...]]:
    # Separate implementation from nwise() because the @transformer decorator
    # doesn't work well with @overload
    d = deque[_T](maxlen=n)
    for item in iterator:
        d.append(item)
        if len(d) == n:
            yield tuple(d)


@overload
def nwise(n: Literal[2]) -> Transformer[_T, tuple[_T, _T]]:
    ...


@overload
def nwise(n: Literal[3]) -> Transformer[_T, tuple[_T, _T, _T]]:
    ...


@overload
def nwise(n: int) -> Transformer[_T, tuple[_T, ...]]:
    ...


def nwise(n: int) -> Transformer[_T, tuple[_T, ...]]:
    """Transform an iterable into an iterable of overlapping n-tuples.

    Examples:
        >>> list(range(4) / nwise(2))
        [(0, 1), (1, 2), (2, 3)]
    """
    return FnTransformer(partial(_nwise, n=n))


__all__ = (
    "batched",
    "nwise",
    "partition_by_element",
    "take",
    "unique",
)
