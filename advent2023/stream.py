from __future__ import annotations

from abc import ABC
from functools import wraps
from types import NotImplementedType
from typing import *

from .utils import NoValue, NoValueT

_T = TypeVar("_T")
_U = TypeVar("_U")

_I = TypeVar("_I", contravariant=True)
_O = TypeVar("_O", covariant=True)
_R = TypeVar("_R")

_P = ParamSpec("_P")


class Transformer(Generic[_I, _O], ABC):
    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        raise NotImplementedError

    ####################################################################
    # __truediv__ (a.k.a. `/`) overloads
    # Apply Transformer
    # - Transformer     /  Transformer     -> TransformerPipeline
    # - Transformer     /  Callable        -> Transformer @ Map(Callable)     -> TransformerPipeline
    # - Callable        /  Transformer     -> Map(Callable) @ Transformer     -> TransformerPipeline
    # - Iterable        /  Transformer     -> Stream @ Transformer            -> Stream

    def __truediv__(
        self, other: Transformer[_O, _R] | Callable[[_O], _R] | object
    ) -> TransformerPipeline[_I, _R] | NotImplementedType:

        # Transformer / Transformer -> TransformerPipeline
        if isinstance(other, Transformer):
            return TransformerPipeline(self, other)

        # Transformer / Callable -> Transformer / Map(Callable) -> TransformerPipeline
        if callable(other):
            return TransformerPipeline(self, Map(other))

        return NotImplemented

    def __rtruediv__(
        self, other: Iterable[_I] | Callable[[_T], _I] | object
    ) -> Stream[_O] | TransformerPipeline[_T, _O] | NotImplementedType:

        # Iterable / Transformer -> Stream @ Transformer -> Stream
        if isinstance(other, Iterable):
            return Stream(other).transform(self)

        # Callable / Transformer -> Map(Callable) @ Transformer -> TransformerPipeline
        if callable(other):
            return TransformerPipeline(Map(other), self)

        return NotImplemented

    ####################################################################
    # __floordiv__ (a.k.a. `//`)
    # Flat map
    # - Transformer  //  Callable  -> Transformer @ FlatMap(Callable) -> TransformerPipeline

    def __floordiv__(
        self, other: Callable[[_O], Iterable[_R]] | object
    ) -> TransformerPipeline[_I, _R] | NotImplementedType:
        if not callable(other):
            return NotImplemented
        return TransformerPipeline(self, FlatMap(other))

    ####################################################################
    # __mod__ (a.k.a. `%`)
    # Filter
    # - Transformer     %  Callable        -> Transformer @ Filter(Callable)  -> TransformerPipeline
    # - Callable        %  Transformer     -> Filter(Callable) @ Transformer  -> TransformerPipeline

    def __mod__(
        self, other: Callable[[_O], bool] | object
    ) -> TransformerPipeline[_I, _O] | NotImplementedType:
        if callable(other):
            return TransformerPipeline(self, Filter(other))
        return NotImplemented

    def __rmod__(
        self, other: Callable[[_I], bool] | object
    ) -> TransformerPipeline[_I, _O] | NotImplementedType:
        if callable(other):
            return TransformerPipeline(Filter(other), self)
        return NotImplemented

    ####################################################################
    # Iterable >> Transformer -> Stream @ Transformer -> Stream

    def __rrshift__(self, other: Iterable[_I] | object) -> Stream[_O] | NotImplementedType:
        if isinstance(other, Iterable):
            return Stream(other).transform(self)
        return NotImplemented


class Stream(Iterator[_T]):
    """A lazy iterator with operators for building pipelines.

    Examples:
        >>> list(Stream(range(6)) % (lambda x: x % 2 == 0) / (lambda x: x * 10))
        [0, 20, 40]
        >>> list(Stream(["ab", "c"]) // list)
        ['a', 'b', 'c']
    """

    def __init__(self, src: Iterable[_T]) -> None:
        self._src = iter(src)

    def __iter__(self) -> Iterator[_T]:
        return self

    def __next__(self) -> _T:
        return next(self._src)

    def transform(self, transformer: Transformer[_T, _R]) -> Stream[_R]:
        cls_ = cast(Type[Stream[_R]], type(self))
        return cls_(transformer.transform(self))

    @overload
    def __truediv__(self, other: Transformer[_T, _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: Callable[[_T], _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: object) -> Stream[_R] | NotImplementedType:
        ...

    def __truediv__(
        self, other: Transformer[_T, _R] | Callable[[_T], _R] | object
    ) -> Stream[_R] | NotImplementedType:
        """Map the stream using the given function or transformer."""

        # Stream / Transformer -> Stream @ Transformer -> Stream
        if isinstance(other, Transformer):
            return self.transform(other)

        # Stream / Callable -> Map(Callable) @ Stream -> Stream
        if callable(other):
            return self.transform(Map(other))

        return NotImplemented

    def __floordiv__(self, other: Callable[[_T], Iterable[_R]]) -> Stream[_R]:
        """Flatten the stream using the given function."""
        return self.transform(FlatMap(other))

    def __mod__(self, other: Callable[[_T], bool] | object) -> Stream[_T] | NotImplementedType:
        """Filter the stream using the given function as predicate."""
        if callable(other):
            return self.transform(Filter(other))
        return NotImplemented

    def __pos__(self: Stream[Iterable[_U]]) -> Stream[_U]:
        """Flatten the stream."""
        return self.transform(FlatMap(lambda x: x))

    def reduce(self, fn: Callable[[_R, _T], _R], initial: _R | NoValueT = NoValue) -> _R:
        """Consume the stream, folding its items with `fn`.

        Args:
            fn: The function to fold with.
            initial: The starting value. When omitted, the first item is used.

        Returns:
            The folded value.

        Raises:
            TypeError: If the stream is empty and no initial value was given.

        Examples:
            >>> Stream(range(5)).reduce(max)
            4
            >>> Stream([]).reduce(lambda a, b: a + b, 10)
            10
        """
        if isinstance(initial, NoValueT):
            try:
                initial = cast(_R, next(self))
            except StopIteration:
                raise TypeError("reduce() of empty stream with no initial value") from None
        acc = initial
        for item in self:
            acc = fn(acc, item)
        return acc


class Map(Transformer[_I, _O]):
    def __init__(self, fn: Callable[[_I], _O]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        for item in src:
            yield self._fn(item)


class FlatMap(Transformer[_I, _O]):
    def __init__(self, fn: Callable[[_I], Iterable[_O]]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        for item in src:
            yield from self._fn(item)


class Filter(Transformer[_T, _T]):
    def __init__(self, fn: Callable[[_T], object]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_T]) -> Iterator[_T]:
        for item in src:
            if self._fn(item):
                yield item


class TransformerPipeline(Transformer[_I, _O]):
    def __init__(self, t_a: Transformer[_I, _U], t_b: Transformer[_U, _O]) -> None:
        self._t_a = t_a
        self._t_b = t_b

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        return self._t_b.transform(self._t_a.transform(src))


class FnTransformer(Transformer[_I, _O]):
    def __init__(self, fn: Callable[[Iterator[_I]], Iterator[_O]]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        yield from self._fn(iter(src))


def transformer(
    _fn: Callable[Concatenate[Iterator[_I], _P], Iterator[_O]]
) -> Callable[_P, FnTransformer[_I, _O]]:
    @wraps(_fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> FnTransformer[_I, _O]:
        def _inner(_src: Iterator[_I]) -> Iterator[_O]:
            return _fn(_src, *__args, **__kwargs)

        return FnTransformer(_inner)

    return _outer


def stream(__fn: Callable[_P, Iterable[_O]]) -> Callable[_P, Stream[_O]]:
    @wraps(__fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> Stream[_O]:
        return Stream(__fn(*__args, **__kwargs))

    return _outer


__all__ = (
    "Stream",
    "Transformer",
    "Map",
    "FlatMap",
    "Filter",
    "TransformerPipeline",
    "FnTransformer",
    "transformer",
    "stream",
)
