import logging
from functools import partial
from typing import Callable, Collection, Iterator

from prodrepeat.prtypes import T
from prodrepeat.radix import MixedRadixCounter

log = logging.getLogger(__name__)


def _check_repeat(repeat: int) -> int:
    if not isinstance(repeat, int) or isinstance(repeat, bool):
        raise TypeError(
            f"repeat must be an int, not {type(repeat).__name__}"
        )
    if repeat < 0:
        raise ValueError(f"repeat must be >= 0, got {repeat}")
    return repeat


class PRGenerator(Iterator[tuple[T, ...]]):
    """
    Lazy Cartesian power of `elements` with itself, `repeat` times over.

    Tuples come out in lexicographic order of element positions, the last
    position varying fastest. They hold the element objects themselves,
    not copies. The generator keeps its own tuple of `elements`, so
    changes to the caller's container after construction are not seen.
    """

    def __init__(self, elements: Collection[T], repeat: int):
        self._elements = tuple(elements)
        self._repeat = _check_repeat(repeat)
        self._counter = MixedRadixCounter(
            [len(self._elements)] * self._repeat
        )
        self._total = self._counter.total
        self._emitted = 0
        log.debug(
            "product over %d elements, repeat %d: %d tuples",
            len(self._elements), self._repeat, self._total
        )

    @property
    def elements(self) -> tuple[T, ...]:
        return self._elements

    @property
    def repeat(self) -> int:
        return self._repeat

    @property
    def exhausted(self) -> bool:
        return self._counter.exhausted

    @property
    def remaining(self) -> int:
        return self._total - self._emitted

    def __iter__(self) -> "PRGenerator[T]":
        return self

    def __next__(self) -> tuple[T, ...]:
        if self._counter.exhausted:
            raise StopIteration
        elements = self._elements
        item = tuple(elements[i] for i in self._counter.digits)
        self._emitted += 1
        if not self._counter.increment():
            log.debug("product exhausted after %d tuples", self._emitted)
        return item

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={len(self._elements)}, "
            f"repeat={self._repeat}, remaining={self.remaining})"
        )


def _prwrap(
    func: Callable[[tuple[T, ...], int], PRGenerator[T]],
    elements: Collection[T],
    repeat: int
):
    try:
        elements = tuple(elements)
    except TypeError as err:
        raise TypeError("Elements must be iterable") from err
    # repeat is checked by PRGenerator itself
    return func(elements, repeat)


def product_with_repeat(
    elements: Collection[T], repeat: int
) -> PRGenerator[T]:
    return _prwrap(PRGenerator, elements, repeat)


def fixed_repeat(
    repeat: int
) -> Callable[[Collection[T]], PRGenerator[T]]:
    """
    Bind the tuple length once; the returned callable takes only the
    elements.
    """
    return partial(_prwrap, PRGenerator, repeat=_check_repeat(repeat))
