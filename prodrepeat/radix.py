from typing import Iterator

from prodrepeat.prtypes import IndexTuple, Radices


def _check_radix(radix: int) -> int:
    # bool is an int subclass, but True as a radix is almost surely a bug
    if not isinstance(radix, int) or isinstance(radix, bool):
        raise TypeError(
            f"radix must be an int, not {type(radix).__name__}"
        )
    if radix < 0:
        raise ValueError(f"radix must be >= 0, got {radix}")
    return radix


class MixedRadixCounter:
    """
    Odometer-style counter over a mixed-radix space. Digit 0 is the most
    significant (slowest-moving) one. A radix of 0 makes the space empty,
    so the counter starts out exhausted.
    """

    def __init__(self, radices: Radices):
        self._radices = tuple(_check_radix(r) for r in radices)
        self._digits = [0] * len(self._radices)
        self._exhausted = 0 in self._radices

    @property
    def radices(self) -> IndexTuple:
        return self._radices

    @property
    def digits(self) -> IndexTuple:
        return tuple(self._digits)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def total(self) -> int:
        total = 1
        for radix in self._radices:
            total *= radix
        return total

    def increment(self) -> bool:
        """
        Add one at the least significant digit. Returns False (and marks
        the counter exhausted) when the carry runs off the most
        significant digit.
        """
        if self._exhausted:
            return False
        for pos in range(len(self._digits) - 1, -1, -1):
            self._digits[pos] += 1
            if self._digits[pos] < self._radices[pos]:
                return True
            self._digits[pos] = 0
        # carried out of the top digit, or there were no digits at all
        self._exhausted = True
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(radices={self._radices}, "
            f"digits={self.digits}, exhausted={self._exhausted})"
        )


def iter_indices(radices: Radices) -> Iterator[IndexTuple]:
    counter = MixedRadixCounter(radices)
    while not counter.exhausted:
        yield counter.digits
        counter.increment()
