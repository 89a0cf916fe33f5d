from typing import Collection

from prodrepeat.prodrepeat_core import PRGenerator, _prwrap


def _drain(elements: tuple, repeat: int) -> tuple[tuple, ...]:
    return tuple(PRGenerator(elements, repeat))


def prodrepeat(elements: Collection, repeat: int) -> tuple[tuple, ...]:
    # argument checks happen in _prwrap and PRGenerator
    return _prwrap(_drain, elements, repeat)
