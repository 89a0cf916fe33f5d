from typing import Iterable, TypeAlias, TypeVar

T = TypeVar('T')

Radices: TypeAlias = Iterable[int]
IndexTuple: TypeAlias = tuple[int, ...]
