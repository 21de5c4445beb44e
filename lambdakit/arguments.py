from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    overload,
)
from typing_extensions import Never

_T_co = TypeVar('_T_co', covariant=True)


class ArgumentList(Sequence[_T_co]):
    """A persistent list of arguments, built by appending at the end.

    Each node holds the list of arguments before it and the last argument, so
    extending a list shares the old one as the prefix of the new one. Curried
    continuations rely on this: two calls on the same continuation extend the
    same prefix and can never see each other's arguments.
    """

    def __init__(
        self, _val: Optional[Tuple['ArgumentList[_T_co]', _T_co]]
    ) -> None:
        self._val = _val
        if _val is None:
            self._length = 0
        else:
            self._length = len(_val[0]) + 1

    @classmethod
    def from_iterable(cls, iterable: Iterable[_T_co]) -> 'ArgumentList[_T_co]':
        if isinstance(iterable, cls):
            return iterable
        return empty_arguments.extend(iterable)

    def extend(self, values: Iterable[Any]) -> 'ArgumentList[Any]':
        l: ArgumentList[Any] = self
        for el in values:
            l = ArgumentList((l, el))
        return l

    def split_at(self, index: int) -> Tuple[Tuple[_T_co, ...], Tuple[_T_co, ...]]:
        """Split into the first `index` arguments and the rest, as tuples."""
        if index < 0:
            raise ValueError('split index must not be negative')
        everything = tuple(self)
        return everything[:index], everything[index:]

    @overload
    def __getitem__(self, i: int) -> _T_co:
        pass

    @overload
    def __getitem__(self, i: slice) -> Tuple[_T_co, ...]:
        pass

    def __getitem__(
        self, i: Union[slice, int]
    ) -> Union[Tuple[_T_co, ...], _T_co]:
        if isinstance(i, slice):
            return tuple(self)[i]
        if i < 0:
            i += self._length
        if not 0 <= i < self._length:
            raise IndexError('argument index out of range')
        # walk back from the end
        for _ in range(self._length - 1 - i):
            if self._val is None:
                raise IndexError('argument index out of range')
            self = self._val[0]
        if self._val is None:
            raise IndexError('argument index out of range')
        return self._val[1]

    def __len__(self) -> int:
        return self._length

    def _reversed_values(self) -> 'List[_T_co]':
        res: List[_T_co] = []
        while self._val is not None:
            res.append(self._val[1])
            self = self._val[0]
        return res

    def __iter__(self) -> Iterator[_T_co]:
        return reversed(self._reversed_values())

    def __reversed__(self) -> Iterator[_T_co]:
        return iter(self._reversed_values())

    def __str__(self) -> str:
        return str(list(self))

    def __repr__(self) -> str:
        return f'ArgumentList.from_iterable({list(self)!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentList):
            return NotImplemented
        if len(self) != len(other):
            return False
        for a, b in zip(self, other):
            if a != b:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple(self))


empty_arguments = ArgumentList[Never](None)
