"""Currying of functions on tuples of arguments.

A curried function accepts its arguments across any number of calls:

    >>> add = curry(2, lambda x, y: x + y)
    >>> add(1)(2)
    3
    >>> add(1, 2)
    3

Calls that supply more arguments than the arity are unrolled once. The
target is called with the first `arity` arguments and whatever it returns is
called with the rest, so `add(1, 2, 3)` is handled as `add(1, 2)(3)`. This
keeps curried functions composable however they are called, but it fails
when the target's result is not itself callable.
"""

import functools
from typing import (
    Any,
    Callable,
    Generic,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from lambdakit.arguments import ArgumentList, empty_arguments
from lambdakit.documentation import attach_documentation
from lambdakit.errors import InvalidArityError, NotCallableError
import lambdakit.logging

_logger = lambdakit.logging.get_logger(__name__)

_R = TypeVar('_R')

# Distinguishes an omitted target from an explicit None.
_MISSING = object()


class Curried(Generic[_R]):
    """A function waiting for the rest of its arguments.

    Instances are immutable. Calling one never changes it; it returns either
    a new Curried holding more arguments or the result of the target.
    """

    __slots__ = ('_arity', '_target', '_arguments', '__dict__', '__weakref__')

    def __init__(
        self,
        arity: int,
        target: Callable[..., _R],
        arguments: ArgumentList[Any] = empty_arguments,
    ) -> None:
        self._arity = arity
        self._target = target
        self._arguments = arguments
        # Naming attributes only; the target's __dict__ is not copied.
        functools.update_wrapper(self, target, updated=())

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def arguments(self) -> Tuple[Any, ...]:
        return tuple(self._arguments)

    def __call__(self, *values: Any) -> Union[_R, 'Curried[_R]', Any]:
        all_arguments = self._arguments.extend(values)
        count = len(all_arguments)
        if count < self._arity:
            _logger.debug(
                'suspending {!r} with {} of {} arguments',
                self._target,
                count,
                self._arity,
            )
            return Curried(self._arity, self._target, all_arguments)
        if count == self._arity:
            _logger.debug(
                'invoking {!r} with {} arguments', self._target, count
            )
            return self._target(*all_arguments)
        return _unroll_invoke(self._target, self._arity, all_arguments)

    def __repr__(self) -> str:
        return '<curried {!r}: {} of {} arguments>'.format(
            self._target, len(self._arguments), self._arity
        )


def _unroll_invoke(
    target: Callable[..., Any], arity: int, arguments: ArgumentList[Any]
) -> Any:
    # Only one level: the intermediate value is called as-is, not re-curried.
    first, rest = arguments.split_at(arity)
    _logger.debug(
        'unrolling {!r}: {} arguments to it, {} to its result',
        target,
        len(first),
        len(rest),
    )
    intermediate = target(*first)
    if not callable(intermediate):
        raise NotCallableError(
            intermediate,
            'result of {!r} given {} extra arguments'.format(target, len(rest)),
        )
    return intermediate(*rest)


@overload
def curry(arity: int) -> Callable[[Callable[..., _R]], Curried[_R]]:
    ...


@overload
def curry(arity: int, target: Callable[..., _R]) -> Curried[_R]:
    ...


def curry(
    arity: int, target: Any = _MISSING
) -> Union[Curried[_R], Callable[[Callable[..., _R]], Curried[_R]]]:
    """Curry target so that it waits for `arity` arguments before running.

    When target is omitted, return a decorator instead:

        @curry(2)
        def prop(key, mapping):
            return mapping[key]
    """
    if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise InvalidArityError(arity)
    if target is _MISSING:
        return functools.partial(curry, arity)
    if not callable(target):
        raise NotCallableError(target, 'curry target')
    curried = Curried(arity, target)
    attach_documentation(target, curried)
    return curried
