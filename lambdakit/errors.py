from __future__ import annotations
import builtins


class CurryError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArityError(CurryError, builtins.ValueError):
    """Raised when a curried function is declared with an unusable arity.

    The arity must be a non-negative int. bool is rejected even though it is
    a subclass of int.
    """

    def __init__(self, arity: object) -> None:
        super().__init__(
            'arity must be a non-negative integer, not {!r}'.format(arity)
        )
        self.arity = arity

    def __repr__(self) -> str:
        return f'InvalidArityError({self.arity!r})'


class NotCallableError(CurryError, builtins.TypeError):
    """Raised when a value that has to be called is not callable.

    This happens either when curry is given a non-callable target, or when an
    overflowing call gets a non-callable value back from the target and tries
    to apply the remaining arguments to it.
    """

    def __init__(self, value: object, context: str | None = None) -> None:
        message = '{!r} object is not callable'.format(type(value).__name__)
        if context is not None:
            message = '{} ({})'.format(message, context)
        super().__init__(message)
        self.value = value
        self.context = context

    def __repr__(self) -> str:
        return f'NotCallableError({self.value!r}, context={self.context!r})'
