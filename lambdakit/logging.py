import inspect
import logging
from typing import Callable, Dict, Tuple


class LambdaKitLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        # Curried functions log on every call, so skip the stack walk unless
        # the record would go somewhere.
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        # https://stackoverflow.com/a/44164714/3455228
        caller = inspect.stack(0)[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        caller = inspect.stack(0)[1]
        _log(self._logger.info, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.WARNING):
            return
        caller = inspect.stack(0)[1]
        _log(self._logger.warning, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.ERROR):
            return
        caller = inspect.stack(0)[1]
        _log(self._logger.error, format_string, caller, args, kwargs)


def get_logger(name: str) -> LambdaKitLogger:
    return LambdaKitLogger(logging.getLogger(name))


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: Tuple[object, ...],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self,
        format_string: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)


logging.getLogger('lambdakit').addHandler(logging.NullHandler())
