"""Configuration read from the process environment."""

from dataclasses import dataclass
import os
from typing import Mapping, Optional


DOCUMENTATION_VARIABLE = 'LAMBDAKIT_DOCS'


def env(
    name: str, default: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Look up an environment variable, falling back to a default.

    The lookup happens on every call; nothing is cached.
    """
    if environ is None:
        environ = os.environ
    return environ.get(name, default)


@dataclass(frozen=True)
class Settings:
    """Documentation mode, passed explicitly to the documentation helpers.

    Documentation mode is off unless the variable holds something other than
    the literal string "false".
    """

    documentation: bool = False

    @classmethod
    def from_environment(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> 'Settings':
        docs = env(DOCUMENTATION_VARIABLE, 'false', environ)
        return cls(documentation=docs != 'false')
