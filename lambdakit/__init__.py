"""Currying and documentation helpers for functional-style Python."""

from lambdakit.arguments import ArgumentList, empty_arguments
from lambdakit.config import Settings
from lambdakit.curry import Curried, curry
from lambdakit.documentation import (
    attach_documentation,
    clear_documentation,
    get_documentation,
    set_documentation,
)
from lambdakit.errors import CurryError, InvalidArityError, NotCallableError

version = '0.1.0'

__all__ = [
    'ArgumentList',
    'Curried',
    'CurryError',
    'InvalidArityError',
    'NotCallableError',
    'Settings',
    'attach_documentation',
    'clear_documentation',
    'curry',
    'empty_arguments',
    'get_documentation',
    'set_documentation',
    'version',
]
