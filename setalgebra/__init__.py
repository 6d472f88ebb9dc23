"""A small generic set type with union, intersection, difference and subset operations."""

from ._set import Set
from .exceptions import InvalidArgumentError, NotFoundError, SetAlgebraError

__all__ = (
    'Set',
    'SetAlgebraError',
    'InvalidArgumentError',
    'NotFoundError',
)
