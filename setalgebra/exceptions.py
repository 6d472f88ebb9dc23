"""Errors raised by :mod:`setalgebra`.

Every error derives from :class:`SetAlgebraError`, and also from the builtin
exception a caller would expect from the equivalent builtin ``set`` operation,
so ``except KeyError`` around :meth:`Set.remove() <setalgebra.Set.remove>`
keeps working.
"""

from __future__ import annotations

from typing import Any

__all__ = ('SetAlgebraError', 'InvalidArgumentError', 'NotFoundError')


class SetAlgebraError(Exception):
    """Base class for all setalgebra errors."""


class InvalidArgumentError(SetAlgebraError, ValueError):
    """A required argument was ``None``.

    Raised for a ``None`` element passed to ``add``/``remove`` and for a
    ``None`` operand passed to one of the set-algebra operations.
    """

    @classmethod
    def for_none(cls, name: str) -> InvalidArgumentError:
        return cls(f'{name} must not be None')


class NotFoundError(SetAlgebraError, KeyError):
    """The item to remove is not a member of the set.

    The only argument is the missing item, matching ``set.remove``.
    """

    @property
    def item(self) -> Any:
        return self.args[0]
