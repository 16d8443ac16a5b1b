"""Enumerations whose variants carry a stable wire code."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from payment_request.domain.exceptions import UnknownCodeError

E = TypeVar("E", bound="CodedEnum")


class CodedEnum(Enum):
    """Base for enumerations that travel over the wire by code.

    The member value IS the wire code ("BankCards", "Created", ...), so the
    reverse lookup table is the one Enum builds at class creation. The
    Python identifier (BANKCARDS, CREATED) is free to follow naming rules
    of this codebase without affecting the payload.

    Subclasses declare members only:

        class Color(CodedEnum):
            RED = "Red"
    """

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls: type[E], code: str) -> E:
        """Decode a wire code into its variant.

        Raises:
            UnknownCodeError: If no variant has this code. Matching is
                exact and case-sensitive.
        """
        try:
            return cls(code)
        except ValueError as e:
            raise UnknownCodeError(cls.__name__, code) from e

    @classmethod
    def values(cls: type[E]) -> tuple[E, ...]:
        """All variants in declaration order."""
        return tuple(cls)

    def __str__(self) -> str:
        return self.value
