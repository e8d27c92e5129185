"""Identifier value types: FleetId, UserId, PlateNumber.

Each identifier is its own ``str`` subclass so the three kinds stay
nominally distinct for type checkers and ``isinstance`` while still
behaving as plain strings for storage and display.

INVARIANT: An identifier instance is never empty or whitespace-only.
The raw value is stored as given; only the emptiness test trims.
"""

from __future__ import annotations

from typing import ClassVar, Self

from fleetctl.domain.errors import InvalidIdentifierError


class _Identifier(str):
    """Validated, non-empty string identifier."""

    kind: ClassVar[str] = "identifier"

    __slots__ = ()

    def __new__(cls, raw: str) -> Self:
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidIdentifierError(cls.kind)
        return super().__new__(cls, raw)

    @classmethod
    def make(cls, raw: str) -> Self:
        """Build an identifier from *raw*, raising ``InvalidIdentifierError`` if empty."""
        return cls(raw)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Report whether :meth:`make` would accept *raw*."""
        try:
            cls.make(raw)
        except InvalidIdentifierError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class FleetId(_Identifier):
    kind = "fleet ID"

    __slots__ = ()


class UserId(_Identifier):
    kind = "user ID"

    __slots__ = ()


class PlateNumber(_Identifier):
    kind = "plate number"

    __slots__ = ()
