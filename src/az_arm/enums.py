"""Open-set enumerations.

ARM services add enum values over time.  An :class:`OpenEnum` accepts any
string: known values map to their member, anything else becomes a
pseudo-member carrying the raw string so it round-trips unchanged.
"""

from __future__ import annotations

from enum import StrEnum


class OpenEnum(StrEnum):
    """String enum that tolerates values it does not know about."""

    @classmethod
    def _missing_(cls, value: object) -> OpenEnum | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        """*True* when the value is not one of the declared members."""
        return self._value_ not in type(self)._value2member_map_
