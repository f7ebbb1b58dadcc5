from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role
from ..records.fields import enum_field, without_none


@dataclass(frozen=True)
class User:
    """Login account. Students and faculty get one mirrored from their profile.

    Note: the password is stored and compared as plain text.
    """

    username: str
    password: str
    role: Role
    name: str
    id: Optional[str] = None

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "User":
        return cls(
            username=r.get("username", ""),
            password=r.get("password", ""),
            role=enum_field(r, "role", Role),
            name=r.get("name", ""),
            id=r.get("id"),
        )

    def to_record(self) -> dict[str, Any]:
        return without_none(
            {
                "username": self.username,
                "password": self.password,
                "role": self.role.value,
                "id": self.id,
                "name": self.name,
            }
        )

    def public_view(self) -> dict[str, Any]:
        data = self.to_record()
        data.pop("password", None)
        return data
