from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Faculty:
    id: str
    name: str
    email: str
    phone: str
    department: str
    designation: str
    username: str = ""
    password: str = ""

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Faculty":
        return cls(
            id=r.get("id", ""),
            name=r.get("name", ""),
            email=r.get("email", ""),
            phone=r.get("phone", ""),
            department=r.get("department", ""),
            designation=r.get("designation", ""),
            username=r.get("username", ""),
            password=r.get("password", ""),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "designation": self.designation,
            "username": self.username,
            "password": self.password,
        }
