from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    email: str
    phone: str
    department: str
    year: str
    username: str = ""
    password: str = ""

    @classmethod
    def from_record(cls, r: Mapping[str, Any]) -> "Student":
        return cls(
            id=r.get("id", ""),
            name=r.get("name", ""),
            email=r.get("email", ""),
            phone=r.get("phone", ""),
            department=r.get("department", ""),
            year=r.get("year", ""),
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
            "year": self.year,
            "username": self.username,
            "password": self.password,
        }
