from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    END_USER = "END_USER"
    ADMIN = "ADMIN"

    @property
    def label(self):
        if self is Role.ADMIN:
            return "Admin"
        if self is Role.END_USER:
            return "End User"
        raise ValueError(f"Unhandled role: {self!r}")

    @property
    def color(self):
        if self is Role.ADMIN:
            return "bg-purple-100 text-purple-800"
        if self is Role.END_USER:
            return "bg-blue-100 text-blue-800"
        raise ValueError(f"Unhandled role: {self!r}")

    @classmethod
    def parse(cls, value):
        """Return the Role for ``value``; raise ValueError for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = [r.value for r in cls]
            raise ValueError(f"Invalid role '{value}'. Valid roles are {valid}") from None

    @classmethod
    def choices(cls):
        return [(r.value, r.label) for r in cls]


@dataclass(frozen=True)
class Principal:
    """The authenticated caller. Built once per session, never mutated."""

    id: int
    role: Role
    name: str = ""
    email: str = ""

    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, role=Role.parse(user.role), name=user.name, email=user.email)

    @property
    def is_admin(self):
        if self.role is Role.ADMIN:
            return True
        if self.role is Role.END_USER:
            return False
        raise ValueError(f"Unhandled role: {self.role!r}")

    def as_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "role_label": self.role.label,
        }
