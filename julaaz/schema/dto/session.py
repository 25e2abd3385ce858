from dataclasses import dataclass

from julaaz.schema.enums import RolePriority, RoleType


@dataclass
class User:
    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    role: RoleType | None = None
    is_verified: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role.value if self.role else None,
            "is_verified": self.is_verified,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        role = data.get("role")
        return cls(
            id=data["id"],
            name=data.get("name"),
            email=data.get("email"),
            phone=data.get("phone"),
            role=RoleType(role) if role else None,
            is_verified=bool(data.get("is_verified", False)),
        )


@dataclass
class UserRole:
    type: RoleType
    priority: RolePriority | None = None
    last_used: bool = False

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "priority": self.priority.value if self.priority else None,
            "last_used": self.last_used,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserRole":
        priority = data.get("priority")
        return cls(
            type=RoleType(data["type"]),
            priority=RolePriority(priority) if priority else None,
            last_used=bool(data.get("last_used", False)),
        )
