from dataclasses import dataclass, field

from julaaz.schema import RoleType, UserRole


@dataclass
class RoleSession:
    roles: list[UserRole] = field(default_factory=list)
    active_role: RoleType | None = None
    suggested_role: RoleType | None = None
    is_role_switcher_open: bool = False

    def set_roles(self, roles: list[UserRole]) -> None:
        self.roles = list(roles)
        preferred = self.preferred_role()
        self.suggested_role = preferred
        # keep a role already chosen in this session
        if self.active_role is None:
            self.active_role = preferred

    def set_active_role(self, role: RoleType) -> None:
        self.roles = [
            UserRole(type=r.type, priority=r.priority, last_used=r.type == role)
            for r in self.roles
        ]
        self.active_role = role
        self.is_role_switcher_open = False

    def clear_roles(self) -> None:
        self.roles = []
        self.active_role = None
        self.suggested_role = None

    def open_role_switcher(self) -> None:
        self.is_role_switcher_open = True

    def close_role_switcher(self) -> None:
        self.is_role_switcher_open = False

    def preferred_role(self) -> RoleType | None:
        last_used = next((r.type for r in self.roles if r.last_used), None)
        if last_used is not None:
            return last_used
        return self.roles[0].type if self.roles else None

    def to_dict(self) -> dict:
        # switcher visibility is per-view state and is not persisted
        return {
            "roles": [r.to_dict() for r in self.roles],
            "active_role": self.active_role.value if self.active_role else None,
            "suggested_role": self.suggested_role.value if self.suggested_role else None,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "RoleSession":
        if not data:
            return cls()
        active = data.get("active_role")
        suggested = data.get("suggested_role")
        return cls(
            roles=[UserRole.from_dict(r) for r in data.get("roles", [])],
            active_role=RoleType(active) if active else None,
            suggested_role=RoleType(suggested) if suggested else None,
        )
