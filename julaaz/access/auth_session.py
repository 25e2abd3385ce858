from dataclasses import dataclass

from julaaz.schema import User


@dataclass
class AuthSession:
    user: User | None = None
    token: str | None = None
    is_authenticated: bool = False

    def login(self, user: User, token: str) -> None:
        self.user = user
        self.token = token
        self.is_authenticated = True

    def set_user(self, user: User | None) -> None:
        self.user = user
        self.is_authenticated = user is not None

    def logout(self) -> None:
        self.user = None
        self.token = None
        self.is_authenticated = False

    def to_dict(self) -> dict:
        return {
            "user": self.user.to_dict() if self.user else None,
            "token": self.token,
            "is_authenticated": self.is_authenticated,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "AuthSession":
        if not data:
            return cls()
        user = data.get("user")
        return cls(
            user=User.from_dict(user) if user else None,
            token=data.get("token"),
            is_authenticated=bool(data.get("is_authenticated", False)),
        )
