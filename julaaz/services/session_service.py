import json
import logging

from psycopg2.extensions import connection

from julaaz.access import AuthSession, RoleSession
from julaaz.db.repositories.session import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, conn: connection):
        self._repo = SessionRepository(conn)

    def hydrate(self, user_id: str) -> tuple[RoleSession, AuthSession]:
        row = self._repo.get_by_user(user_id)
        if row is None:
            return RoleSession(), AuthSession()
        return (
            RoleSession.from_dict(_load(row.get("role_state"))),
            AuthSession.from_dict(_load(row.get("auth_state"))),
        )

    def persist(self, user_id: str, role: RoleSession, auth: AuthSession) -> None:
        self._repo.upsert(user_id, role.to_dict(), auth.to_dict())
        logger.info(f"[Session] Persisted session for {user_id}")

    def logout(self, user_id: str, role: RoleSession, auth: AuthSession) -> None:
        role.clear_roles()
        auth.logout()
        deleted = self._repo.delete(user_id)
        logger.info(f"[Session] Cleared session for {user_id} ({deleted} rows)")


def _load(value) -> dict | None:
    if value is None or isinstance(value, dict):
        return value
    return json.loads(value)
