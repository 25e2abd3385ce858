import json

from psycopg2.extensions import connection
from psycopg2.extras import RealDictCursor


class SessionRepository:
    def __init__(self, conn: connection):
        self._conn = conn

    def get_by_user(self, user_id: str) -> dict | None:
        query = """
            SELECT user_id, role_state, auth_state, updated_at
            FROM user_sessions WHERE user_id = %s
        """
        with self._conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(query, (user_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def upsert(self, user_id: str, role_state: dict, auth_state: dict) -> int:
        query = """
            INSERT INTO user_sessions (user_id, role_state, auth_state)
            VALUES (%s, %s, %s)
            ON CONFLICT (user_id) DO UPDATE SET
                role_state = EXCLUDED.role_state,
                auth_state = EXCLUDED.auth_state,
                updated_at = now()
        """
        with self._conn.cursor() as cur:
            cur.execute(query, (user_id, json.dumps(role_state), json.dumps(auth_state)))
            return cur.rowcount

    def delete(self, user_id: str) -> int:
        query = "DELETE FROM user_sessions WHERE user_id = %s"
        with self._conn.cursor() as cur:
            cur.execute(query, (user_id,))
            return cur.rowcount
