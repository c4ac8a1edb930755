"""
User Repository
"""
from sqlalchemy.orm import Session
from types import MappingProxyType
from typing import Any, Dict, List

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.utils.sql import build_set_clause


# public field name -> column
USER_FIELDS = MappingProxyType({
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
})

USER_COLUMNS = """username,
                  first_name AS "firstName",
                  last_name AS "lastName",
                  email,
                  is_admin AS "isAdmin\""""


class UserRepository:
    """User data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """
        Check username/password.

        Returns the user (without password); raises UnauthorizedError.
        """
        rows = run_query(
            self.db,
            f"""SELECT {USER_COLUMNS},
                      password
               FROM users
               WHERE username = $1""",
            [username],
        )
        if rows:
            user = rows[0]
            hashed = user.pop("password")
            if verify_password(password, hashed):
                return user

        raise UnauthorizedError("Invalid username/password")

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create user with a hashed password.

        data: {username, password, firstName, lastName, email, isAdmin}

        Raises BadRequestError on duplicate username.
        """
        duplicate = run_query(
            self.db,
            "SELECT username FROM users WHERE username = $1",
            [data["username"]],
        )
        if duplicate:
            raise BadRequestError(f"Duplicate username: {data['username']}")

        rows = run_query(
            self.db,
            f"""INSERT INTO users
                   (username, password, first_name, last_name, email, is_admin)
               VALUES ($1, $2, $3, $4, $5, $6)
               RETURNING {USER_COLUMNS}""",
            [
                data["username"],
                get_password_hash(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            ],
        )
        self.db.commit()
        return rows[0]

    def find_all(self) -> List[Dict[str, Any]]:
        """All users, ordered by username"""
        return run_query(
            self.db,
            f"""SELECT {USER_COLUMNS}
               FROM users
               ORDER BY username""",
        )

    def get(self, username: str) -> Dict[str, Any]:
        """User by username; raises NotFoundError"""
        rows = run_query(
            self.db,
            f"""SELECT {USER_COLUMNS}
               FROM users
               WHERE username = $1""",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")
        return rows[0]

    def update(self, username: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partial update of {firstName, lastName, password, email}.

        A new password is hashed before it is stored.

        Raises NoDataProvided for empty data, NotFoundError if missing.
        """
        data = dict(data)
        if data.get("password") is not None:
            data["password"] = get_password_hash(data["password"])

        set_cols, values = build_set_clause(data, USER_FIELDS)
        username_idx = f"${len(values) + 1}"

        rows = run_query(
            self.db,
            f"""UPDATE users
               SET {set_cols}
               WHERE username = {username_idx}
               RETURNING {USER_COLUMNS}""",
            [*values, username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")
        self.db.commit()
        return rows[0]

    def remove(self, username: str) -> None:
        """Delete user; raises NotFoundError"""
        rows = run_query(
            self.db,
            "DELETE FROM users WHERE username = $1 RETURNING username",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")
        self.db.commit()
