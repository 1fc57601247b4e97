"""
User Repository
"""
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError

from jobly.core.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from jobly.core.logging import logger
from jobly.core.security import hash_password, verify_password
from jobly.repositories.base import BaseRepository
from jobly.schemas.user import UserCreate, UserDetail, UserRead
from jobly.sql import build_set_clause, require_known_fields

USER_FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

_USER_COLUMNS = (
    'username, first_name AS "firstName", last_name AS "lastName", '
    'email, is_admin AS "isAdmin"'
)


class UserRepository(BaseRepository):
    """User data access layer"""
    
    UPDATABLE_FIELDS = frozenset({"firstName", "lastName", "email", "password", "isAdmin"})
    
    def register(self, data: UserCreate) -> UserRead:
        """
        Create user with a hashed password
        
        Raises:
            DuplicateError: if the username is already taken
        """
        duplicate = self._execute(
            "SELECT username FROM users WHERE username = $1",
            [data.username],
        ).first()
        if duplicate is not None:
            raise DuplicateError(f"Duplicate username: {data.username}")
        
        row = self._execute(
            f"""INSERT INTO users
                (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {_USER_COLUMNS}""",
            [
                data.username,
                hash_password(data.password),
                data.first_name,
                data.last_name,
                data.email,
                data.is_admin,
            ],
        ).mappings().one()
        self.db.commit()
        
        logger.info(f"Registered user {data.username} (admin={data.is_admin})")
        return UserRead.model_validate(dict(row))
    
    def authenticate(self, username: str, password: str) -> UserRead:
        """
        Check a username/password pair
        
        Raises:
            UnauthorizedError: for an unknown user or a wrong password
        """
        row = self._execute(
            f"SELECT {_USER_COLUMNS}, password FROM users WHERE username = $1",
            [username],
        ).mappings().first()
        if row is None or not verify_password(password, row["password"]):
            raise UnauthorizedError("Invalid username/password")
        
        user = dict(row)
        del user["password"]
        return UserRead.model_validate(user)
    
    def find_all(self) -> List[UserRead]:
        """List all users"""
        rows = self._execute(f"SELECT {_USER_COLUMNS} FROM users").mappings().all()
        return [UserRead.model_validate(dict(row)) for row in rows]
    
    def get(self, username: str) -> UserDetail:
        """
        Get user with the ids of the jobs they applied to
        
        Raises:
            NotFoundError: if no user has this username
        """
        user = self._execute(
            f"SELECT {_USER_COLUMNS} FROM users WHERE username = $1",
            [username],
        ).mappings().first()
        if user is None:
            raise NotFoundError(f"No user: {username}")
        
        job_ids = self._execute(
            "SELECT job_id FROM applications WHERE username = $1",
            [username],
        ).scalars().all()
        return UserDetail.model_validate({**user, "applications": list(job_ids)})
    
    def update(self, username: str, data: Dict[str, Any]) -> UserRead:
        """
        Partially update a user; a new password is hashed before storing
        
        Raises:
            UnknownFieldError: for fields outside UPDATABLE_FIELDS
            EmptyInputError: if ``data`` is empty
            NotFoundError: if no user has this username
        """
        require_known_fields(data, self.UPDATABLE_FIELDS)
        updates = {
            name: hash_password(value) if name == "password" else value
            for name, value in data.items()
        }
        set_cols, params = build_set_clause(updates, USER_FIELD_MAP)
        username_placeholder = params.add(username)
        
        row = self._execute(
            f"""UPDATE users
                SET {set_cols}
                WHERE username = {username_placeholder}
                RETURNING {_USER_COLUMNS}""",
            params,
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No user: {username}")
        self.db.commit()
        
        logger.info(f"Updated user {username}: {', '.join(data)}")
        return UserRead.model_validate(dict(row))
    
    def remove(self, username: str) -> None:
        """
        Delete user
        
        Raises:
            NotFoundError: if no user has this username
        """
        row = self._execute(
            "DELETE FROM users WHERE username = $1 RETURNING username",
            [username],
        ).first()
        if row is None:
            raise NotFoundError(f"No user: {username}")
        self.db.commit()
        
        logger.info(f"Removed user {username}")
    
    def apply_to_job(self, username: str, job_id: int) -> None:
        """
        Record that a user applied to a job
        
        Raises:
            NotFoundError: if the job or the user does not exist
            DuplicateError: if the user already applied to this job
        """
        job = self._execute("SELECT id FROM jobs WHERE id = $1", [job_id]).first()
        if job is None:
            raise NotFoundError(f"No job with id: {job_id}")
        
        user = self._execute(
            "SELECT username FROM users WHERE username = $1",
            [username],
        ).first()
        if user is None:
            raise NotFoundError(f"No user: {username}")
        
        try:
            self._execute(
                "INSERT INTO applications (username, job_id) VALUES ($1, $2)",
                [username, job_id],
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError(f"{username} already applied to job {job_id}")
        
        logger.info(f"User {username} applied to job {job_id}")
