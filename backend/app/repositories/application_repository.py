"""
Application Repository - users applying to jobs
"""
from sqlalchemy.orm import Session
from typing import List

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError


class ApplicationRepository:
    """Job application data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def apply(self, username: str, job_id: int) -> int:
        """
        Record that a user applied to a job.

        Returns the job id. Raises NotFoundError for an unknown user or
        job, BadRequestError if the user already applied.
        """
        if not run_query(self.db, "SELECT username FROM users WHERE username = $1", [username]):
            raise NotFoundError(f"No user: {username}")

        if not run_query(self.db, "SELECT id FROM jobs WHERE id = $1", [job_id]):
            raise NotFoundError(f"No job: {job_id}")

        existing = run_query(
            self.db,
            "SELECT job_id FROM applications WHERE username = $1 AND job_id = $2",
            [username, job_id],
        )
        if existing:
            raise BadRequestError(f"{username} already applied to job {job_id}")

        rows = run_query(
            self.db,
            """INSERT INTO applications (username, job_id)
               VALUES ($1, $2)
               RETURNING job_id AS "jobId\"""",
            [username, job_id],
        )
        self.db.commit()
        return rows[0]["jobId"]

    def job_ids_for(self, username: str) -> List[int]:
        """Ids of the jobs a user applied to"""
        rows = run_query(
            self.db,
            """SELECT job_id
               FROM applications
               WHERE username = $1
               ORDER BY job_id""",
            [username],
        )
        return [row["job_id"] for row in rows]
