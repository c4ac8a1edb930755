"""
Job Repository
"""
from sqlalchemy.orm import Session
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError
from app.core.logging import logger
from app.utils.sql import build_job_filter, build_set_clause


# Job fields share their column names
JOB_FIELDS = MappingProxyType({})

JOB_COLUMNS = """id,
                  title,
                  salary,
                  equity,
                  company_handle AS "companyHandle\""""


class JobRepository:
    """Job data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a job.

        data: {title, salary, equity, companyHandle}

        Raises BadRequestError if the company does not exist.
        """
        company = run_query(
            self.db,
            "SELECT handle FROM companies WHERE handle = $1",
            [data["companyHandle"]],
        )
        if not company:
            raise BadRequestError(f"No company: {data['companyHandle']}")

        rows = run_query(
            self.db,
            f"""INSERT INTO jobs
                   (title, salary, equity, company_handle)
               VALUES ($1, $2, $3, $4)
               RETURNING {JOB_COLUMNS}""",
            [
                data["title"],
                data.get("salary"),
                data.get("equity"),
                data["companyHandle"],
            ],
        )
        self.db.commit()
        return rows[0]

    def find_all(
        self,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: bool = False,
    ) -> List[Dict[str, Any]]:
        """Jobs matching the optional filters, ordered by title"""
        where, values = build_job_filter(title, min_salary, has_equity)
        logger.debug(f"Job filter: {where!r} params={values}")

        return run_query(
            self.db,
            f"""SELECT {JOB_COLUMNS}
               FROM jobs
               {where}
               ORDER BY title""",
            values,
        )

    def get(self, job_id: int) -> Dict[str, Any]:
        """Job by id; raises NotFoundError"""
        rows = run_query(
            self.db,
            f"""SELECT {JOB_COLUMNS}
               FROM jobs
               WHERE id = $1""",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return rows[0]

    def find_by_company(self, company_handle: str) -> List[Dict[str, Any]]:
        """All jobs of a company, ordered by id"""
        return run_query(
            self.db,
            f"""SELECT {JOB_COLUMNS}
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [company_handle],
        )

    def update(self, job_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partial update of {title, salary, equity}.

        Raises NoDataProvided for empty data, NotFoundError if missing.
        """
        set_cols, values = build_set_clause(data, JOB_FIELDS)
        id_idx = f"${len(values) + 1}"

        rows = run_query(
            self.db,
            f"""UPDATE jobs
               SET {set_cols}
               WHERE id = {id_idx}
               RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        self.db.commit()
        return rows[0]

    def remove(self, job_id: int) -> None:
        """Delete job; raises NotFoundError"""
        rows = run_query(
            self.db,
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        self.db.commit()
