"""
Company Repository
"""
from sqlalchemy.orm import Session
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from app.core.database import run_query
from app.core.exceptions import BadRequestError, NotFoundError
from app.core.logging import logger
from app.utils.sql import build_company_filter, build_set_clause


# public field name -> column
COMPANY_FIELDS = MappingProxyType({
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
})

COMPANY_COLUMNS = """handle,
                  name,
                  description,
                  num_employees AS "numEmployees",
                  logo_url AS "logoUrl\""""


class CompanyRepository:
    """Company data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a company.

        data: {handle, name, description, numEmployees, logoUrl}

        Raises BadRequestError if the handle is taken.
        """
        duplicate = run_query(
            self.db,
            "SELECT handle FROM companies WHERE handle = $1",
            [data["handle"]],
        )
        if duplicate:
            raise BadRequestError(f"Duplicate company: {data['handle']}")

        rows = run_query(
            self.db,
            f"""INSERT INTO companies
                   (handle, name, description, num_employees, logo_url)
               VALUES ($1, $2, $3, $4, $5)
               RETURNING {COMPANY_COLUMNS}""",
            [
                data["handle"],
                data["name"],
                data.get("description"),
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        self.db.commit()
        return rows[0]

    def find_all(
        self,
        name_like: Optional[str] = None,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Companies matching the optional filters, ordered by name"""
        where, values = build_company_filter(name_like, min_employees, max_employees)
        logger.debug(f"Company filter: {where!r} params={values}")

        return run_query(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
               FROM companies
               {where}
               ORDER BY name""",
            values,
        )

    def get(self, handle: str) -> Dict[str, Any]:
        """Company by handle; raises NotFoundError"""
        rows = run_query(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
               FROM companies
               WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return rows[0]

    def update(self, handle: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partial update: only the fields present in data change.

        data can include {name, description, numEmployees, logoUrl}

        Raises NoDataProvided for empty data, NotFoundError if missing.
        """
        set_cols, values = build_set_clause(data, COMPANY_FIELDS)
        handle_idx = f"${len(values) + 1}"

        rows = run_query(
            self.db,
            f"""UPDATE companies
               SET {set_cols}
               WHERE handle = {handle_idx}
               RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        self.db.commit()
        return rows[0]

    def remove(self, handle: str) -> None:
        """Delete company (its jobs cascade); raises NotFoundError"""
        rows = run_query(
            self.db,
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        self.db.commit()
