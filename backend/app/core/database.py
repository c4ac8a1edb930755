"""
Database engine, sessions and the positional query interface
"""
import re
from typing import Any, Dict, Generator, List, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings
from app.core.logging import logger


engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# $1, $2, ... as written by the repositories and the clause builders
_PLACEHOLDER = re.compile(r"\$(\d+)")


def get_db() -> Generator:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create all tables declared in app.models"""
    import app.models  # noqa: F401  (registers the tables on Base.metadata)

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")


def bind_positional(sql: str, values: Sequence[Any]):
    """
    Convert a statement written with positional ``$n`` placeholders into a
    SQLAlchemy text clause with named binds (``:p1``, ``:p2`` ...).

    Every value must be referenced by exactly one placeholder number and
    every placeholder number must have a value; anything else means the
    caller numbered its trailing conditions wrong.

    Returns:
        (TextClause, params dict)
    """
    positions = {int(n) for n in _PLACEHOLDER.findall(sql)}
    expected = set(range(1, len(values) + 1))
    if positions != expected:
        raise ValueError(
            f"Placeholders {sorted(positions)} do not match {len(values)} bound values"
        )

    statement = text(_PLACEHOLDER.sub(r":p\1", sql))
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return statement, params


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Execute a statement with positional placeholders and return its rows.

    Args:
        db: Active session
        sql: Statement using ``$1``-style placeholders
        values: Values bound to the placeholders, in order

    Returns:
        List of rows, each a dict keyed by column alias
    """
    statement, params = bind_positional(sql, values)
    result = db.execute(statement, params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
