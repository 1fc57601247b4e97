"""
Base Repository - raw SQL execution
"""
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.orm import Session

from jobly.core.logging import logger
from jobly.sql import compile_positional


class BaseRepository:
    """Runs ``$n``-parameterized statements on a request-scoped session"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _execute(self, sql: str, params: Sequence[Any] = ()) -> Result:
        statement, binds = compile_positional(sql, params)
        logger.debug(f"SQL {' '.join(statement.split())} ({len(binds)} params)")
        return self.db.execute(text(statement), binds)
