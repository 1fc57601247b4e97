"""
Job Repository - job data access
"""
from typing import Any, Dict, List, Optional

from jobly.core.exceptions import NotFoundError
from jobly.core.logging import logger
from jobly.repositories.base import BaseRepository
from jobly.repositories.company_repository import COMPANY_COLUMNS
from jobly.schemas.job import JobCreate, JobDetail, JobRead
from jobly.sql import (
    JobFilter,
    build_job_filter,
    build_set_clause,
    require_known_fields,
    where_clause,
)

JOB_FIELD_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


class JobRepository(BaseRepository):
    """Job data access layer"""
    
    UPDATABLE_FIELDS = frozenset(JOB_FIELD_MAP)
    
    def create(self, data: JobCreate) -> JobRead:
        """Create a job; identical jobs are allowed"""
        row = self._execute(
            f"""INSERT INTO jobs
                (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_JOB_COLUMNS}""",
            [data.title, data.salary, data.equity, data.company_handle],
        ).mappings().one()
        self.db.commit()
        
        logger.info(f"Created job {row['id']} at {data.company_handle}")
        return JobRead.model_validate(dict(row))
    
    def find_all(self, filters: Optional[JobFilter] = None) -> List[JobRead]:
        """List jobs matching all given criteria"""
        fragment, params = build_job_filter(filters or JobFilter())
        rows = self._execute(
            f"SELECT {_JOB_COLUMNS} FROM jobs{where_clause(fragment)}",
            params,
        ).mappings().all()
        return [JobRead.model_validate(dict(row)) for row in rows]
    
    def get(self, job_id: int) -> JobDetail:
        """
        Get a job with its company's details in place of the handle.
        
        Raises:
            NotFoundError: if no job has this id
        """
        row = self._execute(
            f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = $1",
            [job_id],
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No job with id: {job_id}")
        
        job = dict(row)
        company_handle = job.pop("companyHandle")
        company = self._execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [company_handle],
        ).mappings().one()
        return JobDetail.model_validate({**job, "company": dict(company)})
    
    def update(self, job_id: int, data: Dict[str, Any]) -> JobRead:
        """
        Partially update a job's title, salary or equity.
        
        Raises:
            UnknownFieldError: for fields outside UPDATABLE_FIELDS
            EmptyInputError: if ``data`` is empty
            NotFoundError: if no job has this id
        """
        require_known_fields(data, self.UPDATABLE_FIELDS)
        set_cols, params = build_set_clause(data, JOB_FIELD_MAP)
        id_placeholder = params.add(job_id)
        
        row = self._execute(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_placeholder}
                RETURNING {_JOB_COLUMNS}""",
            params,
        ).mappings().first()
        if row is None:
            raise NotFoundError(f"No job with id: {job_id}")
        self.db.commit()
        
        logger.info(f"Updated job {job_id}: {', '.join(data)}")
        return JobRead.model_validate(dict(row))
    
    def remove(self, job_id: int) -> None:
        """
        Delete a job.
        
        Raises:
            NotFoundError: if no job has this id
        """
        row = self._execute(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        ).first()
        if row is None:
            raise NotFoundError(f"No job with id: {job_id}")
        self.db.commit()
        
        logger.info(f"Removed job {job_id}")
