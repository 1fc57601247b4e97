"""
Company Repository - company data access
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from jobly.core.exceptions import DuplicateError, NotFoundError
from jobly.core.logging import logger
from jobly.repositories.base import BaseRepository
from jobly.schemas.company import CompanyCreate, CompanyDetail, CompanyRead
from jobly.sql import (
    CompanyFilter,
    build_company_filter,
    build_set_clause,
    require_known_fields,
    where_clause,
)

# API field -> column, for fields whose names differ
COMPANY_FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


class CompanyRepository(BaseRepository):
    """Company data access layer"""
    
    UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})
    
    def create(self, data: CompanyCreate) -> CompanyRead:
        """
        Create a company.
        
        Raises:
            DuplicateError: if the handle or name is already taken
        """
        duplicate = self._execute(
            "SELECT handle FROM companies WHERE handle = $1 OR name = $2",
            [data.handle, data.name],
        ).first()
        if duplicate is not None:
            if duplicate.handle == data.handle:
                raise DuplicateError(f"Duplicate company: {data.handle}")
            raise DuplicateError(f"Duplicate company name: {data.name}")
        
        row = self._execute(
            f"""INSERT INTO companies
                (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [data.handle, data.name, data.description, data.num_employees, data.logo_url],
        ).mappings().one()
        self.db.commit()
        
        logger.info(f"Created company {data.handle}")
        return CompanyRead.model_validate(dict(row))
    
    def find_all(self, filters: Optional[CompanyFilter] = None) -> List[CompanyRead]:
        """
        List companies matching all given criteria.
        
        Raises:
            RangeError: if min employees exceeds max employees
        """
        fragment, params = build_company_filter(filters or CompanyFilter())
        rows = self._execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies{where_clause(fragment)}",
            params,
        ).mappings().all()
        return [CompanyRead.model_validate(dict(row)) for row in rows]
    
    def get(self, handle: str) -> CompanyDetail:
        """
        Get a company with its jobs.
        
        Raises:
            NotFoundError: if no company has this handle
        """
        company = self._execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [handle],
        ).mappings().first()
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        
        jobs = self._execute(
            'SELECT id, title, salary, equity, company_handle AS "companyHandle" '
            "FROM jobs WHERE company_handle = $1",
            [handle],
        ).mappings().all()
        return CompanyDetail.model_validate({**company, "jobs": [dict(job) for job in jobs]})
    
    def update(self, handle: str, data: Dict[str, Any]) -> CompanyRead:
        """
        Partially update a company; only the supplied fields change.
        
        Raises:
            UnknownFieldError: for fields outside UPDATABLE_FIELDS
            EmptyInputError: if ``data`` is empty
            NotFoundError: if no company has this handle
            DuplicateError: if the new name belongs to another company
        """
        require_known_fields(data, self.UPDATABLE_FIELDS)
        set_cols, params = build_set_clause(data, COMPANY_FIELD_MAP)
        handle_placeholder = params.add(handle)
        
        try:
            row = self._execute(
                f"""UPDATE companies
                    SET {set_cols}
                    WHERE handle = {handle_placeholder}
                    RETURNING {COMPANY_COLUMNS}""",
                params,
            ).mappings().first()
        except IntegrityError:
            self.db.rollback()
            if "name" in data:
                raise DuplicateError(f"Duplicate company name: {data['name']}")
            raise
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        self.db.commit()
        
        logger.info(f"Updated company {handle}: {', '.join(data)}")
        return CompanyRead.model_validate(dict(row))
    
    def remove(self, handle: str) -> None:
        """
        Delete a company (its jobs go with it).
        
        Raises:
            NotFoundError: if no company has this handle
        """
        row = self._execute(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        ).first()
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        self.db.commit()
        
        logger.info(f"Removed company {handle}")
