"""
Company API Routes
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from jobly.core.database import get_db
from jobly.dependencies import require_admin
from jobly.repositories.company_repository import CompanyRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
)
from jobly.sql import CompanyFilter

router = APIRouter()


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_company(
    request: CompanyCreate,
    db: Session = Depends(get_db)
):
    """
    Create a company (Admin only)
    """
    company = CompanyRepository(db).create(request)
    return CompanyResponse(company=company)


@router.get("", response_model=CompanyListResponse)
def list_companies(
    min_employees: Optional[int] = Query(default=None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(default=None, alias="maxEmployees", ge=0),
    name: Optional[str] = Query(default=None, min_length=1),
    db: Session = Depends(get_db)
):
    """
    List companies
    
    - minEmployees / maxEmployees: inclusive bounds
    - name: case-insensitive partial match
    """
    filters = CompanyFilter(
        min_employees=min_employees,
        max_employees=max_employees,
        name_contains=name,
    )
    companies = CompanyRepository(db).find_all(filters)
    return CompanyListResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(
    handle: str,
    db: Session = Depends(get_db)
):
    """
    Company detail with its jobs
    """
    company = CompanyRepository(db).get(handle)
    return CompanyDetailResponse(company=company)


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
def update_company(
    handle: str,
    request: CompanyUpdate,
    db: Session = Depends(get_db)
):
    """
    Partially update a company (Admin only)
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    company = CompanyRepository(db).update(handle, data)
    return CompanyResponse(company=company)


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
def delete_company(
    handle: str,
    db: Session = Depends(get_db)
):
    """
    Delete a company (Admin only)
    """
    CompanyRepository(db).remove(handle)
    return DeletedResponse(deleted=handle)
