"""
Job API Routes
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from jobly.core.database import get_db
from jobly.dependencies import require_admin
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
)
from jobly.sql import JobFilter

router = APIRouter()


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_job(
    request: JobCreate,
    db: Session = Depends(get_db)
):
    """
    Create a job (Admin only)
    """
    job = JobRepository(db).create(request)
    return JobResponse(job=job)


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(default=None, min_length=1),
    min_salary: Optional[int] = Query(default=None, alias="minSalary", ge=0),
    has_equity: bool = Query(default=False, alias="hasEquity"),
    db: Session = Depends(get_db)
):
    """
    List jobs
    
    - title: case-insensitive partial match
    - minSalary: inclusive lower bound
    - hasEquity: when true, only jobs with equity > 0 (false filters nothing)
    """
    filters = JobFilter(
        title_contains=title,
        min_salary=min_salary,
        has_equity=has_equity,
    )
    jobs = JobRepository(db).find_all(filters)
    return JobListResponse(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(
    job_id: int,
    db: Session = Depends(get_db)
):
    """
    Job detail with its company
    """
    job = JobRepository(db).get(job_id)
    return JobDetailResponse(job=job)


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
def update_job(
    job_id: int,
    request: JobUpdate,
    db: Session = Depends(get_db)
):
    """
    Partially update a job's title, salary or equity (Admin only)
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    job = JobRepository(db).update(job_id, data)
    return JobResponse(job=job)


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a job (Admin only)
    """
    JobRepository(db).remove(job_id)
    return DeletedResponse(deleted=job_id)
