"""
Job Schemas
"""
from pydantic import ConfigDict, Field, field_validator
from typing import List, Optional

from jobly.schemas.base import CamelModel, Equity, reject_null
from jobly.schemas.company import CompanyRead


class JobBase(CamelModel):
    """Job base schema"""
    title: str = Field(min_length=1)
    salary: int = Field(ge=0)
    equity: Equity = Field(ge=0, le=1)


class JobCreate(JobBase):
    """Job creation schema"""
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(CamelModel):
    """Job update schema (id and company are immutable)"""
    model_config = ConfigDict(extra="forbid")
    
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Equity] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class JobRead(CamelModel):
    """Job as stored"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Equity] = None
    company_handle: str


class JobDetail(CamelModel):
    """Job with its owning company in place of the handle"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Equity] = None
    company: CompanyRead


class JobResponse(CamelModel):
    job: JobRead


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: List[JobRead]
