"""
Company Schemas
"""
from pydantic import ConfigDict, Field, field_validator
from typing import List, Optional

from jobly.schemas.base import CamelModel, Equity, reject_null


class CompanyBase(CamelModel):
    """Company base schema"""
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None


class CompanyCreate(CompanyBase):
    """Company creation schema"""
    handle: str = Field(min_length=1, max_length=25)


class CompanyUpdate(CamelModel):
    """Company update schema (handle is immutable)"""
    model_config = ConfigDict(extra="forbid")
    
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class CompanyRead(CamelModel):
    """Company as stored"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    """A job listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Equity] = None
    company_handle: str


class CompanyDetail(CompanyRead):
    """Company with its jobs"""
    jobs: List[CompanyJob] = []


class CompanyResponse(CamelModel):
    company: CompanyRead


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: List[CompanyRead]
