"""
Job Model
"""
from sqlalchemy import Column, Text, Integer, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from jobly.core.database import Base


class Job(Base):
    __tablename__ = "jobs"
    
    # Primary Key (store-assigned)
    id = Column(Integer, primary_key=True, autoincrement=True)
    
    # Basic Info
    title = Column(Text, nullable=False)
    salary = Column(Integer)
    equity = Column(Numeric)
    company_handle = Column(
        Text,
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )
    
    # Relationships
    company = relationship("Company", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
    
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )
