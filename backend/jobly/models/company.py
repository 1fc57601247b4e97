"""
Company Model
"""
from sqlalchemy import Column, String, Text, Integer, CheckConstraint
from sqlalchemy.orm import relationship

from jobly.core.database import Base


class Company(Base):
    __tablename__ = "companies"
    
    # Primary Key (caller-assigned, immutable)
    handle = Column(String(25), primary_key=True)
    
    # Basic Info
    name = Column(Text, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    num_employees = Column(Integer)
    logo_url = Column(Text)
    
    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")
    
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )
