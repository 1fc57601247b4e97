"""
User Model
"""
from sqlalchemy import Column, String, Text, Boolean, false
from sqlalchemy.orm import relationship

from jobly.core.database import Base


class User(Base):
    __tablename__ = "users"
    
    # Primary Key
    username = Column(String(25), primary_key=True)
    
    # Authentication
    password = Column(Text, nullable=False)  # bcrypt hash
    
    # Basic Info
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    
    # Role
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    
    # Relationships
    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan")
