"""
Company Model
"""
from sqlalchemy import Column, String, Text, Integer, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base


class Company(Base):
    __tablename__ = "companies"

    # Primary Key
    handle = Column(String(25), primary_key=True)

    # Basic Info
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"))
    description = Column(Text)
    logo_url = Column(Text)

    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")
