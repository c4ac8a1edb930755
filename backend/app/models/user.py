"""
User Model
"""
from sqlalchemy import Column, String, Boolean, Text
from sqlalchemy.orm import relationship

from app.core.database import Base


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
    is_admin = Column(Boolean, nullable=False, default=False)

    # Relationships
    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan")
