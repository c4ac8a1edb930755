"""
SQLAlchemy Models (table declarations used for schema creation)
"""
from app.models.user import User
from app.models.company import Company
from app.models.job import Job
from app.models.application import Application

__all__ = [
    "User",
    "Company",
    "Job",
    "Application",
]
