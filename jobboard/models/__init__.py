"""
Database models package.
"""

from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.user import User

__all__ = ["Company", "Job", "User"]
