"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from jobboard.crud import company, job, user

__all__ = ["company", "job", "user"]
