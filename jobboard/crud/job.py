"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs. Lookups that miss raise NotFoundError so the API layer can pass
them straight through.
"""

import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.orm import Session, joinedload

from jobboard.core.errors import BadRequestError, NotFoundError
from jobboard.core.sql import bind_positional, like_pattern, sql_for_partial_update
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.schemas.job import JobNew, JobSearch

logger = logging.getLogger(__name__)


def _equity_to_number(data: dict) -> dict:
    if data.get("equity") is not None:
        data["equity"] = float(data["equity"])
    return data


def create(db: Session, job_data: JobNew) -> Job:
    """
    Create a new job in the database.

    Raises:
        BadRequestError: If the company handle is unknown
    """
    if db.get(Company, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(**_equity_to_number(job_data.model_dump()))

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    logger.info(f"Created job {db_job.id} for company {db_job.company_handle}")
    return db_job


def find_all(db: Session, filters: JobSearch) -> List[Job]:
    """
    Find jobs matching the search filters, ordered by title.

    - title: case-insensitive substring match
    - min_salary: salary at least this much
    - has_equity: only jobs offering non-zero equity
    """
    query = db.query(Job)

    if filters.title is not None:
        query = query.filter(Job.title.ilike(like_pattern(filters.title), escape="\\"))
    if filters.min_salary is not None:
        query = query.filter(Job.salary >= filters.min_salary)
    if filters.has_equity:
        query = query.filter(Job.equity > 0)

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID, with its company loaded.

    Raises:
        NotFoundError: If no job has this ID
    """
    job = (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update(db: Session, job_id: int, data: dict) -> Job:
    """
    Apply a partial update to a job.

    Only the keys present in data are written. Title, salary and equity
    share their column names, so no field-name mapping is needed.

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no job has this ID
    """
    fragment = sql_for_partial_update(_equity_to_number(dict(data)), {})
    id_idx = len(fragment.values) + 1
    sql, params = bind_positional(
        f'UPDATE jobs SET {fragment.set_clause} WHERE "id"=${id_idx}',
        fragment.values + [job_id],
    )

    result = db.execute(text(sql), params)
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")
    db.commit()

    logger.info(f"Updated job {job_id}: {sorted(data)}")
    return get(db, job_id)


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    db.delete(job)
    db.commit()
    logger.info(f"Deleted job {job_id}")
