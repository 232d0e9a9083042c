"""
CRUD operations for Company model.
"""

import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from jobboard.core.errors import BadRequestError, NotFoundError
from jobboard.core.sql import bind_positional, like_pattern, sql_for_partial_update
from jobboard.models.company import Company
from jobboard.schemas.company import CompanyNew, CompanySearch

logger = logging.getLogger(__name__)

# API field name -> column name, for fields that differ
COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyNew) -> Company:
    """
    Create a new company.

    Raises:
        BadRequestError: If the handle or the name is already taken
    """
    if db.query(Company).filter(Company.handle == company_data.handle).first():
        raise BadRequestError(f"Duplicate company: {company_data.handle}")
    if db.query(Company).filter(Company.name == company_data.name).first():
        raise BadRequestError(f"Duplicate company name: {company_data.name}")

    db_company = Company(**company_data.model_dump())

    db.add(db_company)
    db.commit()
    db.refresh(db_company)

    logger.info(f"Created company {db_company.handle}")
    return db_company


def find_all(db: Session, filters: CompanySearch) -> List[Company]:
    """
    Find companies matching the search filters, ordered by name.

    Raises:
        BadRequestError: If min_employees is above max_employees
    """
    if (
        filters.min_employees is not None
        and filters.max_employees is not None
        and filters.min_employees > filters.max_employees
    ):
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    query = db.query(Company)

    if filters.name_like is not None:
        query = query.filter(Company.name.ilike(like_pattern(filters.name_like), escape="\\"))
    if filters.min_employees is not None:
        query = query.filter(Company.num_employees >= filters.min_employees)
    if filters.max_employees is not None:
        query = query.filter(Company.num_employees <= filters.max_employees)

    return query.order_by(Company.name).all()


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company and its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = (
        db.query(Company)
        .options(selectinload(Company.jobs))
        .filter(Company.handle == handle)
        .first()
    )
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company


def update(db: Session, handle: str, data: dict) -> Company:
    """
    Apply a partial update to a company.

    data is keyed by API field names (numEmployees, logoUrl, ...); they
    are translated to column names through COMPANY_COLUMNS.

    Raises:
        InvalidInputError: If data is empty
        BadRequestError: If the new name belongs to another company
        NotFoundError: If no company has this handle
    """
    fragment = sql_for_partial_update(data, COMPANY_COLUMNS)
    handle_idx = len(fragment.values) + 1
    sql, params = bind_positional(
        f'UPDATE companies SET {fragment.set_clause} WHERE "handle"=${handle_idx}',
        fragment.values + [handle],
    )

    try:
        result = db.execute(text(sql), params)
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")
    db.commit()

    logger.info(f"Updated company {handle}: {sorted(data)}")
    return get(db, handle)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company along with its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = db.query(Company).filter(Company.handle == handle).first()
    if company is None:
        raise NotFoundError(f"No company: {handle}")

    db.delete(company)
    db.commit()
    logger.info(f"Deleted company {handle}")
