"""
Companies resource.

Mirrors the jobs resource: public reads, admin-only writes.
"""

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_admin_user
from jobboard.core.validation import coerce_number, validate_payload
from jobboard.crud import company as company_crud
from jobboard.schemas.company import (
    CompanyDeletedResponse,
    CompanyDetailEnvelope,
    CompanyDetailResponse,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyNew,
    CompanyResponse,
    CompanySearch,
    CompanyUpdate,
)

logger = logging.getLogger(__name__)


def company_search_filters(request: Request) -> CompanySearch:
    query = dict(request.query_params)
    for key in ("minEmployees", "maxEmployees"):
        if key in query:
            query[key] = coerce_number(query[key])
    return validate_payload(CompanySearch, query)


def create_router() -> APIRouter:
    router = APIRouter(prefix="/companies", tags=["Companies"])

    @router.post(
        "",
        status_code=201,
        response_model=CompanyEnvelope,
        dependencies=[Depends(get_admin_user)],
    )
    def create_company(company_in: CompanyNew, db: Session = Depends(get_db)):
        company = company_crud.create(db, company_in)
        return CompanyEnvelope(company=CompanyResponse.model_validate(company))

    @router.get("", response_model=CompanyListEnvelope)
    def list_companies(
        filters: CompanySearch = Depends(company_search_filters),
        db: Session = Depends(get_db)
    ):
        """
        List companies, optionally filtered by nameLike, minEmployees and
        maxEmployees.
        """
        companies = company_crud.find_all(db, filters)
        return CompanyListEnvelope(companies=[CompanyResponse.model_validate(c) for c in companies])

    @router.get("/{handle}", response_model=CompanyDetailEnvelope)
    def get_company(handle: str, db: Session = Depends(get_db)):
        company = company_crud.get(db, handle)
        return CompanyDetailEnvelope(company=CompanyDetailResponse.model_validate(company))

    @router.patch(
        "/{handle}",
        response_model=CompanyEnvelope,
        dependencies=[Depends(get_admin_user)],
    )
    def update_company(handle: str, company_in: CompanyUpdate, db: Session = Depends(get_db)):
        # Keyed by API names; the CRUD layer maps them to columns
        data = company_in.model_dump(exclude_unset=True, by_alias=True)
        company = company_crud.update(db, handle, data)
        return CompanyEnvelope(company=CompanyResponse.model_validate(company))

    @router.delete(
        "/{handle}",
        response_model=CompanyDeletedResponse,
        dependencies=[Depends(get_admin_user)],
    )
    def delete_company(handle: str, db: Session = Depends(get_db)):
        company_crud.remove(db, handle)
        return CompanyDeletedResponse(deleted=handle)

    return router
