"""
Jobs resource.

Reads are public; create, update and delete require an admin token.
Handlers only call the CRUD layer and shape the success response; every
failure is raised and rendered by the application's error handlers.
"""

import logging
from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_admin_user
from jobboard.core.validation import coerce_number, validate_payload
from jobboard.crud import job as job_crud
from jobboard.schemas.fields import MAX_INT
from jobboard.schemas.job import (
    JobDetailEnvelope,
    JobDetailResponse,
    JobEnvelope,
    JobListEnvelope,
    JobNew,
    JobRemovedResponse,
    JobResponse,
    JobSearch,
    JobUpdate,
)

logger = logging.getLogger(__name__)


def job_search_filters(request: Request) -> JobSearch:
    """
    Read the search filters from the query string.

    minSalary becomes a number when it reads as one; hasEquity is true only
    for the literal "true". Unknown parameters are rejected by the schema.
    """
    query = dict(request.query_params)
    if "minSalary" in query:
        query["minSalary"] = coerce_number(query["minSalary"])
    query["hasEquity"] = query.get("hasEquity") == "true"
    return validate_payload(JobSearch, query)


def create_router() -> APIRouter:
    router = APIRouter(prefix="/jobs", tags=["Jobs"])

    @router.post(
        "",
        status_code=201,
        response_model=JobEnvelope,
        dependencies=[Depends(get_admin_user)],
    )
    def create_job(job_in: JobNew, db: Session = Depends(get_db)):
        """Create a job. Admin only."""
        job = job_crud.create(db, job_in)
        return JobEnvelope(job=JobResponse.model_validate(job))

    @router.get("", response_model=JobListEnvelope)
    def list_jobs(
        filters: JobSearch = Depends(job_search_filters),
        db: Session = Depends(get_db)
    ):
        """
        List jobs, optionally filtered.

        Query parameters:
            title: Case-insensitive substring of the title
            minSalary: Minimum salary
            hasEquity: "true" to keep only jobs offering equity
        """
        jobs = job_crud.find_all(db, filters)
        return JobListEnvelope(jobs=[JobResponse.model_validate(j) for j in jobs])

    @router.get("/{job_id}", response_model=JobDetailEnvelope)
    def get_job(job_id: int = Path(..., le=MAX_INT), db: Session = Depends(get_db)):
        """Retrieve a job and its company."""
        job = job_crud.get(db, job_id)
        return JobDetailEnvelope(job=JobDetailResponse.model_validate(job))

    @router.patch(
        "/{job_id}",
        response_model=JobEnvelope,
        dependencies=[Depends(get_admin_user)],
    )
    def update_job(job_in: JobUpdate, job_id: int = Path(..., le=MAX_INT), db: Session = Depends(get_db)):
        """Update title, salary or equity of a job. Admin only."""
        job = job_crud.update(db, job_id, job_in.model_dump(exclude_unset=True))
        return JobEnvelope(job=JobResponse.model_validate(job))

    @router.delete(
        "/{job_id}",
        response_model=JobRemovedResponse,
        dependencies=[Depends(get_admin_user)],
    )
    def delete_job(job_id: int = Path(..., le=MAX_INT), db: Session = Depends(get_db)):
        """Delete a job. Admin only."""
        job_crud.remove(db, job_id)
        return JobRemovedResponse(removed=job_id)

    return router
