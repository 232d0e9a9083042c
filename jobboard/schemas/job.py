from pydantic import BaseModel, Field
from typing import List, Optional

from jobboard.schemas.company import CompanyResponse
from jobboard.schemas.fields import EQUITY_PATTERN, MAX_INT, StoredEquity


class JobNew(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_INT)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)

    class Config:
        extra = "forbid"
        strict = True


class JobUpdate(BaseModel):
    """
    Schema for updating a job.

    Every field may be left out but none may be null. id and companyHandle
    are not fields here, so sending them is rejected like any other
    unknown key.
    """
    title: str = Field(None, min_length=1)
    salary: int = Field(None, ge=0, le=MAX_INT)
    equity: str = Field(None, pattern=EQUITY_PATTERN)

    class Config:
        extra = "forbid"
        strict = True


class JobSearch(BaseModel):
    """Schema for the job search query string"""
    title: Optional[str] = Field(None, min_length=1)
    min_salary: Optional[int] = Field(None, alias="minSalary", ge=0, le=MAX_INT)
    has_equity: bool = Field(False, alias="hasEquity")

    class Config:
        extra = "forbid"
        strict = True


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: StoredEquity = None
    company_handle: str = Field(..., alias="companyHandle")

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
        populate_by_name = True


class JobDetailResponse(BaseModel):
    """A job together with the company that posted it"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: StoredEquity = None
    company: CompanyResponse

    class Config:
        from_attributes = True


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class JobRemovedResponse(BaseModel):
    removed: int
