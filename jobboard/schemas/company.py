from pydantic import BaseModel, Field
from typing import List, Optional

from jobboard.schemas.fields import MAX_INT, StoredEquity


class CompanyNew(BaseModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str = ""
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0, le=MAX_INT)
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        extra = "forbid"
        strict = True


class CompanyUpdate(BaseModel):
    """Schema for updating a company; the handle never changes"""
    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: int = Field(None, alias="numEmployees", ge=0, le=MAX_INT)
    logo_url: str = Field(None, alias="logoUrl")

    class Config:
        extra = "forbid"
        strict = True


class CompanySearch(BaseModel):
    """Schema for the company search query string"""
    name_like: Optional[str] = Field(None, alias="nameLike", min_length=1)
    min_employees: Optional[int] = Field(None, alias="minEmployees", ge=0, le=MAX_INT)
    max_employees: Optional[int] = Field(None, alias="maxEmployees", ge=0, le=MAX_INT)

    class Config:
        extra = "forbid"
        strict = True


class CompanyResponse(BaseModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        from_attributes = True
        populate_by_name = True


class CompanyJobResponse(BaseModel):
    """Job summary listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: StoredEquity = None

    class Config:
        from_attributes = True


class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJobResponse] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]


class CompanyDeletedResponse(BaseModel):
    deleted: str
