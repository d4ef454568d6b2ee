from decimal import Decimal

from pydantic import Field

from jobly.schemas.base import CamelModel, StrictCamelModel


class JobCreate(StrictCamelModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(StrictCamelModel):
    """Jobs cannot be moved to another company, so companyHandle is rejected."""

    title: str | None = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)


class Job(CamelModel):
    id: int
    title: str
    salary: int | None
    equity: str | None
    company_handle: str


class JobResponse(CamelModel):
    job: Job


class JobListResponse(CamelModel):
    jobs: list[Job]


class JobDeleted(CamelModel):
    deleted: int
