from pydantic import Field

from jobly.schemas.base import CamelModel, StrictCamelModel


class CompanyCreate(StrictCamelModel):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(StrictCamelModel):
    name: str | None = Field(None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(None, ge=0)
    logo_url: str | None = None


class CompanyJob(CamelModel):
    id: int
    title: str
    salary: int | None
    equity: str | None


class Company(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None
    logo_url: str | None


class CompanyDetail(Company):
    jobs: list[CompanyJob] = []


class CompanyResponse(CamelModel):
    company: Company


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[Company]


class CompanyDeleted(CamelModel):
    deleted: str
