from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDeleted,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_company(req: CompanyCreate, db: Session = Depends(get_db)):
    company = company_service.create(db, req.model_dump(by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    name: str | None = None,
    min_employees: int | None = Query(None, alias="minEmployees"),
    max_employees: int | None = Query(None, alias="maxEmployees"),
    db: Session = Depends(get_db),
):
    filters = {"name": name, "minEmployees": min_employees, "maxEmployees": max_employees}
    return {"companies": company_service.find_all(db, filters)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str, db: Session = Depends(get_db)):
    return {"company": company_service.get(db, handle)}


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
async def update_company(handle: str, req: CompanyUpdate, db: Session = Depends(get_db)):
    update_data = req.model_dump(exclude_unset=True, by_alias=True)
    return {"company": company_service.update(db, handle, update_data)}


@router.delete(
    "/{handle}",
    response_model=CompanyDeleted,
    dependencies=[Depends(require_admin)],
)
async def delete_company(handle: str, db: Session = Depends(get_db)):
    company_service.remove(db, handle)
    return {"deleted": handle}
