from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin
from jobly.schemas.job import JobCreate, JobDeleted, JobListResponse, JobResponse, JobUpdate
from jobly.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_job(req: JobCreate, db: Session = Depends(get_db)):
    job = job_service.create(db, req.model_dump(by_alias=True, mode="json"))
    return {"job": job}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: str | None = None,
    min_salary: int | None = Query(None, alias="minSalary"),
    has_equity: bool | None = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db),
):
    filters = {"title": title, "minSalary": min_salary, "hasEquity": has_equity}
    return {"jobs": job_service.find_all(db, filters)}


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    return {"job": job_service.get(db, job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
async def update_job(job_id: int, req: JobUpdate, db: Session = Depends(get_db)):
    update_data = req.model_dump(exclude_unset=True, by_alias=True, mode="json")
    return {"job": job_service.update(db, job_id, update_data)}


@router.delete(
    "/{job_id}",
    response_model=JobDeleted,
    dependencies=[Depends(require_admin)],
)
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    job_service.remove(db, job_id)
    return {"deleted": job_id}
