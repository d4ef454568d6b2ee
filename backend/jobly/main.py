import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly.config import settings
from jobly.errors import JoblyError
from jobly.routers import auth, companies, jobs, users

logger = logging.getLogger("jobly")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    from jobly.database import init_db
    try:
        init_db()
    except Exception as exc:
        logger.error("Could not initialise database schema: %s", exc)
        raise
    yield


app = FastAPI(
    title="Jobly",
    description="Companies and jobs API",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(companies.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=settings.host, port=settings.port)
