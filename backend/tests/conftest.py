import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from jobly.database import get_db, get_engine, init_db
from jobly.main import app
from jobly.services import company_service, job_service, user_service
from jobly.utils.security import create_token


@pytest.fixture
def engine(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'jobly-test.sqlite'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Three companies, three jobs, a regular user and an admin.

    Returns the created jobs keyed by title so tests can address them by id.
    """
    for n in (1, 2, 3):
        company_service.create(db, {
            "handle": f"c{n}",
            "name": f"C{n}",
            "description": f"Desc{n}",
            "numEmployees": n,
            "logoUrl": f"http://c{n}.img",
        })

    jobs = {}
    for title, salary, equity, handle in [
        ("j1", 35000, "0", "c1"),
        ("j2", 95000, "0.08", "c2"),
        ("Librarian", 10000, "0.99", "c3"),
    ]:
        jobs[title] = job_service.create(db, {
            "title": title,
            "salary": salary,
            "equity": equity,
            "companyHandle": handle,
        })

    user_service.register(db, {
        "username": "u1",
        "password": "password1",
        "firstName": "U1F",
        "lastName": "U1L",
        "email": "user1@user.com",
        "isAdmin": False,
    })
    user_service.register(db, {
        "username": "admin",
        "password": "password2",
        "firstName": "AdF",
        "lastName": "AdL",
        "email": "admin@user.com",
        "isAdmin": True,
    })
    return jobs


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def u1_token():
    return create_token({"username": "u1", "isAdmin": False})


@pytest.fixture
def admin_token():
    return create_token({"username": "admin", "isAdmin": True})
