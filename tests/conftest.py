import os

# ustawienia musza byc w env zanim storefront.utils.settings sie zaimportuje
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"
os.environ["USER_ID"] = "test-user"
os.environ["CATALOG_API_URL"] = "http://catalog.test/products"

import pytest
from fastapi.testclient import TestClient

import storefront.data.models  # noqa: F401
from storefront.data.database import Base, SessionLocal, engine

@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db(setup_db):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def app(setup_db):
    from storefront.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)
