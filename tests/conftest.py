import pytest
from fastapi.testclient import TestClient

from records_api.config import Settings
from records_api.database import create_db_and_tables, create_db_engine
from records_api.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", customers_allowed_origin="http://localhost:5173")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings.database_url)
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
