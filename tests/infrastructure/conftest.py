import pytest

from warehouse.infrastructure.bootstrap import sqlalchemy_uow_factory
from warehouse.infrastructure.config import Settings
from warehouse.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
)
from warehouse.infrastructure.persistence.tables import create_schema


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def uow_factory():
    return sqlalchemy_uow_factory(Settings(database_url="sqlite://"))


@pytest.fixture
def file_uow_factory(tmp_path):
    return sqlalchemy_uow_factory(Settings(database_url=f"sqlite:///{tmp_path / 'store.db'}"))
