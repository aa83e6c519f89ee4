import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('CORS_ORIGINS', 'http://localhost:3000')
os.environ.setdefault('RESERVED_SUBDOMAINS', 'app,admin,dashboard,api')
os.environ.setdefault('PROVIDER_SANDBOX_SUFFIXES', 'netlify.app,vercel.app')
os.environ.setdefault('TENANT_LOOKUP_BACKEND', 'database')

from newsai.db.base import Base
from newsai.db.session import get_db
from newsai.main import app
from newsai.models.tenant import Tenant


engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        _seed_tenants(db)
        db.commit()
    finally:
        db.close()

    yield

    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def _override_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_db

    with TestClient(app) as api_client:
        yield api_client

    app.dependency_overrides.clear()


def _seed_tenants(db: Session) -> None:
    tenants = [
        ('jean', 'Le blog de Jean', True, {'use_subdomains': True, 'language': 'fr'}),
        ('demo', 'Demo Blog', True, {'use_subdomains': False}),
        ('sleeping', 'Archived Blog', False, {}),
    ]
    for label, display_name, is_active, settings_json in tenants:
        db.add(Tenant(label=label, display_name=display_name, is_active=is_active, settings_json=settings_json))
    db.flush()


def host_headers(host: str) -> dict[str, str]:
    return {'host': host}
