import os

os.environ.setdefault("FOLDER_SOURCE", "sample")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.init_db import init_db  # noqa: E402
from app.services.folder_lookup import SampleFolderLookup  # noqa: E402
from app.services.folder_service import FolderService  # noqa: E402
from app.services.sample_data import DEFAULT_ORG_ID, make_folders, sample_folders  # noqa: E402


@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def default_org_folders():
    return [f for f in sample_folders() if str(f.org_id) == DEFAULT_ORG_ID]


@pytest.fixture
def folder_service_factory():
    """Build a FolderService over ``count`` folders of a single organization."""

    def _make(org_id: str, count: int) -> FolderService:
        return FolderService(SampleFolderLookup(make_folders(org_id, count)))

    return _make
