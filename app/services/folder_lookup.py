from collections.abc import Iterable, Sequence
from typing import Protocol
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import FolderNotFoundError, InvalidOrganizationIDError
from app.models import FolderRow
from app.schemas.folder import Folder
from app.services.serializers import folder_out, folder_row

logger = structlog.get_logger(__name__)

NIL_UUID = UUID(int=0)


class FolderLookup(Protocol):
    def fetch_by_organization(self, org_id: UUID) -> list[Folder]:
        """Return every folder of ``org_id`` in a stable order."""
        ...


def require_org_id(org_id) -> UUID:
    if isinstance(org_id, str):
        try:
            org_id = UUID(org_id)
        except ValueError as exc:
            raise InvalidOrganizationIDError("Invalid ORG ID", {"org_id": org_id}) from exc
    if not isinstance(org_id, UUID) or org_id == NIL_UUID:
        raise InvalidOrganizationIDError("Invalid ORG ID, cannot be nil", {"org_id": str(org_id)})
    return org_id


def _not_found(org_id: UUID) -> FolderNotFoundError:
    return FolderNotFoundError("no folders found for the specified orgID", {"org_id": str(org_id)})


class SampleFolderLookup:
    def __init__(self, folders: Sequence[Folder]):
        self._folders = tuple(folders)

    def fetch_by_organization(self, org_id: UUID) -> list[Folder]:
        org_id = require_org_id(org_id)
        matched = [f for f in self._folders if f.org_id == org_id]
        if not matched:
            raise _not_found(org_id)
        return matched


class SqlFolderLookup:
    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def fetch_by_organization(self, org_id: UUID) -> list[Folder]:
        org_id = require_org_id(org_id)
        stmt = select(FolderRow).where(FolderRow.org_id == str(org_id)).order_by(FolderRow.seq)
        with self.session_factory() as session:
            rows = session.execute(stmt).scalars().all()
        if not rows:
            raise _not_found(org_id)
        return [folder_out(r) for r in rows]


def seed_folders(session_factory: sessionmaker[Session], folders: Iterable[Folder]) -> int:
    rows = [folder_row(f) for f in folders]
    with session_factory() as session:
        session.add_all(rows)
        session.commit()
    logger.info("folders.seeded", count=len(rows))
    return len(rows)
