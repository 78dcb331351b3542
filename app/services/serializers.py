from uuid import UUID

from app.models import FolderRow
from app.schemas.folder import Folder


def folder_out(m: FolderRow) -> Folder:
    return Folder(
        id=UUID(m.folder_id),
        org_id=UUID(m.org_id),
        name=m.name,
        deleted=bool(m.deleted),
    )


def folder_row(f: Folder) -> FolderRow:
    return FolderRow(
        folder_id=str(f.id),
        org_id=str(f.org_id),
        name=f.name,
        deleted=f.deleted,
    )
