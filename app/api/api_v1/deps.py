from functools import lru_cache

from app.core.config import settings
from app.core.errors import api_error
from app.db.session import SessionLocal
from app.services.folder_lookup import FolderLookup, SampleFolderLookup, SqlFolderLookup
from app.services.folder_service import FolderService
from app.services.sample_data import sample_folders


@lru_cache
def get_folder_lookup() -> FolderLookup:
    if settings.folder_source == "sample":
        return SampleFolderLookup(sample_folders())
    if settings.folder_source == "sql":
        return SqlFolderLookup(SessionLocal)
    raise api_error(
        500,
        "unsupported_folder_source",
        f"Unsupported folder source '{settings.folder_source}'",
        {"folder_source": settings.folder_source, "allowed": ["sample", "sql"]},
    )


def get_folder_service() -> FolderService:
    return FolderService(get_folder_lookup())
