from app.schemas.common import ErrorPayload, ErrorResponse
from app.schemas.folder import (
    FetchFolderRequest,
    FetchFolderResponse,
    Folder,
    PaginatedFetchRequest,
    PaginatedFetchResponse,
)

__all__ = [
    "ErrorPayload",
    "ErrorResponse",
    "FetchFolderRequest",
    "FetchFolderResponse",
    "Folder",
    "PaginatedFetchRequest",
    "PaginatedFetchResponse",
]
