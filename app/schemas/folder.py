from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Folder(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    org_id: UUID
    name: str = Field(min_length=1)
    deleted: bool = False


class FetchFolderRequest(BaseModel):
    org_id: UUID


class FetchFolderResponse(BaseModel):
    folders: list[Folder]


class PaginatedFetchRequest(BaseModel):
    org_id: UUID
    # checked by FolderService.get_page so a bad limit is an invalid_request
    limit: int
    cursor: str = ""


class PaginatedFetchResponse(BaseModel):
    folders: list[Folder]
    next_cursor: str = ""
