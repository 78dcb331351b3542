from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.api.api_v1.deps import get_folder_service
from app.core.config import settings
from app.schemas.common import ErrorResponse
from app.schemas.folder import FetchFolderRequest, FetchFolderResponse, PaginatedFetchRequest, PaginatedFetchResponse
from app.services.folder_service import FolderService

router = APIRouter(prefix="/organizations/{org_id}/folders")

_error_responses = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get("", response_model=FetchFolderResponse, responses=_error_responses)
def list_folders(org_id: UUID, svc: FolderService = Depends(get_folder_service)):
    return svc.get_all(FetchFolderRequest(org_id=org_id))


@router.get("/page", response_model=PaginatedFetchResponse, responses=_error_responses)
def list_folders_page(
    org_id: UUID,
    limit: int = Query(
        default=settings.page_size_default,
        le=settings.page_size_max,
        description=f"Page size, at most {settings.page_size_max}; larger values are rejected with 422",
    ),
    cursor: str = Query(default="", description="next_cursor from the previous page; empty for the first page"),
    svc: FolderService = Depends(get_folder_service),
):
    return svc.get_page(PaginatedFetchRequest(org_id=org_id, limit=limit, cursor=cursor))
