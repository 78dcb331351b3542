from collections.abc import Iterator
from uuid import UUID

import structlog

from app.core.errors import InvalidRequestError
from app.core.pagination import decode_cursor, end_offset, next_cursor
from app.schemas.folder import FetchFolderRequest, FetchFolderResponse, PaginatedFetchRequest, PaginatedFetchResponse
from app.services.folder_lookup import FolderLookup

logger = structlog.get_logger(__name__)


class FolderService:
    def __init__(self, lookup: FolderLookup):
        self.lookup = lookup

    def get_all(self, request: FetchFolderRequest | None) -> FetchFolderResponse:
        if request is None:
            raise InvalidRequestError("request cannot be nil")
        folders = self.lookup.fetch_by_organization(request.org_id)
        return FetchFolderResponse(folders=folders)

    def get_page(self, request: PaginatedFetchRequest | None) -> PaginatedFetchResponse:
        """Return one page of an organization's folders and the cursor for the next one.

        The request is validated before the cursor is decoded or the lookup is
        called. A cursor pointing at or past the end yields an empty page with an
        empty ``next_cursor``.
        """
        _validate_page_request(request)

        start = decode_cursor(request.cursor)
        folders = self.lookup.fetch_by_organization(request.org_id)
        total = len(folders)
        end = end_offset(start, request.limit, total)

        page = folders[start:end]
        logger.debug(
            "folders.page",
            org_id=str(request.org_id),
            offset=start,
            limit=request.limit,
            returned=len(page),
            total=total,
        )
        return PaginatedFetchResponse(folders=page, next_cursor=next_cursor(end, total))

    def iter_pages(self, org_id: UUID, limit: int) -> Iterator[PaginatedFetchResponse]:
        cursor = ""
        while True:
            page = self.get_page(PaginatedFetchRequest(org_id=org_id, limit=limit, cursor=cursor))
            yield page
            if not page.next_cursor:
                return
            cursor = page.next_cursor


def _validate_page_request(request: PaginatedFetchRequest | None) -> None:
    if request is None:
        raise InvalidRequestError("request invalid, cannot be nil")
    if isinstance(request.limit, bool) or not isinstance(request.limit, int) or request.limit <= 0:
        raise InvalidRequestError("limit has to be greater than 0", {"limit": request.limit})
