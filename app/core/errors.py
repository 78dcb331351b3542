from typing import Any

from fastapi import HTTPException


def api_error(status_code: int, code: str, message: str, detail: dict | None = None, hint: str | None = None) -> HTTPException:
    payload = {
        "code": code,
        "message": message,
        "detail": detail or {},
        "hint": hint,
    }
    return HTTPException(status_code=status_code, detail=payload)


class FolderError(Exception):
    """Base class for every failure the folder core reports.

    Carries enough to be rendered with ``api_error`` without the core knowing
    about HTTP.
    """

    code = "folder_error"
    status_code = 500

    def __init__(self, message: str, detail: dict[str, Any] | None = None, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail or {}
        self.hint = hint

    def to_api_error(self) -> HTTPException:
        return api_error(self.status_code, self.code, self.message, self.detail, hint=self.hint)


class InvalidRequestError(FolderError):
    code = "invalid_request"
    status_code = 400


class InvalidCursorError(FolderError):
    code = "bad_cursor"
    status_code = 400

    def __init__(self, message: str, detail: dict[str, Any] | None = None, hint: str | None = None):
        super().__init__(message, detail, hint=hint or "Discard the cursor and restart from the first page")


class InvalidCursorEncodingError(InvalidCursorError):
    pass


class InvalidCursorFormatError(InvalidCursorError):
    pass


class FolderNotFoundError(FolderError):
    code = "folders_not_found"
    status_code = 404


class InvalidOrganizationIDError(FolderError):
    code = "invalid_organization_id"
    status_code = 400
