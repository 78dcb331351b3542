import structlog
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler

from app.core.errors import FolderError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FolderError)
    async def folder_error_handler(request: Request, exc: FolderError):
        logger.warning("folders.request_failed", code=exc.code, path=request.url.path, message=exc.message)
        return await http_exception_handler(request, exc.to_api_error())
