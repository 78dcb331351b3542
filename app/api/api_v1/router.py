from fastapi import APIRouter

from app.api.api_v1.endpoints import folders

api_router = APIRouter()
api_router.include_router(folders.router, tags=["folders"])
