from app.api.api_v1.endpoints import folders

__all__ = ["folders"]
