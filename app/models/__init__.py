from app.models.folder import Base, FolderRow

__all__ = ["Base", "FolderRow"]
