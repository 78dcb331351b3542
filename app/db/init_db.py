from sqlalchemy.engine import Engine

from app.db.session import engine as default_engine
from app.models import Base


def init_db(engine: Engine | None = None) -> None:
    Base.metadata.create_all(engine or default_engine)
