from sqlalchemy import Engine

from petclinic.db.session import engine as default_engine
from petclinic.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import petclinic.db.models  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    Base.metadata.create_all(bind=engine or default_engine)
