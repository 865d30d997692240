import logging
from sqlalchemy.engine import Engine
from civicmap.db.session import engine as default_engine
from civicmap.db.models import Base

logger = logging.getLogger(__name__)

def init_db(engine: Engine = default_engine) -> None:
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Schema ready | tables=%s", ", ".join(sorted(Base.metadata.tables)))
