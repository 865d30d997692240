import logging
import os
from fastapi import APIRouter, Depends
from sqlalchemy import text
from civicmap.core.settings import Settings, get_settings
from civicmap.db.session import engine

router = APIRouter(prefix="/health", tags=["Health"])
logger = logging.getLogger(__name__)

@router.get("")
def health(settings: Settings = Depends(get_settings)):
    status = {"database": False, "uploads": False, "status": "fail"}

    # DB
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        status["database"] = True
    except Exception as e:
        logger.error("DB error: %s", e)

    # Uploads directory
    uploads_dir = settings.UPLOADS_DIR
    status["uploads"] = uploads_dir.is_dir() and os.access(uploads_dir, os.W_OK)
    if not status["uploads"]:
        logger.error("Uploads directory not writable: %s", uploads_dir)

    status["status"] = "ok" if status["database"] and status["uploads"] else "fail"
    return status
