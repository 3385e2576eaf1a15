# app/db/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)

# SQLite necesita check_same_thread=False porque FastAPI usa un threadpool
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Dependencia de FastAPI:
    Abre una sesion por request y la cierra al terminar.
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        logger.exception("Error en la sesion de base de datos, haciendo rollback")
        db.rollback()
        raise
    finally:
        db.close()
