# app/core/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "INFO") -> None:
    """
    Configura el logging de la aplicacion una sola vez, al arrancar.
    Los modulos usan logging.getLogger(__name__).
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn ya tiene sus propios handlers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
