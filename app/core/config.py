from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./tanks.db"
    DATABASE_ECHO: bool = False

    #paginacion
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    #busqueda: formatos de fecha aceptados despues de ISO 8601
    SEARCH_DATE_FORMATS: List[str] = ["%d/%m/%Y", "%Y/%m/%d"]

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173", # Puerto por defecto de Vite
        "http://localhost:3000", # Puerto por defecto de Create React App
        "http://localhost",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
