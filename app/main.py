from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.database import Base, engine
from app.models import tank, water_quality  # noqa: F401 registra las tablas
from app.api.endpoints import tanks
from fastapi.middleware.cors import CORSMiddleware

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Evento de ciclo de vida: crear las tablas al iniciar
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas listas en %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()

app = FastAPI(
    title="API de Tanques de Acuario",
    description="Una API para gestionar tanques y su calidad de agua.",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,       # Lista de orígenes permitidos
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Si el formulario no es valido, no se escribe nada y se devuelve lo enviado tal cual
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Validacion fallida en %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"detail": exc.errors(), "body": exc.body}),
    )

# Incluir los routers
app.include_router(tanks.router, prefix="/api", tags=["Tanks"])

@app.get("/api/health")
def health_check():
    return {"status": "ok"}
