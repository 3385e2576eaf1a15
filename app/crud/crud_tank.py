import logging
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session, contains_eager, joinedload

from app.core import search
from app.core.config import settings
from app.core.pagination import PaginationParams, normalize_pagination, total_pages
from app.models.tank import Tank
from app.models.water_quality import WaterQuality
from app.schemas import tank as tank_schema, water_quality as water_quality_schema

logger = logging.getLogger(__name__)


def build_search_filters(search_string: Optional[str]) -> list:
    """
    Arma la lista de condiciones (OR) para el texto de busqueda.
    Lista vacia = sin filtro.

    Forma y tipo de agua siempre participan (contiene, sin distinguir
    mayusculas). Tamaño y fecha solo se agregan si el texto se pudo
    interpretar como decimal o como fecha.
    """
    term = search.normalize_search(search_string)
    if term is None:
        return []

    filters = [
        Tank.shape.icontains(term, autoescape=True),
        WaterQuality.water_type.icontains(term, autoescape=True),
    ]

    size = search.parse_decimal(term)
    if size is not None:
        filters.append(Tank.size == size)

    created = search.parse_date(term, settings.SEARCH_DATE_FORMATS)
    if created is not None:
        filters.append(Tank.created_date == created)

    return filters


def get_tanks(
    db: Session,
    search_string: Optional[str] = None,
    page: Optional[int] = 1,
    page_size: Optional[int] = None,
) -> Tuple[List[Tank], int, PaginationParams]:
    """
    Lista tanques con su calidad de agua, filtrados y paginados.
    Devuelve (tanques de la pagina, total de coincidencias, paginacion usada).
    """
    params = normalize_pagination(page, page_size)

    query = db.query(Tank).join(Tank.water_quality)
    filters = build_search_filters(search_string)
    if filters:
        query = query.filter(or_(*filters))

    total_count = query.count()
    # Pagina fuera de rango: vacia, sin mandar un offset enorme a la base
    if params.offset >= total_count:
        tanks = []
    else:
        tanks = (
            query.options(contains_eager(Tank.water_quality))
            .order_by(Tank.created_date.desc(), Tank.id)
            .offset(params.offset)
            .limit(params.limit)
            .all()
        )
    logger.debug(
        "Busqueda de tanques %r pagina %s/%s: %s de %s",
        search_string, params.page, params.page_size, len(tanks), total_count,
    )
    return tanks, total_count, params


def get_tank_page(
    db: Session,
    search_string: Optional[str] = None,
    page: Optional[int] = 1,
    page_size: Optional[int] = None,
) -> tank_schema.TankPage:
    tanks, total_count, params = get_tanks(db, search_string, page, page_size)
    pages = total_pages(total_count, params.page_size)
    return tank_schema.TankPage(
        items=[to_tank_water_quality_data(t) for t in tanks],
        page=params.page,
        page_size=params.page_size,
        total_count=total_count,
        total_pages=pages,
        has_previous_page=params.page > 1,
        has_next_page=params.page < pages,
    )


def get_tank(db: Session, tank_id: uuid.UUID) -> Tank | None:
    return (
        db.query(Tank)
        .options(joinedload(Tank.water_quality))
        .filter(Tank.id == tank_id)
        .first()
    )


def to_tank_water_quality_data(db_tank: Tank) -> tank_schema.TankWaterQualityData:
    wq = db_tank.water_quality
    return tank_schema.TankWaterQualityData(
        tank_id=db_tank.id,
        shape=db_tank.shape,
        size=db_tank.size,
        created_date=db_tank.created_date,
        ph_level=wq.ph_level,
        temperature=wq.temperature,
        ammonia_level=wq.ammonia_level,
        water_type=wq.water_type,
        water_quality=water_quality_schema.WaterQuality.model_validate(wq),
    )


def create_tank(db: Session, tank_data: tank_schema.TankCreate) -> Tank:
    """Crea el tanque y su calidad de agua en un solo commit."""
    wq_data = tank_data.water_quality.model_dump()
    db_tank = Tank(
        id=tank_data.id or uuid.uuid4(),
        shape=tank_data.shape,
        size=tank_data.size,
        created_date=tank_data.created_date,
    )
    db_tank.water_quality = WaterQuality(**{**wq_data, "id": wq_data["id"] or uuid.uuid4()})
    db.add(db_tank)
    db.commit()
    db.refresh(db_tank)
    logger.info("Tanque creado: %s (%s)", db_tank.id, db_tank.shape)
    return db_tank


def update_tank(
    db: Session,
    db_tank: Tank,
    tank_in: tank_schema.TankWaterQualityUpdate,
) -> Tank:
    """
    Sobrescribe tanque y calidad de agua con el formulario aplanado.
    La fila de calidad de agua se actualiza en su lugar (mismo id).
    """
    db_tank.shape = tank_in.shape
    db_tank.size = tank_in.size
    db_tank.created_date = tank_in.created_date

    wq = db_tank.water_quality
    wq.ph_level = tank_in.ph_level
    wq.temperature = tank_in.temperature
    wq.ammonia_level = tank_in.ammonia_level
    wq.water_type = tank_in.water_type
    if tank_in.water_quality is not None and tank_in.water_quality.created_date is not None:
        wq.created_date = tank_in.water_quality.created_date

    db.add(db_tank)
    db.commit()
    db.refresh(db_tank)
    logger.info("Tanque actualizado: %s", db_tank.id)
    return db_tank


def delete_tank(db: Session, tank_id: uuid.UUID) -> Tank | None:
    """Elimina un tanque (y su calidad de agua) por su ID."""
    db_tank = get_tank(db, tank_id)
    if db_tank:
        db.delete(db_tank)
        db.commit()
        logger.info("Tanque eliminado: %s", tank_id)
    return db_tank
