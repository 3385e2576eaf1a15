from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Optional
import uuid

from app.db.database import get_db
from app.crud import crud_tank
from app.schemas import tank as tank_schema

router = APIRouter()

@router.get("/tanks", response_model=tank_schema.TankPage)
def read_tanks(
    search: Optional[str] = Query(None, description="Texto libre: forma, tipo de agua, tamaño o fecha"),
    page: int = 1,
    page_size: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """
    Lista los tanques con su calidad de agua.
    page <= 0 se trata como 1; una pagina fuera de rango devuelve items vacio.
    """
    return crud_tank.get_tank_page(db, search_string=search, page=page, page_size=page_size)


@router.get("/tanks/{tank_id}", response_model=tank_schema.TankWaterQualityData)
def read_tank(
    tank_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    db_tank = crud_tank.get_tank(db, tank_id=tank_id)
    if db_tank is None:
        raise HTTPException(status_code=404, detail="Tank not found")
    return crud_tank.to_tank_water_quality_data(db_tank)


@router.post("/tanks", response_model=tank_schema.TankWaterQualityData, status_code=status.HTTP_201_CREATED)
def create_tank(
    tank: tank_schema.TankCreate,
    db: Session = Depends(get_db),
):
    if tank.id is not None and crud_tank.get_tank(db, tank_id=tank.id):
        raise HTTPException(status_code=400, detail="Tank id already registered")

    db_tank = crud_tank.create_tank(db=db, tank_data=tank)
    return crud_tank.to_tank_water_quality_data(db_tank)


@router.put("/tanks/{tank_id}", response_model=tank_schema.TankWaterQualityData)
def update_tank(
    tank_id: uuid.UUID,
    tank_in: tank_schema.TankWaterQualityUpdate,
    db: Session = Depends(get_db),
):
    """
    Actualiza tanque y calidad de agua (todos los campos).
    """
    db_tank = crud_tank.get_tank(db, tank_id=tank_id)
    if db_tank is None:
        raise HTTPException(status_code=404, detail="Tank not found")

    if tank_in.tank_id is not None and tank_in.tank_id != tank_id:
        raise HTTPException(status_code=400, detail="Tank id mismatch")

    db_tank = crud_tank.update_tank(db=db, db_tank=db_tank, tank_in=tank_in)
    return crud_tank.to_tank_water_quality_data(db_tank)


@router.delete("/tanks/{tank_id}", response_model=tank_schema.Tank)
def delete_tank(
    tank_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    """
    Elimina un tanque y su calidad de agua.
    """
    db_tank = crud_tank.delete_tank(db, tank_id=tank_id)
    if db_tank is None:
        raise HTTPException(status_code=404, detail="Tank not found")
    return db_tank
