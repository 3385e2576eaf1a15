# app/schemas/tank.py
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal
import datetime
import uuid

from app.core.dates import UtcDateTime
from .water_quality import WaterQuality, WaterQualityCreate, WaterQualityUpdate

class TankBase(BaseModel):
    shape: str = Field(..., min_length=1)
    size: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    created_date: UtcDateTime

class TankCreate(TankBase):
    id: Optional[uuid.UUID] = None
    water_quality: WaterQualityCreate

class Tank(TankBase):
    id: uuid.UUID
    water_quality: WaterQuality

    class Config:
        from_attributes = True

# --- Schema (Para la vista de lista / detalle) ---
class TankWaterQualityData(BaseModel):
    """Tanque y calidad de agua aplanados en un solo registro."""
    tank_id: uuid.UUID
    shape: str
    size: Decimal
    created_date: datetime.datetime
    ph_level: Decimal
    temperature: Decimal
    ammonia_level: Decimal
    water_type: str
    water_quality: Optional[WaterQuality] = None

class TankWaterQualityUpdate(BaseModel):
    """
    Formulario de edicion: los campos aplanados mandan.
    tank_id es opcional, pero si viene debe coincidir con el de la URL.
    La fecha de la calidad de agua solo cambia si viene water_quality.created_date.
    """
    tank_id: Optional[uuid.UUID] = None
    shape: str = Field(..., min_length=1)
    size: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    created_date: UtcDateTime
    ph_level: Decimal = Field(..., ge=0, le=14, max_digits=4, decimal_places=2)
    temperature: Decimal = Field(..., max_digits=5, decimal_places=2)
    ammonia_level: Decimal = Field(..., ge=0, max_digits=6, decimal_places=3)
    water_type: str = Field(..., min_length=1)
    water_quality: Optional[WaterQualityUpdate] = None

class TankPage(BaseModel):
    items: List[TankWaterQualityData]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
