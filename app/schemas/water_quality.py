# app/schemas/water_quality.py
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
import uuid

from app.core.dates import UtcDateTime

# max_digits / decimal_places iguales a las columnas Numeric del modelo
class WaterQualityBase(BaseModel):
    ph_level: Decimal = Field(..., ge=0, le=14, max_digits=4, decimal_places=2)
    temperature: Decimal = Field(..., max_digits=5, decimal_places=2)
    ammonia_level: Decimal = Field(..., ge=0, max_digits=6, decimal_places=3)
    water_type: str = Field(..., min_length=1)
    created_date: UtcDateTime

class WaterQualityCreate(WaterQualityBase):
    # Si no viene, se genera al guardar
    id: Optional[uuid.UUID] = None

class WaterQualityUpdate(BaseModel):
    """
    Parte anidada del formulario de edicion (solo la fecha viaja aqui).
    Si created_date no viene, la fecha guardada de la calidad de agua no se toca.
    """
    created_date: Optional[UtcDateTime] = None

class WaterQuality(WaterQualityBase):
    id: uuid.UUID

    class Config:
        from_attributes = True
