# app/models/tank.py
import uuid

from sqlalchemy import Column, String, Numeric, DateTime, Uuid
from sqlalchemy.orm import relationship
from app.db.database import Base

class Tank(Base):
    __tablename__ = "tanks"

    id = Column(Uuid, primary_key=True, index=True, default=uuid.uuid4)
    shape = Column(String, nullable=False)
    size = Column(Numeric(10, 2), nullable=False)
    created_date = Column(DateTime, nullable=False)

    # Un tanque siempre tiene exactamente una calidad de agua
    water_quality = relationship(
        "WaterQuality",
        back_populates="tank",
        uselist=False,
        cascade="all, delete-orphan",
    )
