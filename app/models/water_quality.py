# app/models/water_quality.py
import uuid

from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.db.database import Base

class WaterQuality(Base):
    __tablename__ = "water_qualities"

    id = Column(Uuid, primary_key=True, index=True, default=uuid.uuid4)
    ph_level = Column(Numeric(4, 2), nullable=False)
    temperature = Column(Numeric(5, 2), nullable=False)
    ammonia_level = Column(Numeric(6, 3), nullable=False)
    water_type = Column(String, nullable=False)
    created_date = Column(DateTime, nullable=False)

    tank_id = Column(Uuid, ForeignKey("tanks.id", ondelete="CASCADE"), unique=True, nullable=False)
    tank = relationship("Tank", back_populates="water_quality")
