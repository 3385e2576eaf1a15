import datetime
import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import Base, get_db
from app.main import app
from app.models.tank import Tank
from app.models.water_quality import WaterQuality


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_tank(db):
    """Factory: guarda un tanque con su calidad de agua y lo devuelve."""

    def _make_tank(
        shape="Round",
        size="50",
        created_date=datetime.datetime(2025, 1, 1),
        ph_level="7.2",
        temperature="22.5",
        ammonia_level="0.1",
        water_type="Freshwater",
        tank_id=None,
    ):
        tank = Tank(
            id=tank_id or uuid.uuid4(),
            shape=shape,
            size=Decimal(size),
            created_date=created_date,
            water_quality=WaterQuality(
                id=uuid.uuid4(),
                ph_level=Decimal(ph_level),
                temperature=Decimal(temperature),
                ammonia_level=Decimal(ammonia_level),
                water_type=water_type,
                created_date=created_date,
            ),
        )
        db.add(tank)
        db.commit()
        return tank

    return _make_tank


@pytest.fixture
def seeded(make_tank):
    """Los dos tanques de ejemplo: Round/Freshwater y Square/Saltwater."""
    round_tank = make_tank()
    square_tank = make_tank(
        shape="Square",
        size="100",
        created_date=datetime.datetime(2025, 2, 15),
        ph_level="8.0",
        temperature="24.0",
        ammonia_level="0.05",
        water_type="Saltwater",
    )
    return round_tank, square_tank


@pytest.fixture
def fifteen_tanks(make_tank):
    today = datetime.datetime.combine(datetime.date.today(), datetime.time())
    return [
        make_tank(
            shape=f"Shape{i}",
            size=str(i * 10),
            created_date=today - datetime.timedelta(days=i),
            ph_level=str(Decimal("7.0") + Decimal(i) / 10),
            temperature=str(20 + i),
            ammonia_level=str(Decimal("0.01") * i),
            water_type="Freshwater" if i % 2 == 0 else "Saltwater",
        )
        for i in range(1, 16)
    ]
