# reset_db.py
import datetime
import sys
from decimal import Decimal

from app.db.database import Base, engine, SessionLocal

from app.models.tank import Tank
from app.models.water_quality import WaterQuality

SAMPLE_TANKS = [
    ("Round", Decimal("50"), datetime.datetime(2025, 1, 1),
     Decimal("7.2"), Decimal("22.5"), Decimal("0.1"), "Freshwater"),
    ("Square", Decimal("100"), datetime.datetime(2025, 2, 15),
     Decimal("8.0"), Decimal("24.0"), Decimal("0.05"), "Saltwater"),
]

def reset_database():
    print("Eliminando todas las tablas...")
    Base.metadata.drop_all(bind=engine)
    print("Tablas eliminadas.")

    print("Creando todas las tablas nuevas...")
    Base.metadata.create_all(bind=engine)
    print("¡Base de datos creada exitosamente!")

def seed_database():
    db = SessionLocal()
    try:
        for shape, size, created, ph, temp, ammonia, water_type in SAMPLE_TANKS:
            db.add(Tank(
                shape=shape, size=size, created_date=created,
                water_quality=WaterQuality(
                    ph_level=ph, temperature=temp, ammonia_level=ammonia,
                    water_type=water_type, created_date=created,
                ),
            ))
        db.commit()
        print(f"{len(SAMPLE_TANKS)} tanques de ejemplo creados.")
    finally:
        db.close()

if __name__ == "__main__":
    print("ADVERTENCIA: Esto eliminará TODOS los datos y recreará la base de datos.")
    confirm = input("¿Estás seguro? Escribe 'si' para continuar: ")

    if confirm.lower() == 'si':
        reset_database()
        if "--seed" in sys.argv:
            seed_database()
    else:
        print("Operación cancelada.")
