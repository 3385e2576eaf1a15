# app/core/dates.py
import datetime

from pydantic import AfterValidator
from typing import Annotated


def to_naive_utc(value: datetime.datetime) -> datetime.datetime:
    """Las columnas DateTime no guardan zona: todo se guarda como UTC sin tzinfo."""
    if value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)


# Fecha de entrada: si trae offset se pasa a UTC antes de guardar
UtcDateTime = Annotated[datetime.datetime, AfterValidator(to_naive_utc)]
