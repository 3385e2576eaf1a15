# app/core/search.py
"""
Interpretacion del texto de busqueda.

Cada parser devuelve None cuando el texto no sirve para ese tipo; quien
llama decide entonces no agregar el filtro correspondiente. Nada aqui
lanza excepciones por un texto mal formado.
"""
import datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from app.core.dates import to_naive_utc


def normalize_search(search_string: Optional[str]) -> Optional[str]:
    """Devuelve el texto sin espacios alrededor, o None si queda vacio."""
    if search_string is None:
        return None
    term = search_string.strip()
    return term or None


def parse_decimal(term: str) -> Optional[Decimal]:
    try:
        value = Decimal(term)
    except InvalidOperation:
        return None
    # NaN / Infinity no pueden ser un tamaño
    if not value.is_finite():
        return None
    return value


def parse_date(term: str, formats: Iterable[str] = ()) -> Optional[datetime.datetime]:
    """
    ISO 8601 primero, luego cada formato extra. Una fecha sola es medianoche.
    Con offset se pasa a UTC sin tzinfo, igual que al guardar.
    """
    try:
        return to_naive_utc(datetime.datetime.fromisoformat(term))
    except ValueError:
        pass
    for fmt in formats:
        try:
            return datetime.datetime.strptime(term, fmt)
        except ValueError:
            continue
    return None
