# app/core/pagination.py
import math
from dataclasses import dataclass
from typing import Optional

from app.core.config import settings


@dataclass(frozen=True)
class PaginationParams:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def normalize_pagination(
    page: Optional[int],
    page_size: Optional[int],
    default_page_size: Optional[int] = None,
    max_page_size: Optional[int] = None,
) -> PaginationParams:
    """
    Normaliza los parametros de la lista:
    - page <= 0 (o ausente) pasa a ser la pagina 1.
    - page_size <= 0 (o ausente) usa el tamaño por defecto.
    - page_size mayor al maximo se recorta al maximo.
    """
    if default_page_size is None:
        default_page_size = settings.DEFAULT_PAGE_SIZE
    if max_page_size is None:
        max_page_size = settings.MAX_PAGE_SIZE

    if page is None or page <= 0:
        page = 1
    if page_size is None or page_size <= 0:
        page_size = default_page_size
    page_size = min(page_size, max_page_size)

    return PaginationParams(page=page, page_size=page_size)


def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if page_size > 0 else 0
