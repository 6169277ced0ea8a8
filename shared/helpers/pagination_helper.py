import math
from typing import Any, Optional, Sequence, Tuple

from shared.core.config import settings


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(total / page_size) if total > 0 else 0


def resolve_page(page: Optional[int], page_size: Optional[int]) -> Tuple[int, int]:
    """Normalise 1-based page number and page size coming from query params."""
    size = page_size if page_size and page_size > 0 else settings.DEFAULT_PAGE_SIZE
    number = page if page and page > 0 else 1
    return number, size


def paginate(query, page: Optional[int] = 1, page_size: Optional[int] = None,
             is_export: bool = False, count_query=None):
    """
    Slice a SQLAlchemy query (or a plain sequence) to one page.

    Returns (rows, meta) where meta carries total, page, page_size and total_pages.
    Exports skip the slicing and return every row as a single page.
    """
    number, size = resolve_page(page, page_size)

    if isinstance(query, Sequence):
        total = len(query)
        rows = list(query) if is_export else list(query[(number - 1) * size: number * size])
    else:
        total = (count_query if count_query is not None else query.order_by(None)).count()
        rows = query.all() if is_export else query.offset((number - 1) * size).limit(size).all()

    if is_export:
        number, size = 1, max(total, 1)

    meta = {
        "total": total,
        "page": number,
        "page_size": size,
        "total_pages": page_count(total, size),
    }
    return rows, meta


def split_filter(value: Optional[str]) -> list:
    """Comma separated multi-value filter; empty or "all" means no filter."""
    if not value:
        return []
    values = [v.strip() for v in str(value).split(",") if v.strip()]
    return [v for v in values if v.lower() != "all"]


def parse_bool_filter(value: Any) -> Optional[bool]:
    if value is None or value == "" or str(value).lower() == "all":
        return None
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("true", "1", "yes", "y")
