"""Client-side pagination over an already-fetched list."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from hrms_console.schemas.attendance import PageInfo

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: list[T]
    current_page: int
    total_pages: int
    total_records: int
    records_per_page: int

    def info(self) -> PageInfo:
        return PageInfo(
            current_page=self.current_page,
            total_pages=self.total_pages,
            total_records=self.total_records,
            records_per_page=self.records_per_page,
        )


def paginate(items: Sequence[T], page: int = 1, per_page: int = 10) -> Page[T]:
    """Slice ``items`` to 1-based ``page``; pages past the end are empty."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    page = max(page, 1)
    start = (page - 1) * per_page
    return Page(
        items=list(items[start:start + per_page]),
        current_page=page,
        total_pages=math.ceil(len(items) / per_page),
        total_records=len(items),
        records_per_page=per_page,
    )
