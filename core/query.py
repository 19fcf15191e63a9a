"""
Filtering and pagination over the unit index.

A page is a window [page * page_size, page * page_size + page_size) over the
filtered units. Each unit is returned as its own XML fragment so a caller can
read source, target and state without the rest of the document.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ValidationError
from .parser import XliffParser
from .xliff_obj import TranslationUnit


class UnitFilter(str, Enum):
    ALL = "all"
    NEW = "new"


@dataclass
class QueryPage:
    total_count: int
    page: int
    page_size: int
    next_page: Optional[int]
    units: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            "totalCount": self.total_count,
            "page": self.page,
            "pageSize": self.page_size,
            "nextPage": self.next_page,
            "units": self.units,
        }


def filter_units(units: List[TranslationUnit], unit_filter: UnitFilter) -> List[TranslationUnit]:
    if unit_filter == UnitFilter.NEW:
        return [u for u in units if u.is_new()]
    return list(units)


def query_units(
    units: List[TranslationUnit],
    unit_filter: UnitFilter = UnitFilter.ALL,
    page: int = 0,
    page_size: int = 50,
) -> QueryPage:
    if page < 0:
        raise ValidationError(f"page must be >= 0, got {page}")
    if page_size < 1:
        raise ValidationError(f"pageSize must be >= 1, got {page_size}")

    selected = filter_units(units, unit_filter)
    total_count = len(selected)
    start = page * page_size
    end = start + page_size

    return QueryPage(
        total_count=total_count,
        page=page,
        page_size=page_size,
        next_page=page + 1 if end < total_count else None,
        units=[XliffParser.node_to_string(u.element) for u in selected[start:end]],
    )
