"""목록 API 공통 페이지네이션 파라미터 해석 유틸리티입니다."""

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 50


def _parse_positive_int(raw: str | int | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, page: str | int | None, limit: str | int | None) -> "PageRequest":
        return cls(
            page=_parse_positive_int(page, DEFAULT_PAGE),
            limit=min(_parse_positive_int(limit, DEFAULT_LIMIT), MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def pages_for(self, total: int) -> int:
        return math.ceil(total / self.limit) if total else 0
