"""엔티티 스키마가 공유하는 필드 타입, 부분 수정 베이스, 페이지 응답 계약입니다."""

from datetime import datetime
from typing import Annotated, ClassVar, Generic, List, Optional, TypeVar
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, Field, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from app.utils.helpers import to_naive_utc

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

T = TypeVar("T")


def _check_url(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Invalid URL")
    return value


def _check_required_url(value: str) -> str:
    checked = _check_url(value)
    if checked is None:
        raise ValueError("Invalid URL")
    return checked


Slug = Annotated[str, StringConstraints(min_length=1, max_length=200, pattern=SLUG_PATTERN)]
OptionalUrl = Annotated[Optional[Annotated[str, StringConstraints(max_length=500)]], AfterValidator(_check_url)]
RequiredUrl = Annotated[str, StringConstraints(max_length=500), AfterValidator(_check_required_url)]
UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


class ApiModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PartialUpdate(ApiModel):
    """Every field optional; only fields present in the payload are applied."""

    # 생성 시 필수인 필드는 명시적 null로 지울 수 없다.
    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ReorderItem(ApiModel):
    id: str = Field(min_length=1, max_length=64)
    order: int = Field(ge=0)


class PaginationOut(ApiModel):
    page: int
    limit: int
    total: int
    pages: int


class Page(ApiModel, Generic[T]):
    items: List[T]
    pagination: PaginationOut


class MessageOut(ApiModel):
    message: str
