# librarydesk/schemas.py
# request body modelleri: servisler sadece doğrulanmış input görür
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    StringConstraints,
    field_validator,
    model_validator,
)

from librarydesk.utils.dates import date_from_parts, parse_due_date

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
STUD_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"
StudId = Annotated[str, StringConstraints(strip_whitespace=True, pattern=STUD_ID_PATTERN)]
PhoneStr = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^\+?[0-9]{3,20}$")]
GradeStr = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^[0-9]{1,2}$")]
Duration = Literal["3-days", "1-week", "2-week", "1-month"]


def _stringify(value):
    # JSON'dan sayı olarak gelebilir (stud_id: 42, grade: 7)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# -----------------------------
# Borrow
# -----------------------------
class ReturnDateParts(BaseModel):
    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _must_be_calendar_date(self):
        try:
            date_from_parts(self.year, self.month, self.day)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"{self.year}-{self.month}-{self.day} is not a valid date ({e})") from e
        return self

    def to_datetime(self) -> datetime:
        return date_from_parts(self.year, self.month, self.day)


class BookSnapshot(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: NonEmptyStr
    isbn: list[NonEmptyStr] = Field(min_length=1)
    key: Optional[str] = None


class BorrowCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stud_id: StudId
    name: NonEmptyStr
    age: PositiveInt
    grade: NonEmptyStr
    section: NonEmptyStr
    duration: Duration
    is_good: bool = Field(alias="isGood")
    return_date: ReturnDateParts = Field(alias="returnDate")
    book: BookSnapshot = Field(alias="bookDets")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_book_chunk(cls, data):
        # dashboard bookDets'i {data: {...}} olarak yolluyor
        if isinstance(data, dict):
            dets = data.get("bookDets")
            if isinstance(dets, dict) and isinstance(dets.get("data"), dict):
                data = {**data, "bookDets": dets["data"]}
        return data

    @field_validator("stud_id", "grade", mode="before")
    @classmethod
    def _coerce_str(cls, v):
        return _stringify(v)


class ExtendReturnDate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_return_date: datetime = Field(alias="newReturnDate")

    @field_validator("new_return_date", mode="before")
    @classmethod
    def _parse(cls, v):
        return parse_due_date(v)


# -----------------------------
# Members
# -----------------------------
class MemberCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stud_id: StudId
    name: NonEmptyStr
    parent_phone: PhoneStr = Field(alias="parentPhone")
    age: PositiveInt
    grade: GradeStr
    section: NonEmptyStr

    @field_validator("stud_id", "parent_phone", "grade", mode="before")
    @classmethod
    def _coerce_str(cls, v):
        return _stringify(v)


class MemberUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[NonEmptyStr] = None
    parent_phone: Optional[PhoneStr] = Field(default=None, alias="parentPhone")
    age: Optional[PositiveInt] = None
    grade: Optional[GradeStr] = None
    section: Optional[NonEmptyStr] = None
    score: Optional[int] = None

    @field_validator("parent_phone", "grade", mode="before")
    @classmethod
    def _coerce_str(cls, v):
        return _stringify(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


# -----------------------------
# Shelf
# -----------------------------
class ShelfBook(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: NonEmptyStr
    title: NonEmptyStr


class ShelfAdd(BaseModel):
    book: ShelfBook = Field(alias="bookDets")


class ManualShelfAdd(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    book_name: NonEmptyStr = Field(alias="bookName")
    book_author: NonEmptyStr = Field(alias="bookAuthor")
