from __future__ import annotations

import re

from pydantic import BaseModel, ValidationError

from librarydesk.schemas import STUD_ID_PATTERN
from librarydesk.utils.errors import ValidationFailed

MAX_RECORD_ID = 2**63 - 1


def parse_body(model: type[BaseModel], data, message: str = "Validation failed"):
    try:
        return model.model_validate(data if data is not None else {})
    except ValidationError as e:
        raise ValidationFailed(message, errors=[
            {
                "field": ".".join(str(p) for p in err["loc"]),
                "message": err["msg"],
            }
            for err in e.errors()
        ]) from e


def parse_record_id(raw: str) -> int:
    try:
        record_id = int(raw)
    except (TypeError, ValueError):
        raise ValidationFailed(f"Invalid record id format: {raw}")
    # SQLite / BIGINT sınırı
    if record_id < 1 or record_id > MAX_RECORD_ID:
        raise ValidationFailed(f"Invalid record id format: {raw}")
    return record_id


def check_stud_id(stud_id: str | None) -> str:
    if not stud_id or not re.fullmatch(STUD_ID_PATTERN, stud_id):
        raise ValidationFailed(f"Invalid member ID format: {stud_id}.")
    return stud_id
