"""
Wire representation of a vacation request.

Attributes are snake_case in Python and camelCase on the wire
(``dateFrom``, ``dateTo``); both spellings are accepted on input.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from vacation_backend.models.vacation import Vacation, VacationStatus


class VacationPayload(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[int] = None
    username: str = ""
    date_from: date = Field(default_factory=date.today, alias="dateFrom")
    date_to: date = Field(default_factory=date.today, alias="dateTo")
    hours: int = 0
    status: VacationStatus = VacationStatus.CREATED

    def to_model(self) -> Vacation:
        return Vacation(**self.model_dump())


UNKNOWN_ERROR = "Unknown error"


class ErrorResponse(BaseModel):
    error: str
