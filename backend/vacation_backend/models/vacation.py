from datetime import date
from enum import Enum
from typing import Optional

from sqlalchemy import String
from sqlmodel import Column, Field, SQLModel


class VacationStatus(str, Enum):
    CREATED = "CREATED"
    DECLINED = "DECLINED"
    APPROVED = "APPROVED"


class Vacation(SQLModel, table=True):
    __tablename__ = "vacations"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(default="", index=True)  # Requester display name, not validated
    date_from: date = Field(default_factory=date.today)
    date_to: date = Field(default_factory=date.today)  # date_from <= date_to is not enforced
    hours: int = Field(default=0)
    status: VacationStatus = Field(default=VacationStatus.CREATED, sa_column=Column(String, nullable=False))
