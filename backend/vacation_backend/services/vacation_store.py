"""
Vacation Record Store

Persistence boundary for vacation requests.  The service layer only
depends on the ``VacationStore`` protocol; ``SqlVacationStore`` is the
SQLModel implementation used by the HTTP layer.
"""

from typing import List, Optional, Protocol

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from vacation_backend.models.vacation import Vacation


class VacationStore(Protocol):
    def create(self, vacation: Vacation) -> Vacation:
        """Insert a new record; the store assigns the id"""
        ...

    def find_by_id(self, vacation_id: int) -> Optional[Vacation]:
        ...

    def find_all_ordered_by_id(self) -> List[Vacation]:
        ...

    def find_all_matching(self, username: str) -> List[Vacation]:
        """Case-insensitive substring match on username, ascending by id"""
        ...

    def save(self, vacation: Vacation) -> Vacation:
        """Upsert by id"""
        ...

    def delete_all(self) -> None:
        ...


class SqlVacationStore:
    def __init__(self, session: Session):
        self.session = session

    def create(self, vacation: Vacation) -> Vacation:
        # Never trust an incoming id: always insert a fresh row
        record = Vacation(**vacation.model_dump(exclude={"id"}))
        return self._commit(record)

    def find_by_id(self, vacation_id: int) -> Optional[Vacation]:
        return self.session.get(Vacation, vacation_id)

    def find_all_ordered_by_id(self) -> List[Vacation]:
        return list(self.session.exec(select(Vacation).order_by(col(Vacation.id))).all())

    def find_all_matching(self, username: str) -> List[Vacation]:
        if not username:
            return self.find_all_ordered_by_id()

        query = (
            select(Vacation)
            .where(func.lower(col(Vacation.username)).contains(username.lower(), autoescape=True))
            .order_by(col(Vacation.id))
        )
        return list(self.session.exec(query).all())

    def save(self, vacation: Vacation) -> Vacation:
        return self._commit(self.session.merge(vacation))

    def delete_all(self) -> None:
        for vacation in self.session.exec(select(Vacation)).all():
            self.session.delete(vacation)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _commit(self, vacation: Vacation) -> Vacation:
        self.session.add(vacation)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self.session.refresh(vacation)
        return vacation
