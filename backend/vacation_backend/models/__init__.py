from vacation_backend.models.vacation import Vacation, VacationStatus

__all__ = [
    "Vacation",
    "VacationStatus",
]
