"""
Vacation Request Lifecycle Service

Owns the status state machine of a vacation request:

    CREATED  -> APPROVED | DECLINED
    APPROVED -> DECLINED
    DECLINED -> APPROVED

Re-applying the current status (APPROVED -> APPROVED, DECLINED -> DECLINED)
is rejected.  There is no terminal state.

The service keeps no state between calls; every mutation is written
through the injected ``VacationStore``.  The read-check-write in
``approve``/``decline`` is not atomic across concurrent callers.
"""

import logging
from typing import Iterable, List, Optional

from vacation_backend.models.vacation import Vacation, VacationStatus
from vacation_backend.services.vacation_store import VacationStore

logger = logging.getLogger(__name__)


class VacationError(Exception):
    """Base exception for vacation lifecycle rule violations"""

    pass


class InvalidStateError(VacationError):
    """Request created with a status other than CREATED"""

    pass


class ConflictError(VacationError):
    """Status transition re-applies the current status"""

    pass


class NotFoundError(VacationError):
    """No vacation request with the given id"""

    pass


def normalize_filters(usernames: Optional[Iterable[str]]) -> List[str]:
    """
    Drop blank filters; an empty result means "no filter" and becomes [""].

    Non-blank filters are kept as given (no trimming).
    """
    filters = [u for u in (usernames or []) if u and u.strip()]
    return filters or [""]


class VacationService:
    def __init__(self, store: VacationStore):
        self.store = store

    def create_request(self, vacation: Vacation) -> Vacation:
        if vacation.status != VacationStatus.CREATED:
            raise InvalidStateError("Request error: not allowed status")

        created = self.store.create(vacation)
        logger.info("Vacation(%s) requested by %r", created.id, created.username)
        return created

    def search(self, usernames: Optional[Iterable[str]] = None) -> List[Vacation]:
        """
        Case-insensitive substring search on username.

        Each filter is matched independently and results are concatenated in
        filter order, so a record matching several filters appears several
        times.
        """
        results: List[Vacation] = []
        for username in normalize_filters(usernames):
            results.extend(self.store.find_all_matching(username))
        return results

    def get_by_id(self, vacation_id: int) -> Optional[Vacation]:
        return self.store.find_by_id(vacation_id)

    def approve(self, vacation_id: int) -> Vacation:
        return self._transition(vacation_id, VacationStatus.APPROVED, action="Approval", past_tense="approved")

    def decline(self, vacation_id: int) -> Vacation:
        return self._transition(vacation_id, VacationStatus.DECLINED, action="Decline", past_tense="declined")

    def _transition(self, vacation_id: int, target: VacationStatus, action: str, past_tense: str) -> Vacation:
        vacation = self.store.find_by_id(vacation_id)
        if vacation is None:
            raise NotFoundError(f"{action} error: Vacation({vacation_id}) not found")

        if vacation.status == target:
            raise ConflictError(f"{action} error: Vacation({vacation_id}) already {past_tense}")

        previous = vacation.status
        vacation.status = target
        saved = self.store.save(vacation)
        logger.info("Vacation(%s) %s -> %s", vacation_id, _status_name(previous), target.value)
        return saved


def _status_name(status) -> str:
    return status.value if isinstance(status, VacationStatus) else str(status)
