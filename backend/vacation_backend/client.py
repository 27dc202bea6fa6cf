"""
HTTP client for the Vacation Requests API.

Any error status raises ``VacationClientError`` carrying the server's
``error`` message, or "Unknown error" when the body has none.  A
``requests.Session`` is used by default; any object with the same
``get``/``post``/``put``/``delete`` interface can be injected.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests

from vacation_backend.schemas import UNKNOWN_ERROR, VacationPayload

logger = logging.getLogger(__name__)


class VacationClientError(Exception):
    """Raised when the server answers with an error status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class VacationClientSettings:
    protocol: str = field(default_factory=lambda: os.getenv("VACATION_SERVER_PROTOCOL", "http"))
    host: str = field(default_factory=lambda: os.getenv("VACATION_SERVER_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("VACATION_SERVER_PORT", "8003")))
    base_url: str = field(default_factory=lambda: os.getenv("VACATION_SERVER_BASE_URL", ""))

    def __post_init__(self):
        if not self.base_url:
            self.base_url = f"{self.protocol}://{self.host}:{self.port}"
        self.base_url = self.base_url.rstrip("/")


class VacationClient:
    def __init__(self, settings: Optional[VacationClientSettings] = None, session: Any = None):
        self.settings = settings or VacationClientSettings()
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.settings.base_url}{path}"

    def request_vacation(self, vacation: VacationPayload) -> VacationPayload:
        logger.debug("request-vacation: %s", vacation)
        body = vacation.model_dump(mode="json", by_alias=True)
        response = self.session.post(self._url("/vacations"), json=body)
        return VacationPayload.model_validate(self._handle_errors(response))

    def search_vacations(self, *usernames: str) -> List[VacationPayload]:
        logger.debug("search-vacations: %s", usernames)
        params = {"username": list(usernames or ("",))}
        response = self.session.get(self._url("/vacations"), params=params)
        return [VacationPayload.model_validate(item) for item in self._handle_errors(response)]

    def get_vacation(self, vacation_id: int) -> Optional[VacationPayload]:
        logger.debug("get-vacation: %s", vacation_id)
        response = self.session.get(self._url(f"/vacations/{vacation_id}"))
        if response.status_code == 404:
            return None
        return VacationPayload.model_validate(self._handle_errors(response))

    def approve_vacation(self, vacation_id: int) -> VacationPayload:
        logger.debug("approve-vacation: %s", vacation_id)
        response = self.session.put(self._url(f"/vacations/{vacation_id}"))
        return VacationPayload.model_validate(self._handle_errors(response))

    def decline_vacation(self, vacation_id: int) -> VacationPayload:
        logger.debug("decline-vacation: %s", vacation_id)
        response = self.session.delete(self._url(f"/vacations/{vacation_id}"))
        return VacationPayload.model_validate(self._handle_errors(response))

    @staticmethod
    def _handle_errors(response) -> Any:
        if response.status_code < 400:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = None
        message = str(body["error"]) if isinstance(body, dict) and "error" in body else UNKNOWN_ERROR
        raise VacationClientError(message, status_code=response.status_code)
