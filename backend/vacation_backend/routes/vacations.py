"""
Vacation Request API Routes

POST   /vacations          request a vacation (status must be CREATED)
GET    /vacations          search by ?username=... (repeatable, substring, case-insensitive)
GET    /vacations/{id}     fetch one, 404 with empty body when missing
PUT    /vacations/{id}     approve
DELETE /vacations/{id}     decline

Rejected requests answer 400 with ``{"error": message}``.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse
from sqlmodel import Session

from vacation_backend.database import get_session
from vacation_backend.schemas import UNKNOWN_ERROR, ErrorResponse, VacationPayload
from vacation_backend.services.vacation_service import VacationService
from vacation_backend.services.vacation_store import SqlVacationStore

logger = logging.getLogger(__name__)

router = APIRouter()

_error_responses = {400: {"model": ErrorResponse}}


def get_vacation_service(session: Session = Depends(get_session)) -> VacationService:
    return VacationService(SqlVacationStore(session))


def error_response(exc: Exception) -> JSONResponse:
    """Map any failure to 400 {"error": message}"""
    message = str(exc) or UNKNOWN_ERROR
    logger.warning(message)
    return JSONResponse(status_code=400, content={"error": message})


@router.post("/vacations", response_model=VacationPayload, status_code=201, responses=_error_responses)
def request_vacation(payload: VacationPayload, service: VacationService = Depends(get_vacation_service)):
    try:
        return service.create_request(payload.to_model())
    except Exception as e:
        return error_response(e)


@router.get("/vacations", response_model=List[VacationPayload])
def search_vacations(
    username: Optional[List[str]] = Query(default=None),
    service: VacationService = Depends(get_vacation_service),
):
    try:
        return service.search(username)
    except Exception as e:
        return error_response(e)


@router.get(
    "/vacations/{vacation_id}",
    response_model=VacationPayload,
    responses={**_error_responses, 404: {"description": "Not found"}},
)
def get_vacation(vacation_id: int, service: VacationService = Depends(get_vacation_service)):
    try:
        vacation = service.get_by_id(vacation_id)
    except Exception as e:
        return error_response(e)
    if vacation is None:
        return Response(status_code=404)
    return vacation


@router.put("/vacations/{vacation_id}", response_model=VacationPayload, status_code=202, responses=_error_responses)
def approve_vacation(vacation_id: int, service: VacationService = Depends(get_vacation_service)):
    try:
        return service.approve(vacation_id)
    except Exception as e:
        return error_response(e)


@router.delete("/vacations/{vacation_id}", response_model=VacationPayload, status_code=202, responses=_error_responses)
def decline_vacation(vacation_id: int, service: VacationService = Depends(get_vacation_service)):
    try:
        return service.decline(vacation_id)
    except Exception as e:
        return error_response(e)
