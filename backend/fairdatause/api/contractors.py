from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from fairdatause.body import json_body
from fairdatause.dependencies import get_repository
from fairdatause.schemas.contractor import MessageResponse
from fairdatause.services.applicant_repository import ApplicantRepository
from fairdatause.services.contractor_requests import SUCCESS_MESSAGE, ContractorRequestWorkflow


router = APIRouter()


@router.post("/contractor-request", response_model=MessageResponse)
def create_contractor_request(
    payload: Any = Depends(json_body),
    repository: ApplicantRepository = Depends(get_repository),
) -> MessageResponse:
    ContractorRequestWorkflow(repository).submit(payload)
    return MessageResponse(message=SUCCESS_MESSAGE)
