from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from fairdatause.body import json_body
from fairdatause.dependencies import get_repository, get_verifier
from fairdatause.schemas.intake import CheckUserExistsResponse, IntakeData, IntakeResponse
from fairdatause.services.applicant_repository import ApplicantRepository
from fairdatause.services.intake import SUCCESS_MESSAGE, IntakeWorkflow, check_user_exists
from fairdatause.services.reddit_verifier import RedditVerifier


router = APIRouter()


@router.post("/intake", response_model=IntakeResponse)
@router.post("/social-qualify-form", response_model=IntakeResponse, include_in_schema=False)
def submit_intake(
    payload: Any = Depends(json_body),
    repository: ApplicantRepository = Depends(get_repository),
    verifier: RedditVerifier = Depends(get_verifier),
) -> IntakeResponse:
    matched_company = IntakeWorkflow(repository, verifier).submit(payload)
    return IntakeResponse(message=SUCCESS_MESSAGE, data=IntakeData(matched_company=matched_company))


@router.post("/check-user-exists", response_model=CheckUserExistsResponse)
def check_user(
    payload: Any = Depends(json_body),
    repository: ApplicantRepository = Depends(get_repository),
) -> CheckUserExistsResponse:
    return CheckUserExistsResponse(user_exists=check_user_exists(repository, payload))
