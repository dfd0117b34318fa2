from __future__ import annotations

import logging
from typing import Any

from fairdatause.errors import DuplicateError, NotFoundError
from fairdatause.schemas.contractor import ContractorRequestCreate
from fairdatause.services.applicant_repository import ApplicantRepository, InsertedRow, NewContractorRequest
from fairdatause.services.validation import CONTRACTOR_MESSAGES, parse_payload


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "We've just pinged them. You'll be sent an email and text invite within 72 hours."
USER_NOT_FOUND_MESSAGE = "User not found. Please complete the qualification form first."
DUPLICATE_MESSAGE = "You have already requested to join this company. Please check your email for updates."


class ContractorRequestWorkflow:
    def __init__(self, repository: ApplicantRepository) -> None:
        self.repository = repository

    def submit(self, payload: Any) -> InsertedRow:
        request = parse_payload(ContractorRequestCreate, payload, CONTRACTOR_MESSAGES)

        user_id = self.repository.find_applicant_id_by_email(request.email)
        if user_id is None:
            logger.info("Contractor request rejected: no applicant for email")
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)

        if self.repository.exists_contractor_request(user_id, request.company_slug):
            logger.info("Contractor request rejected: user %s already asked for %s", user_id, request.company_slug)
            raise DuplicateError(DUPLICATE_MESSAGE)

        row = self.repository.insert_contractor_request(
            NewContractorRequest(
                user_id=user_id,
                email=request.email,
                company_slug=request.company_slug,
                company_name=request.company_name,
            )
        )
        # TODO: notify the company and email the applicant once the mail provider is wired up.
        logger.info("Contractor request %s stored for user %s (%s)", row.id, user_id, request.company_slug)
        return row
