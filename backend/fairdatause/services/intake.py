from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fairdatause.errors import ConfigurationError, DuplicateError, ValidationError, VerificationFailure
from fairdatause.schemas.intake import CheckUserExistsRequest, IntakeRequest, MatchedCompany
from fairdatause.services.applicant_repository import ApplicantRepository, NewApplicant
from fairdatause.services.reddit_verifier import CredentialsMissing, RedditVerifier
from fairdatause.services.validation import INTAKE_MESSAGES, parse_payload


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Application processed successfully"
DUPLICATE_MESSAGE = "A user with this email and phone number combination already exists."
CHECK_USER_REQUIRED_MESSAGE = "Email and phone are required"

# Every verified applicant is offered the same marketplace company.
MATCHED_COMPANY = MatchedCompany(
    name="Silicon Valley Consulting",
    slug="silicon-valley-consulting",
    pay_rate="$2.00 per hour",
    bonus="$500",
)


class IntakeWorkflow:
    def __init__(self, repository: ApplicantRepository, verifier: RedditVerifier) -> None:
        self.repository = repository
        self.verifier = verifier

    def submit(self, payload: Any) -> MatchedCompany:
        form = parse_payload(IntakeRequest, payload, INTAKE_MESSAGES)
        logger.info("Intake received for reddit user %r", form.reddit_username)

        if self.repository.exists_applicant(form.email, form.phone):
            logger.info("Intake rejected: duplicate email/phone")
            raise DuplicateError(DUPLICATE_MESSAGE)

        result = self.verifier.verify(form.reddit_username)
        if isinstance(result, CredentialsMissing):
            raise ConfigurationError(result.missing)
        if not result.verified:
            logger.info("Intake rejected: reddit user %r not found", form.reddit_username)
            raise VerificationFailure(form.reddit_username)

        row = self.repository.insert_applicant(
            NewApplicant(
                email=form.email,
                phone=form.phone,
                reddit_username=form.reddit_username,
                twitter_username=form.twitter_username,
                youtube_username=form.youtube_username,
                facebook_username=form.facebook_username,
                reddit_verified=True,
            )
        )
        logger.info("Applicant %s stored", row.id)
        return MATCHED_COMPANY


def check_user_exists(repository: ApplicantRepository, payload: Any) -> bool:
    try:
        query = CheckUserExistsRequest.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(CHECK_USER_REQUIRED_MESSAGE) from exc
    return repository.exists_applicant(query.email, query.phone)
