from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from fairdatause.database import get_db
from fairdatause.services.applicant_repository import ApplicantRepository
from fairdatause.services.reddit_verifier import RedditVerifier


def get_repository(db: Session = Depends(get_db)) -> ApplicantRepository:
    return ApplicantRepository(db)


def get_verifier(request: Request) -> RedditVerifier:
    return request.app.state.verifier
