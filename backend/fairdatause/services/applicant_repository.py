from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fairdatause.errors import StorageError
from fairdatause.models._timestamps import utcnow
from fairdatause.models.applicant import Applicant
from fairdatause.models.contractor_request import ContractorRequest, ContractorStatus


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertedRow:
    id: int
    created_at: datetime
    updated_at: datetime


@dataclass
class NewApplicant:
    email: str
    phone: str
    reddit_username: str
    reddit_verified: bool
    twitter_username: str | None = None
    youtube_username: str | None = None
    facebook_username: str | None = None


@dataclass
class NewContractorRequest:
    user_id: int
    email: str
    company_slug: str
    company_name: str
    status: str = ContractorStatus.PENDING.value
    joined_slack: bool = True
    can_start_job: bool = False


class ApplicantRepository:
    """Reads and writes the ``users`` and ``contractors`` tables.

    Uniqueness of (email, phone) and (user_id, company_slug) is checked by the
    callers through the ``exists_*`` methods; the inserts do not re-check.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextlib.contextmanager
    def _storage(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Storage failure during %s: %s", operation, exc)
            raise StorageError(str(exc)) from exc

    def exists_applicant(self, email: str, phone: str) -> bool:
        with self._storage("exists_applicant"):
            query = exists().where(Applicant.email == email, Applicant.phone == phone)
            return bool(self.db.query(query).scalar())

    def insert_applicant(self, record: NewApplicant) -> InsertedRow:
        now = utcnow()
        applicant = Applicant(
            email=record.email,
            phone=record.phone,
            reddit_username=record.reddit_username,
            twitter_username=record.twitter_username,
            youtube_username=record.youtube_username,
            facebook_username=record.facebook_username,
            reddit_verified=record.reddit_verified,
            created_at=now,
            updated_at=now,
        )
        with self._storage("insert_applicant"):
            self.db.add(applicant)
            self.db.commit()
            self.db.refresh(applicant)
        return InsertedRow(id=applicant.id, created_at=applicant.created_at, updated_at=applicant.updated_at)

    def find_applicant_id_by_email(self, email: str) -> int | None:
        with self._storage("find_applicant_id_by_email"):
            row = self.db.query(Applicant.id).filter(Applicant.email == email).order_by(Applicant.id).first()
        return int(row[0]) if row else None

    def get_applicant(self, applicant_id: int) -> Applicant | None:
        with self._storage("get_applicant"):
            return self.db.get(Applicant, applicant_id)

    def exists_contractor_request(self, user_id: int, company_slug: str) -> bool:
        with self._storage("exists_contractor_request"):
            query = exists().where(
                ContractorRequest.user_id == user_id,
                ContractorRequest.company_slug == company_slug,
            )
            return bool(self.db.query(query).scalar())

    def insert_contractor_request(self, record: NewContractorRequest) -> InsertedRow:
        now = utcnow()
        contractor = ContractorRequest(
            user_id=record.user_id,
            email=record.email,
            company_slug=record.company_slug,
            company_name=record.company_name,
            status=record.status,
            joined_slack=record.joined_slack,
            can_start_job=record.can_start_job,
            created_at=now,
            updated_at=now,
        )
        with self._storage("insert_contractor_request"):
            self.db.add(contractor)
            self.db.commit()
            self.db.refresh(contractor)
        return InsertedRow(id=contractor.id, created_at=contractor.created_at, updated_at=contractor.updated_at)

    def get_contractor_request(self, request_id: int) -> ContractorRequest | None:
        with self._storage("get_contractor_request"):
            return self.db.get(ContractorRequest, request_id)
