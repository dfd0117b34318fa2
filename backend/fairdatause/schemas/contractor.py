from __future__ import annotations

from pydantic import BaseModel, Field

from fairdatause.schemas.common import SubmittedEmail


class ContractorRequestCreate(BaseModel):
    email: SubmittedEmail
    company_slug: str = Field(alias="companySlug", min_length=1)
    company_name: str = Field(alias="companyName", min_length=1)

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    success: bool = True
    message: str
