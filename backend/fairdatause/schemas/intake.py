from __future__ import annotations

from pydantic import BaseModel, Field

from fairdatause.schemas.common import SubmittedEmail


class IntakeRequest(BaseModel):
    email: SubmittedEmail
    phone: str = Field(min_length=10)
    reddit_username: str = Field(alias="redditUsername", min_length=1)
    twitter_username: str | None = Field(default=None, alias="twitterUsername")
    youtube_username: str | None = Field(default=None, alias="youtubeUsername")
    facebook_username: str | None = Field(default=None, alias="facebookUsername")

    class Config:
        populate_by_name = True


class CheckUserExistsRequest(BaseModel):
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)


class MatchedCompany(BaseModel):
    name: str
    slug: str
    pay_rate: str = Field(alias="payRate")
    bonus: str

    class Config:
        populate_by_name = True


class IntakeData(BaseModel):
    matched_company: MatchedCompany = Field(alias="matchedCompany")

    class Config:
        populate_by_name = True


class IntakeResponse(BaseModel):
    success: bool = True
    message: str
    data: IntakeData


class CheckUserExistsResponse(BaseModel):
    success: bool = True
    user_exists: bool = Field(alias="userExists")

    class Config:
        populate_by_name = True
