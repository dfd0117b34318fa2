from fairdatause.schemas.contractor import ContractorRequestCreate, MessageResponse
from fairdatause.schemas.intake import (
    CheckUserExistsRequest,
    CheckUserExistsResponse,
    IntakeData,
    IntakeRequest,
    IntakeResponse,
    MatchedCompany,
)

__all__ = [
    "IntakeRequest",
    "IntakeResponse",
    "IntakeData",
    "MatchedCompany",
    "CheckUserExistsRequest",
    "CheckUserExistsResponse",
    "ContractorRequestCreate",
    "MessageResponse",
]
