from fairdatause.models.applicant import Applicant
from fairdatause.models.contractor_request import ContractorRequest, ContractorStatus

__all__ = ["Applicant", "ContractorRequest", "ContractorStatus"]
