from __future__ import annotations

from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator


def _check_email(value: str) -> str:
    # Stored and compared exactly as submitted; lookups never see a normalized form.
    validate_email(value, check_deliverability=False)
    return value


SubmittedEmail = Annotated[str, AfterValidator(_check_email)]
