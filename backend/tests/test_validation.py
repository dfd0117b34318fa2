import pytest

from fairdatause.errors import ValidationError
from fairdatause.schemas.contractor import ContractorRequestCreate
from fairdatause.schemas.intake import IntakeRequest
from fairdatause.services.validation import CONTRACTOR_MESSAGES, INTAKE_MESSAGES, parse_payload


def test_intake_payload_is_normalized():
    form = parse_payload(
        IntakeRequest,
        {"email": "test@example.com", "phone": "1234567890", "redditUsername": "testuser", "twitterUsername": "tw"},
        INTAKE_MESSAGES,
    )
    assert form.email == "test@example.com"
    assert form.reddit_username == "testuser"
    assert form.twitter_username == "tw"
    assert form.youtube_username is None
    assert form.facebook_username is None


def test_missing_intake_fields_are_listed_in_order():
    with pytest.raises(ValidationError) as excinfo:
        parse_payload(IntakeRequest, {}, INTAKE_MESSAGES)
    assert excinfo.value.message == "email is required, phone is required, Reddit username is required"
    assert excinfo.value.status_code == 400


def test_wrong_types_are_reported_per_field():
    with pytest.raises(ValidationError) as excinfo:
        parse_payload(
            IntakeRequest,
            {"email": "test@example.com", "phone": 1234567890, "redditUsername": "testuser"},
            INTAKE_MESSAGES,
        )
    assert excinfo.value.message == "phone must be a string"


@pytest.mark.parametrize("payload", [["item1"], 42, None, "text"])
def test_non_object_payload_is_rejected(payload):
    with pytest.raises(ValidationError) as excinfo:
        parse_payload(IntakeRequest, payload, INTAKE_MESSAGES)
    assert excinfo.value.message == "Request body must be a JSON object"


def test_contractor_payload_messages():
    with pytest.raises(ValidationError) as excinfo:
        parse_payload(
            ContractorRequestCreate,
            {"email": "nope", "companySlug": "", "companyName": ""},
            CONTRACTOR_MESSAGES,
        )
    assert excinfo.value.message == "Invalid email, Company slug is required, Company name is required"


def test_contractor_payload_is_normalized():
    request = parse_payload(
        ContractorRequestCreate,
        {"email": "contractor@example.com", "companySlug": "acme", "companyName": "Acme", "extra": True},
        CONTRACTOR_MESSAGES,
    )
    assert request.company_slug == "acme"
    assert request.company_name == "Acme"


def test_email_is_kept_as_submitted():
    form = parse_payload(
        IntakeRequest,
        {"email": "Mixed@Example.COM", "phone": "1234567890", "redditUsername": "testuser"},
        INTAKE_MESSAGES,
    )
    assert form.email == "Mixed@Example.COM"
