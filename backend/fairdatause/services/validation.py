from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fairdatause.errors import ValidationError


ModelT = TypeVar("ModelT", bound=BaseModel)

# field -> pydantic error type -> message; "*" matches any type except "missing".
INTAKE_MESSAGES: dict[str, dict[str, str]] = {
    "email": {"*": "Please enter a valid email address"},
    "phone": {"string_too_short": "Phone number must be at least 10 digits"},
    "redditUsername": {
        "string_too_short": "Reddit username is required",
        "missing": "Reddit username is required",
    },
}

CONTRACTOR_MESSAGES: dict[str, dict[str, str]] = {
    "email": {"*": "Invalid email"},
    "companySlug": {"string_too_short": "Company slug is required", "missing": "Company slug is required"},
    "companyName": {"string_too_short": "Company name is required", "missing": "Company name is required"},
}


def _message_for(error: dict[str, Any], messages: dict[str, dict[str, str]]) -> str:
    loc = error.get("loc") or ()
    if not loc:
        return "Request body must be a JSON object"

    field = str(loc[0])
    error_type = error.get("type", "")
    field_messages = messages.get(field, {})
    if error_type in field_messages:
        return field_messages[error_type]
    if error_type == "missing":
        return f"{field} is required"
    if "*" in field_messages:
        return field_messages["*"]
    if error_type == "string_type":
        return f"{field} must be a string"
    return f"{field}: {error.get('msg', 'is invalid')}"


def validation_message(exc: PydanticValidationError, messages: dict[str, dict[str, str]]) -> str:
    collected: list[str] = []
    for error in exc.errors():
        message = _message_for(error, messages)
        if message not in collected:
            collected.append(message)
    return ", ".join(collected)


def parse_payload(
    model: type[ModelT],
    payload: Any,
    messages: dict[str, dict[str, str]] | None = None,
) -> ModelT:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(validation_message(exc, messages or {})) from exc
