"""
Form validation

Every console form is a pydantic model derived from ConsoleForm. Required
fields are checked first, with the same human messages the screens show;
pydantic then validates types and cross-field rules. Failures surface as a
single FormValidationError holding one message per field, and nothing is
sent to the backend.
"""
import json
from typing import Any, ClassVar, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from app.core.exceptions import FormValidationError

FormT = TypeVar("FormT", bound="ConsoleForm")


class ConsoleForm(BaseModel):
    """Base class for console forms"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # field name -> message shown when the field is empty
    REQUIRED: ClassVar[Dict[str, str]] = {}

    # fields validated but never sent to the backend
    LOCAL_ONLY: ClassVar[tuple] = ()

    @classmethod
    def required_fields(cls, creating: bool = True) -> Dict[str, str]:
        return dict(cls.REQUIRED)

    def to_payload(self) -> Dict[str, Any]:
        """Body sent to the backend"""
        return self.model_dump(mode="json", exclude=set(self.LOCAL_ONLY))


def blank_to_none(value: Any) -> Any:
    """Empty inputs of optional fields (dates, numbers) mean 'not set'"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def split_list(value: Any) -> Any:
    """
    List fields arrive as lists from JSON bodies and as JSON or
    comma-separated strings from multipart forms.
    """
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        if text.startswith("["):
            return json.loads(text)
        return [part.strip() for part in text.split(",") if part.strip()]
    return value


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def _error_message(error: Dict[str, Any]) -> str:
    # ValueErrors raised by our validators carry the exact text to show
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value")


def validate_form(model: Type[FormT], payload: Dict[str, Any], creating: bool = True) -> FormT:
    """
    Validate raw form input

    Args:
        model: ConsoleForm subclass
        payload: Raw field values as submitted
        creating: False for edit screens (some fields are optional there)

    Returns:
        The validated form

    Raises:
        FormValidationError: with one message per invalid field
    """
    payload = payload or {}

    errors: Dict[str, str] = {}
    for field, message in model.required_fields(creating).items():
        if is_blank(payload.get(field)):
            errors[field] = message

    if errors:
        raise FormValidationError(errors)

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        for error in e.errors():
            loc = error.get("loc") or ("__root__",)
            field = str(loc[0])
            errors.setdefault(field, _error_message(error))
        raise FormValidationError(errors) from e
