"""
Request DTOs for the predict and save endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from .models import MAX_TEXT_LENGTH, SENTIMENT_LABELS
from .results import ErrorKind, Result

VALIDATION_MESSAGE = "The given data was invalid."
MIN_PREDICT_LENGTH = 3


class PredictForm(BaseModel):
    """Text submitted for classification."""

    model_config = ConfigDict(str_strip_whitespace=True)

    review_text: StrictStr = Field(..., min_length=MIN_PREDICT_LENGTH)


class SaveForm(BaseModel):
    """Text/label pair submitted for storage."""

    model_config = ConfigDict(str_strip_whitespace=True)

    review_text: StrictStr = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    label_sentimen: StrictStr

    @field_validator("label_sentimen")
    @classmethod
    def validate_label(cls, value):
        value = value.lower()
        if value not in SENTIMENT_LABELS:
            raise ValueError(f"must be one of: {', '.join(SENTIMENT_LABELS)}")
        return value


def field_errors(exc: ValidationError):
    """Group pydantic errors by the top-level field they belong to."""
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def validate_payload(schema, data) -> Result:
    try:
        return Result.success(schema.model_validate(data))
    except ValidationError as e:
        return Result.failure(ErrorKind.VALIDATION, VALIDATION_MESSAGE, 422, errors=field_errors(e))
