import logging

from sqlalchemy.exc import SQLAlchemyError

from .models import SentimentRecord, db
from .results import ErrorKind, Result
from .schemas import SaveForm, validate_payload

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Comment saved successfully!"
SAVE_FAILED_MESSAGE = "Failed to save sentiment data."


def save(text, label) -> Result:
    """
    Validate a text/label pair and store it as a new SentimentRecord.
    The label is stored lower-cased.
    """
    validated = validate_payload(SaveForm, {"review_text": text, "label_sentimen": label})
    if not validated.ok:
        return validated
    form = validated.value

    try:
        db.session.add(SentimentRecord(text=form.review_text, label=form.label_sentimen))
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(
            "Failed to save sentiment data: %s data=%s",
            e,
            {"review_text": form.review_text, "label_sentimen": form.label_sentimen},
        )
        return Result.failure(ErrorKind.PERSISTENCE, SAVE_FAILED_MESSAGE, 500)

    logger.debug("Saved sentiment record with label %s", form.label_sentimen)
    return Result.success({"success": True, "message": SAVED_MESSAGE})
