from dataclasses import dataclass

from sqlalchemy import func

from .models import DISPLAYED_LABELS, SentimentRecord, db

NOT_AVAILABLE = "N/A"

MONTH_NAMES = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "id": [
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ],
}


@dataclass
class Summary:
    positive_count: int
    negative_count: int
    neutral_count: int
    last_update_display: str


def format_timestamp(moment, locale="en"):
    """Format as ``d F Y H:i`` with month names in the given locale."""
    months = MONTH_NAMES.get(locale, MONTH_NAMES["en"])
    return f"{moment:%d} {months[moment.month - 1]} {moment:%Y %H:%M}"


def get_summary(locale="en") -> Summary:
    rows = (
        db.session.query(SentimentRecord.label, func.count(SentimentRecord.id))
        .filter(SentimentRecord.label.in_(DISPLAYED_LABELS))
        .group_by(SentimentRecord.label)
        .all()
    )
    counts = dict(rows)

    last_update = db.session.query(func.max(SentimentRecord.updated_at)).scalar()
    display = format_timestamp(last_update, locale) if last_update else NOT_AVAILABLE

    return Summary(
        positive_count=counts.get("positive", 0),
        negative_count=counts.get("negative", 0),
        neutral_count=counts.get("neutral", 0),
        last_update_display=display,
    )
