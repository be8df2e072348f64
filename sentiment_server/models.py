from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

SENTIMENT_LABELS = ("positive", "negative", "neutral", "unknown")
# "unknown" is stored but not shown on the dashboard
DISPLAYED_LABELS = ("positive", "negative", "neutral")

MAX_TEXT_LENGTH = 10000


class SentimentRecord(db.Model):
    __tablename__ = "sentiment_records"

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    label = db.Column(db.String(16), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    def __repr__(self):
        return f"<SentimentRecord {self.id} {self.label}>"
