"""Pending email verification records."""

from datetime import datetime

from . import db


class EmailVerification(db.Model):
    """Maps a one-time verification token to the email awaiting confirmation."""

    __tablename__ = "email_verifications"

    token = db.Column(db.String(64), primary_key=True)
    email = db.Column(db.String(255), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<EmailVerification email={self.email}>"
