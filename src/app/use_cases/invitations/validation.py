"""
Invitation form validation.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from libs.result import Error
from src.domain.entities import ActingUser, Invitation

EXPIRATION_OPTIONS = (1, 3, 7, 14, 30)
MESSAGE_MAX_LENGTH = 500

DISPOSABLE_EMAIL_DOMAINS = frozenset(
    {
        "10minutemail.com",
        "guerrillamail.com",
        "mailinator.com",
        "tempmail.org",
        "temp-mail.org",
    }
)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_recipient_email(email: Optional[str]) -> Optional[Error]:
    """Returns an Error for a missing, malformed or disposable address"""
    if not email or not email.strip():
        return Error("INVALID_EMAIL", "Recipient email is required")

    try:
        validated = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return Error("INVALID_EMAIL", f"Invalid email address: {email}")

    if validated.domain.lower() in DISPOSABLE_EMAIL_DOMAINS:
        return Error("DISPOSABLE_EMAIL", "Please use a permanent email address")

    return None


def check_message(message: Optional[str]) -> Optional[Error]:
    if message is not None and len(message) > MESSAGE_MAX_LENGTH:
        return Error(
            "MESSAGE_TOO_LONG",
            f"Message must be at most {MESSAGE_MAX_LENGTH} characters",
        )
    return None


def check_recipient(invitation: Invitation, acting_user: ActingUser) -> Optional[Error]:
    """Only the invited address (or the user already bound to it) may respond"""
    if invitation.recipient_id is not None and invitation.recipient_id == acting_user.id:
        return None
    if normalize_email(acting_user.email) == invitation.recipient_email:
        return None
    return Error(
        "NOT_INVITATION_RECIPIENT",
        "This invitation was sent to someone else",
    )
