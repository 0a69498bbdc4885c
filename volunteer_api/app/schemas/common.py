"""
Field types shared by several schemas.
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the address exactly as sent.

    Users are looked up by the email in the URL, so the stored key must
    be the submitted string and not a normalized form of it.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email format: {e}") from e
    return value


Email = Annotated[str, AfterValidator(check_email)]
