"""Entry-time validation for contact fields. Pure functions, no UI state."""

import re

# Same expression as android.util.Patterns.EMAIL_ADDRESS.
EMAIL_ADDRESS = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


def is_not_empty(text: str | None) -> bool:
    return bool(text)


def is_email(text: str | None) -> bool:
    return isinstance(text, str) and EMAIL_ADDRESS.fullmatch(text) is not None


def invalid_fields(first_name: str | None, last_name: str | None, email: str | None) -> list[str]:
    """Return the names of the fields that fail validation, in form order."""
    failed = []
    if not is_not_empty(first_name):
        failed.append("first_name")
    if not is_not_empty(last_name):
        failed.append("last_name")
    if not is_email(email):
        failed.append("email")
    return failed


def validate(first_name: str | None, last_name: str | None, email: str | None) -> bool:
    """True iff both names are non-empty and email is a syntactically valid address."""
    return not invalid_fields(first_name, last_name, email)
