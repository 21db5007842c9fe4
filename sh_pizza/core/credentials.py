"""Credential Rules — presence and strength checks for emails and passwords.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Passwords shorter than `min_length` characters are rejected (default 8)
"""

from sh_pizza.core.errors import InvalidInputError

DEFAULT_MIN_PASSWORD_LENGTH = 8


def check_password_length(
    password: str, min_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> None:
    if len(password) < min_length:
        raise InvalidInputError(
            f"Password must be at least {min_length} characters long",
            field="password",
        )


def check_email_and_password(
    email: str | None,
    password: str | None,
    min_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> tuple[str, str]:
    """Both present and password long enough; returns the pair narrowed to str."""
    if not email or not password:
        raise InvalidInputError("Email and password are required")
    check_password_length(password, min_length)
    return email, password
