"""Input rules shared by registration and the admin bootstrap script."""

from re import compile as re_compile

from learng.configs import MIN_PASSWORD_LENGTH, VALID_ROLES

EMAIL_PATTERN = re_compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
DIGIT_PATTERN = re_compile(r"[0-9]")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def password_problem(password: str) -> str | None:
    """Return why ``password`` is too weak, or None when it is acceptable."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if not DIGIT_PATTERN.search(password):
        return "Password must contain at least one number"
    return None


def is_valid_role(role: str) -> bool:
    return role in VALID_ROLES
