from learng.utils.helpers import host, new_id, time_taken, today_str, utc_now
from learng.utils.validators import is_valid_email, is_valid_role, password_problem

__all__ = [
    "host",
    "is_valid_email",
    "is_valid_role",
    "new_id",
    "password_problem",
    "time_taken",
    "today_str",
    "utc_now",
]
