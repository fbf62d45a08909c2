from __future__ import annotations

import hmac
from typing import Optional

from sagre import config
from sagre.models import User


def check_credentials(
    email: str,
    password: str,
    *,
    admin_email: Optional[str] = None,
    admin_password: Optional[str] = None,
    admin_name: Optional[str] = None,
) -> Optional[User]:
    """
    Demo login: one hardcoded admin account (overridable via env).
    Returns the User, or None. Does not say which of email/password was wrong.
    """
    expected_email = admin_email if admin_email is not None else config.ADMIN_EMAIL
    expected_password = admin_password if admin_password is not None else config.ADMIN_PASSWORD

    email_ok = (email or "").strip().lower() == expected_email.strip().lower()
    password_ok = hmac.compare_digest(
        (password or "").encode("utf-8"), expected_password.encode("utf-8")
    )
    if not (email_ok and password_ok):
        return None
    return User(email=expected_email, name=admin_name or config.ADMIN_NAME)
